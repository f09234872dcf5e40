"""Lecture / écriture de pages JSON sur disque (fixtures, exports, seeds)."""
import logging
from pathlib import Path
from typing import Optional, Union

from ..core.schemas import Page
from .parser import parse_page
from .serializer import serialize_page

log = logging.getLogger(__name__)


def load_page(path: Union[str, Path]) -> Optional[Page]:
    """Fichier JSON → Page, None si absent / illisible / invalide."""
    path = Path(path)
    if not path.is_file():
        log.warning("Page introuvable : %s", path)
        return None
    try:
        with open(path, encoding="utf-8") as f:
            return parse_page(f.read())
    except (OSError, UnicodeDecodeError) as e:
        log.error("Lecture impossible %s : %s", path, e)
        return None


def save_page(page: Optional[Page], path: Union[str, Path]) -> bool:
    """Page → fichier JSON (dossiers parents créés). False en cas d'échec."""
    json_text = serialize_page(page)
    if not json_text:
        return False
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(json_text)
    except OSError as e:
        log.error("Écriture impossible %s : %s", path, e)
        return False
    return True
