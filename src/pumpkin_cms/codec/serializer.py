"""
Sérialisation Page → JSON canonique (clés wire, tous les champs présents).

Contrat non-levant symétrique du parser : "" si page None ou échec d'encodage.
"""
import logging
from typing import List, Optional

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from ..core.config import get_settings
from ..core.schemas import Page
from ..core.theme import Theme

log = logging.getLogger(__name__)


def _dump(model: Optional[BaseModel], prettify: Optional[bool]) -> str:
    if model is None:
        return ""
    if not isinstance(model, BaseModel):
        log.error("Sérialisation impossible : %s n'est pas un modèle", type(model).__name__)
        return ""

    settings = get_settings()
    pretty = settings.json_pretty if prettify is None else prettify
    try:
        return model.model_dump_json(by_alias=True, indent=settings.json_indent if pretty else None, warnings=False)
    except (PydanticSerializationError, ValueError, TypeError) as e:
        log.error("Échec sérialisation %s : %s", type(model).__name__, e)
        return ""


def serialize_page(page: Optional[Page], prettify: Optional[bool] = None) -> str:
    """Page → JSON (indentation selon PUMPKIN_JSON_PRETTY si prettify est None)."""
    return _dump(page, prettify)


def serialize_theme(theme: Optional[Theme], prettify: Optional[bool] = None) -> str:
    return _dump(theme, prettify)


def collect_block_types(page: Page) -> List[str]:
    """Tags distincts des blocs, dans l'ordre de première apparition (→ searchData.blockTypes)."""
    seen: List[str] = []
    for block in page.blocks:
        if block.type not in seen:
            seen.append(block.type)
    return seen
