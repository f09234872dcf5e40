"""
Parser JSON → Page — frontière de confiance entre le JSON externe et l'agrégat.

Politique asymétrique :
  - structure de page invalide (PageId, pageSlug, PageVersion, MetaData,
    ContentData.ContentBlocks) → None, aucune page partielle
  - bloc sans type ou sans content objet → bloc générique de repli, la page reste valide
  - valeur de type inattendu → conservée brute, jamais de rejet ni de perte

Rien ne lève au-delà de ce module : les erreurs deviennent None (et un log).
"""
import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from ..blocks import (
    BaseBlock, GenericBlock, UNKNOWN_TAG,
    block_model_for, is_block_like, make_generic_block,
)
from ..core.schemas import Page
from ..core.slug import normalize_slug
from ..core.theme import Theme

log = logging.getLogger(__name__)


# ── Structure ────────────────────────────────────────────────────────────────

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def has_page_shape(obj: Any) -> bool:
    """Contrôle structurel du niveau racine (sans construire la Page)."""
    if not isinstance(obj, dict):
        return False
    content_data = obj.get("ContentData")
    return (
        isinstance(obj.get("PageId"), str)
        and isinstance(obj.get("pageSlug"), str)
        and _is_number(obj.get("PageVersion"))
        and isinstance(obj.get("MetaData"), dict)
        and isinstance(content_data, dict)
        and isinstance(content_data.get("ContentBlocks"), list)
    )


def _loads(json_text: Any) -> Optional[Any]:
    if not isinstance(json_text, (str, bytes)) or not json_text.strip():
        return None
    try:
        return json.loads(json_text)
    except (ValueError, RecursionError) as e:
        log.warning("JSON invalide : %s", e)
        return None


def is_valid_page_json(json_text: str) -> bool:
    """Pré-vol : même contrôle que parse_page étape 2, sans normalisation."""
    return has_page_shape(_loads(json_text))


# ── Blocs ────────────────────────────────────────────────────────────────────

def process_block(raw: Any) -> BaseBlock:
    """
    Un élément brut de ContentBlocks → bloc typé ou générique (ne lève jamais).

    - pas un objet / type non chaîne     → générique "Unknown", {}
    - content absent ou non-objet        → générique (tag conservé), {}
    - tag connu, content objet           → bloc typé ; les valeurs de type
                                           inattendu restent brutes, rien n'est perdu
    - tag inconnu                        → générique, tag + payload intacts
    """
    if isinstance(raw, BaseBlock):
        return raw

    if not is_block_like(raw):
        tag = raw.get("type") if isinstance(raw, Mapping) else None
        if isinstance(tag, str):
            log.warning("Bloc %r : content absent ou invalide → bloc générique vide", tag)
            return make_generic_block(tag, {})
        log.warning("Structure de bloc invalide → bloc %r", UNKNOWN_TAG)
        return make_generic_block(UNKNOWN_TAG, {})

    tag = raw["type"]
    model = block_model_for(tag) or GenericBlock
    try:
        return model.model_validate(dict(raw))
    except ValidationError as e:
        # filet : tag + payload conservés tels quels
        log.warning("Bloc %r : %d erreur(s) de validation → bloc générique", tag, e.error_count())
        return make_generic_block(tag, raw["content"])


# ── Page ─────────────────────────────────────────────────────────────────────

def parse_page_dict(data: Any) -> Optional[Page]:
    """Comme parse_page, sur un objet JSON déjà décodé."""
    if not has_page_shape(data):
        log.warning("Document rejeté : structure de page invalide")
        return None

    doc = dict(data)
    doc["pageSlug"] = normalize_slug(data["pageSlug"])
    content_data = dict(data["ContentData"])
    content_data["ContentBlocks"] = [process_block(b) for b in data["ContentData"]["ContentBlocks"]]
    doc["ContentData"] = content_data

    try:
        page = Page.model_validate(doc)
    except ValidationError as e:
        log.warning("Document rejeté (%s) : %d erreur(s)", data.get("PageId"), e.error_count())
        return None

    log.debug("Page %s parsée : %d bloc(s)", page.page_id, len(page.blocks))
    return page


def parse_page(json_text: str) -> Optional[Page]:
    """
    JSON → Page validée et normalisée, ou None.

    1. None si entrée vide / JSON invalide
    2. None si structure racine invalide
    3. slug normalisé
    4. chaque bloc passe par process_block (longueur conservée)
    5. valeurs de type inattendu conservées brutes : jamais None au-delà de 2.
    """
    data = _loads(json_text)
    if data is None:
        return None
    return parse_page_dict(data)


def parse_theme(json_text: str) -> Optional[Theme]:
    """JSON → Theme, ou None (même contrat non-levant que parse_page)."""
    data = _loads(json_text)
    if not isinstance(data, dict):
        return None
    try:
        return Theme.model_validate(data)
    except ValidationError as e:
        log.warning("Thème rejeté : %d erreur(s)", e.error_count())
        return None
