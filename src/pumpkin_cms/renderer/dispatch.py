"""
Dispatch polymorphe — bloc → vue HTML.

render_block(block) :
  1. tag connu → narrow() vers le modèle typé
  2. slot map = défauts du tag ⊕ class_names[tag] (full-replace)
  3. vue du tag (table BLOCK_VIEWS) avec les surcharges comportementales du tag
Tag inconnu ou bloc sans content objet → fallback(block) si fourni, sinon "".
Un payload de forme inattendue reste rendu par sa vue (valeurs brutes tolérées).
"""
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from ..blocks import BlockTag, is_known_tag, narrow
from ..styles import DEFAULT_CLASS_NAMES, merge_classes
from . import views

log = logging.getLogger(__name__)

Fallback = Callable[[Any], str]


# ── Surcharges comportementales ──────────────────────────────────────────────

class ContactOverrides(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    on_submit: Optional[Callable[[], str]] = None    # → attribut onsubmit du formulaire
    form_action: Optional[str] = None


class BlogOverrides(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    render_body: Optional[Callable[[str], str]] = None  # Markdown → HTML, sanitizer…


class BlockOverrides(BaseModel):
    """Surcharges par type de bloc. Absentes → comportement par défaut."""
    contact: Optional[ContactOverrides] = None
    blog: Optional[BlogOverrides] = None


_OVERRIDE_FIELDS: Dict[BlockTag, str] = {
    BlockTag.CONTACT: "contact",
    BlockTag.BLOG:    "blog",
}


# ── Table de dispatch ────────────────────────────────────────────────────────

BLOCK_VIEWS: Dict[BlockTag, Callable[..., str]] = {
    BlockTag.HERO:             views.render_hero_block,
    BlockTag.PRIMARY_CTA:      views.render_primary_cta_block,
    BlockTag.SECONDARY_CTA:    views.render_secondary_cta_block,
    BlockTag.CARD_GRID:        views.render_card_grid_block,
    BlockTag.FAQ:              views.render_faq_block,
    BlockTag.BREADCRUMBS:      views.render_breadcrumbs_block,
    BlockTag.TRUST_BAR:        views.render_trust_bar_block,
    BlockTag.HOW_IT_WORKS:     views.render_how_it_works_block,
    BlockTag.SERVICE_AREA_MAP: views.render_service_area_map_block,
    BlockTag.LOCAL_PRO_TIPS:   views.render_local_pro_tips_block,
    BlockTag.GALLERY:          views.render_gallery_block,
    BlockTag.TESTIMONIALS:     views.render_testimonials_block,
    BlockTag.CONTACT:          views.render_contact_block,
    BlockTag.BLOG:             views.render_blog_block,
}

if set(BLOCK_VIEWS) != set(BlockTag):
    raise RuntimeError(f"Vues manquantes : {sorted(set(BlockTag) - set(BLOCK_VIEWS))}")


def _tag_of(block: Any) -> Any:
    if isinstance(block, Mapping):
        return block.get("type")
    return getattr(block, "type", None)


def _unrendered(block: Any, fallback: Optional[Fallback]) -> str:
    return fallback(block) if fallback is not None else ""


def render_block(
    block: Any,
    class_names: Optional[Mapping[str, Mapping[str, str]]] = None,
    overrides: Optional[BlockOverrides] = None,
    fallback: Optional[Fallback] = None,
) -> str:
    """Rend un bloc (typé, générique ou dict brut). Ne lève jamais sur un tag inconnu."""
    tag = _tag_of(block)
    if not is_known_tag(tag):
        log.debug("Bloc non rendu (tag inconnu) : %r", tag)
        return _unrendered(block, fallback)

    tag = BlockTag(tag)
    typed = narrow(block, tag.value)
    if typed is None:
        log.warning("Bloc %s non re-typable, rendu de repli", tag.value)
        return _unrendered(block, fallback)

    cls = merge_classes(DEFAULT_CLASS_NAMES[tag], (class_names or {}).get(tag.value))
    field = _OVERRIDE_FIELDS.get(tag)
    ov = getattr(overrides, field, None) if (overrides is not None and field) else None
    return BLOCK_VIEWS[tag](typed, cls, ov)
