"""
Registry des blocs — table unique tag → modèle, lue par le codec ET par le renderer.

Aucune fonction de ce module ne lève : elles renvoient bool / None / bloc générique.
C'est à l'appelant de décider si un tag inconnu est une erreur (le codec choisit
la dégradation en bloc générique).
"""
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from .base import BaseBlock, BlockTag, GenericBlock, UNKNOWN_TAG
from .hero import HeroBlock
from .cta import PrimaryCtaBlock, SecondaryCtaBlock
from .content import CardGridBlock, FaqBlock
from .navigation import (
    BreadcrumbsBlock, TrustBarBlock, HowItWorksBlock,
    ServiceAreaMapBlock, LocalProTipsBlock,
)
from .interaction import GalleryBlock, TestimonialsBlock, ContactBlock
from .blog import BlogBlock

log = logging.getLogger(__name__)

BLOCK_REGISTRY: Dict[BlockTag, Type[BaseBlock]] = {
    BlockTag.HERO:             HeroBlock,
    BlockTag.PRIMARY_CTA:      PrimaryCtaBlock,
    BlockTag.SECONDARY_CTA:    SecondaryCtaBlock,
    BlockTag.CARD_GRID:        CardGridBlock,
    BlockTag.FAQ:              FaqBlock,
    BlockTag.BREADCRUMBS:      BreadcrumbsBlock,
    BlockTag.TRUST_BAR:        TrustBarBlock,
    BlockTag.HOW_IT_WORKS:     HowItWorksBlock,
    BlockTag.SERVICE_AREA_MAP: ServiceAreaMapBlock,
    BlockTag.LOCAL_PRO_TIPS:   LocalProTipsBlock,
    BlockTag.GALLERY:          GalleryBlock,
    BlockTag.TESTIMONIALS:     TestimonialsBlock,
    BlockTag.CONTACT:          ContactBlock,
    BlockTag.BLOG:             BlogBlock,
}

# Chaque modèle doit porter le Literal de sa clé
for _tag, _cls in BLOCK_REGISTRY.items():
    if _cls.model_fields["type"].default != _tag.value:
        raise RuntimeError(f"Registry incohérent : {_cls.__name__} ≠ {_tag.value!r}")

SUPPORTED_BLOCK_TYPES: List[str] = [tag.value for tag in BlockTag]
_KNOWN = frozenset(SUPPORTED_BLOCK_TYPES)


def is_known_tag(tag: Any) -> bool:
    return isinstance(tag, str) and tag in _KNOWN


def block_model_for(tag: Any) -> Optional[Type[BaseBlock]]:
    """Modèle typé d'un tag connu, None sinon."""
    if not is_known_tag(tag):
        return None
    return BLOCK_REGISTRY[BlockTag(tag)]


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, BaseBlock):
        return getattr(obj, key, None)
    return None


def is_block_like(obj: Any) -> bool:
    """Prédicat structurel minimal : `type` chaîne + `content` objet."""
    content = _field(obj, "content")
    return isinstance(_field(obj, "type"), str) and isinstance(content, (Mapping, BaseModel))


def is_block_of_type(block: Any, tag: str) -> bool:
    return _field(block, "type") == tag


def make_generic_block(tag: Any, payload: Optional[Mapping] = None) -> GenericBlock:
    """Bloc de repli conservant le tag d'origine et le payload brut."""
    if not isinstance(tag, str):
        tag = UNKNOWN_TAG
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True, warnings=False)
    elif not isinstance(payload, Mapping):
        payload = {}
    return GenericBlock(type=tag, content=dict(payload))


def narrow(block: Any, tag: str) -> Optional[BaseBlock]:
    """
    Re-type `block` sous `tag` si et seulement si block.type == tag.

    Raffinement, pas coercition : une instance déjà typée est renvoyée telle
    quelle. Un bloc générique (ou un dict) portant un tag connu est reconstruit
    dans son modèle typé sans rien perdre : les valeurs de type inattendu
    restent brutes. None seulement si ce n'est pas un bloc (content non-objet).
    """
    model = block_model_for(tag)
    if model is None or not is_block_of_type(block, tag) or not is_block_like(block):
        return None
    if isinstance(block, model):
        return block
    data = block.model_dump(by_alias=True, warnings=False) if isinstance(block, BaseBlock) else dict(block)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        log.debug("narrow(%s) impossible : %s", tag, e.error_count())
        return None
