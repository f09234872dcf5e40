"""
Blocs — exports publics + AnyBlock (union discriminée avec bras générique).
"""
from typing import Annotated, Any, Union

from pydantic import Discriminator, Tag

from .base import BaseBlock, BlockContent, BlockItem, BlockTag, GenericBlock, UNKNOWN_TAG, keep_raw_on_error
from .hero import HeroBlock, HeroContent
from .cta import PrimaryCtaBlock, PrimaryCtaContent, SecondaryCtaBlock, SecondaryCtaContent
from .content import Card, CardGridBlock, CardGridContent, FaqBlock, FaqContent, FaqItem
from .navigation import (
    BreadcrumbItem, BreadcrumbsBlock, BreadcrumbsContent,
    TrustBarItem, TrustBarBlock, TrustBarContent,
    Step, HowItWorksBlock, HowItWorksContent,
    ServiceAreaMapBlock, ServiceAreaMapContent,
    ProTipItem, LocalProTipsBlock, LocalProTipsContent,
)
from .interaction import (
    GalleryImage, GalleryBlock, GalleryContent,
    TestimonialItem, TestimonialsBlock, TestimonialsContent,
    FormField, SocialLink, ContactBlock, ContactContent,
)
from .blog import BlogBlock, BlogContent, RelatedPost
from .registry import (
    BLOCK_REGISTRY, SUPPORTED_BLOCK_TYPES,
    block_model_for, is_block_like, is_block_of_type, is_known_tag,
    make_generic_block, narrow,
)

GENERIC_ARM = "Generic"


def _block_discriminator(value: Any) -> str:
    """Tag connu → bras typé ; tout le reste (y compris GenericBlock) → bras générique."""
    if isinstance(value, GenericBlock):
        return GENERIC_ARM
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return tag if is_known_tag(tag) else GENERIC_ARM


# Utilisable comme type de champ Pydantic (ContentData.ContentBlocks)
AnyBlock = Annotated[
    Union[
        Annotated[HeroBlock,           Tag("Hero")],
        Annotated[PrimaryCtaBlock,     Tag("PrimaryCTA")],
        Annotated[SecondaryCtaBlock,   Tag("SecondaryCTA")],
        Annotated[CardGridBlock,       Tag("CardGrid")],
        Annotated[FaqBlock,            Tag("FAQ")],
        Annotated[BreadcrumbsBlock,    Tag("Breadcrumbs")],
        Annotated[TrustBarBlock,       Tag("TrustBar")],
        Annotated[HowItWorksBlock,     Tag("HowItWorks")],
        Annotated[ServiceAreaMapBlock, Tag("ServiceAreaMap")],
        Annotated[LocalProTipsBlock,   Tag("LocalProTips")],
        Annotated[GalleryBlock,        Tag("Gallery")],
        Annotated[TestimonialsBlock,   Tag("Testimonials")],
        Annotated[ContactBlock,        Tag("Contact")],
        Annotated[BlogBlock,           Tag("Blog")],
        Annotated[GenericBlock,        Tag(GENERIC_ARM)],
    ],
    Discriminator(_block_discriminator),
]

__all__ = [
    # Base
    "BaseBlock", "BlockContent", "BlockItem", "BlockTag", "GenericBlock", "UNKNOWN_TAG", "keep_raw_on_error",
    # Blocs typés
    "HeroBlock", "HeroContent",
    "PrimaryCtaBlock", "PrimaryCtaContent", "SecondaryCtaBlock", "SecondaryCtaContent",
    "Card", "CardGridBlock", "CardGridContent", "FaqBlock", "FaqContent", "FaqItem",
    "BreadcrumbItem", "BreadcrumbsBlock", "BreadcrumbsContent",
    "TrustBarItem", "TrustBarBlock", "TrustBarContent",
    "Step", "HowItWorksBlock", "HowItWorksContent",
    "ServiceAreaMapBlock", "ServiceAreaMapContent",
    "ProTipItem", "LocalProTipsBlock", "LocalProTipsContent",
    "GalleryImage", "GalleryBlock", "GalleryContent",
    "TestimonialItem", "TestimonialsBlock", "TestimonialsContent",
    "FormField", "SocialLink", "ContactBlock", "ContactContent",
    "BlogBlock", "BlogContent", "RelatedPost",
    # Registry
    "BLOCK_REGISTRY", "SUPPORTED_BLOCK_TYPES",
    "block_model_for", "is_block_like", "is_block_of_type", "is_known_tag",
    "make_generic_block", "narrow",
    # Union
    "AnyBlock", "GENERIC_ARM",
]
