"""Blocs CTA — appel à l'action principal (image + lien secondaire) et secondaire (sobre)."""
from typing import Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent


class PrimaryCtaContent(BlockContent):
    title: Optional[str] = ""
    description: Optional[str] = ""
    button_text: Optional[str] = ""
    button_link: Optional[str] = ""
    secondary_text: Optional[str] = ""
    secondary_link_text: Optional[str] = ""
    secondary_link: Optional[str] = ""
    background_image: Optional[str] = ""
    main_image: Optional[str] = ""
    alt: Optional[str] = ""


class PrimaryCtaBlock(BaseBlock):
    type: Literal["PrimaryCTA"] = "PrimaryCTA"
    content: PrimaryCtaContent = Field(default_factory=PrimaryCtaContent)


class SecondaryCtaContent(BlockContent):
    title: Optional[str] = ""
    description: Optional[str] = ""
    button_text: Optional[str] = ""
    button_link: Optional[str] = ""


class SecondaryCtaBlock(BaseBlock):
    type: Literal["SecondaryCTA"] = "SecondaryCTA"
    content: SecondaryCtaContent = Field(default_factory=SecondaryCtaContent)
