"""Bloc Hero — image de fond, titre, sous-titre, image principale et bouton."""
from typing import Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent


class HeroContent(BlockContent):
    type: Optional[str] = "Main"          # Main | Secondary | Tertiary
    headline: Optional[str] = ""
    subheadline: Optional[str] = ""
    background_image: Optional[str] = ""
    background_image_alt_text: Optional[str] = ""
    main_image: Optional[str] = ""
    main_image_alt_text: Optional[str] = ""
    button_text: Optional[str] = ""
    button_link: Optional[str] = ""


class HeroBlock(BaseBlock):
    type: Literal["Hero"] = "Hero"
    content: HeroContent = Field(default_factory=HeroContent)
