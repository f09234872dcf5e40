"""Blocs de contenu — grille de cartes et FAQ."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockItem


class Card(BlockItem):
    title: Optional[str] = ""
    description: Optional[str] = ""
    image: Optional[str] = ""
    image_alt: Optional[str] = Field(default="", alias="image-alt")
    icon: Optional[str] = ""
    link: Optional[str] = ""
    alt: Optional[str] = ""


class CardGridContent(BlockContent):
    title: Optional[str] = ""
    subtitle: Optional[str] = ""
    layout: Optional[str] = ""
    cards: Optional[List[Card]] = Field(default_factory=list)


class CardGridBlock(BaseBlock):
    type: Literal["CardGrid"] = "CardGrid"
    content: CardGridContent = Field(default_factory=CardGridContent)


class FaqItem(BlockItem):
    question: Optional[str] = ""
    answer: Optional[str] = ""


class FaqContent(BlockContent):
    title: Optional[str] = ""
    subtitle: Optional[str] = ""
    layout: Optional[str] = ""
    items: Optional[List[FaqItem]] = Field(default_factory=list)


class FaqBlock(BaseBlock):
    type: Literal["FAQ"] = "FAQ"
    content: FaqContent = Field(default_factory=FaqContent)
