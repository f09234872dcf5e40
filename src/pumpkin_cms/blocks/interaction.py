"""Blocs d'interaction — galerie, témoignages, contact (formulaire)."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockItem


# ── Gallery ──────────────────────────────────────────────────────────────────

class GalleryImage(BlockItem):
    src: Optional[str] = ""
    alt: Optional[str] = ""
    caption: Optional[str] = ""


class GalleryContent(BlockContent):
    title: Optional[str] = ""
    subtitle: Optional[str] = ""
    images: Optional[List[GalleryImage]] = Field(default_factory=list)


class GalleryBlock(BaseBlock):
    type: Literal["Gallery"] = "Gallery"
    content: GalleryContent = Field(default_factory=GalleryContent)


# ── Testimonials ─────────────────────────────────────────────────────────────

class TestimonialItem(BlockItem):
    quote: Optional[str] = ""
    author: Optional[str] = ""
    event_type: Optional[str] = ""
    rating: Optional[int] = 0


class TestimonialsContent(BlockContent):
    title: Optional[str] = ""
    subtitle: Optional[str] = ""
    layout: Optional[str] = ""
    items: Optional[List[TestimonialItem]] = Field(default_factory=list)


class TestimonialsBlock(BaseBlock):
    type: Literal["Testimonials"] = "Testimonials"
    content: TestimonialsContent = Field(default_factory=TestimonialsContent)


# ── Contact ──────────────────────────────────────────────────────────────────

class FormField(BlockItem):
    label: Optional[str] = ""
    type: Optional[str] = "text"
    required: Optional[bool] = False
    placeholder: Optional[str] = ""


class SocialLink(BlockItem):
    platform: Optional[str] = ""
    url: Optional[str] = ""
    icon: Optional[str] = ""


class ContactContent(BlockContent):
    id: Optional[str] = ""
    title: Optional[str] = ""
    subtitle: Optional[str] = ""
    address: Optional[str] = ""
    phone: Optional[str] = ""
    email: Optional[str] = ""
    hours: Optional[str] = ""
    form_fields: Optional[List[FormField]] = Field(default_factory=list)
    submit_button_text: Optional[str] = ""
    social_links: Optional[List[SocialLink]] = Field(default_factory=list)


class ContactBlock(BaseBlock):
    type: Literal["Contact"] = "Contact"
    content: ContactContent = Field(default_factory=ContactContent)
