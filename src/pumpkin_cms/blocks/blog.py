"""Bloc Blog — article complet (auteur, tags, corps HTML, articles liés)."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockItem


class RelatedPost(BlockItem):
    title: Optional[str] = ""
    slug: Optional[str] = ""
    excerpt: Optional[str] = ""
    image: Optional[str] = ""
    image_alt: Optional[str] = ""
    published_date: Optional[str] = ""


class BlogContent(BlockContent):
    title: Optional[str] = ""
    subtitle: Optional[str] = ""
    author: Optional[str] = ""
    author_image: Optional[str] = ""
    author_bio: Optional[str] = ""
    published_date: Optional[str] = ""
    featured_image: Optional[str] = ""
    featured_image_alt: Optional[str] = ""
    excerpt: Optional[str] = ""
    body: Optional[str] = ""                 # HTML (ou Markdown si render_body fourni)
    tags: Optional[List[str]] = Field(default_factory=list)
    categories: Optional[List[str]] = Field(default_factory=list)
    reading_time: Optional[int] = 0
    related_posts: Optional[List[RelatedPost]] = Field(default_factory=list)


class BlogBlock(BaseBlock):
    type: Literal["Blog"] = "Blog"
    content: BlogContent = Field(default_factory=BlogContent)
