"""Renderer — dispatch polymorphe des blocs, header/footer, page complète, sitemap."""
from .dispatch import (
    BLOCK_VIEWS,
    BlockOverrides,
    BlogOverrides,
    ContactOverrides,
    render_block,
)
from .layout import render_footer, render_header
from .html import (
    SECTION_IDS,
    build_metadata,
    build_sitemap_xml,
    render_blocks,
    render_page,
    section_id,
)

__all__ = [
    "BLOCK_VIEWS",
    "BlockOverrides",
    "BlogOverrides",
    "ContactOverrides",
    "render_block",
    "render_header",
    "render_footer",
    "SECTION_IDS",
    "section_id",
    "render_blocks",
    "build_metadata",
    "render_page",
    "build_sitemap_xml",
]
