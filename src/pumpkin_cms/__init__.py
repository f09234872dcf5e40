"""
Pumpkin CMS — cœur du CMS : registry de blocs, codec JSON des pages,
surcharges de styles par tenant et rendu HTML polymorphe.

Usage :
    >>> from pumpkin_cms import parse_page, serialize_page, render_page
    >>> page = parse_page(open("pages/home.json", encoding="utf-8").read())
    >>> html = render_page(page)

Intégration FastAPI :
    >>> from pumpkin_cms.router import router
    >>> app.include_router(router)
"""

__version__ = "0.3.0"

# ── Blocs ───────────────────────────────────────────────────────────────────
from .blocks import (
    AnyBlock,
    BaseBlock,
    BlockTag,
    GenericBlock,
    BLOCK_REGISTRY,
    SUPPORTED_BLOCK_TYPES,
    UNKNOWN_TAG,
    is_block_like,
    is_block_of_type,
    is_known_tag,
    make_generic_block,
    narrow,
)

# ── Core ────────────────────────────────────────────────────────────────────
from .core import (
    Page,
    Theme,
    Settings,
    configure_logging,
    get_settings,
    is_valid_slug,
    normalize_slug,
)

# ── Codec ───────────────────────────────────────────────────────────────────
from .codec import (
    collect_block_types,
    is_valid_page_json,
    load_page,
    parse_page,
    parse_page_dict,
    parse_theme,
    save_page,
    serialize_page,
    serialize_theme,
)

# ── Styles ──────────────────────────────────────────────────────────────────
from .styles import DEFAULT_CLASS_NAMES, merge_classes, resolve_block_classes

# ── Renderer ────────────────────────────────────────────────────────────────
from .renderer import (
    BlockOverrides,
    BlogOverrides,
    ContactOverrides,
    build_metadata,
    build_sitemap_xml,
    render_block,
    render_blocks,
    render_footer,
    render_header,
    render_page,
)

__all__ = [
    "__version__",
    "AnyBlock", "BaseBlock", "BlockTag", "GenericBlock",
    "BLOCK_REGISTRY", "SUPPORTED_BLOCK_TYPES", "UNKNOWN_TAG",
    "is_block_like", "is_block_of_type", "is_known_tag", "make_generic_block", "narrow",
    "Page", "Theme", "Settings", "configure_logging", "get_settings",
    "is_valid_slug", "normalize_slug",
    "collect_block_types", "is_valid_page_json", "load_page", "parse_page",
    "parse_page_dict", "parse_theme", "save_page", "serialize_page", "serialize_theme",
    "DEFAULT_CLASS_NAMES", "merge_classes", "resolve_block_classes",
    "BlockOverrides", "BlogOverrides", "ContactOverrides",
    "build_metadata", "build_sitemap_xml", "render_block", "render_blocks",
    "render_footer", "render_header", "render_page",
]
