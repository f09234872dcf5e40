"""Core module pour pumpkin_cms — agrégat Page, thème, slugs, configuration."""
from .schemas import (
    WireModel,
    PageRecord,
    PageMetaData,
    SearchData,
    ContentData,
    AlternateUrl,
    OpenGraphData,
    TwitterCardData,
    SeoData,
    Page,
)
from .theme import MenuItem, ThemeHeader, ThemeFooter, Theme, visible_items
from .slug import normalize_slug, is_valid_slug
from .config import Settings, get_settings, configure_logging

__all__ = [
    "WireModel",
    "PageRecord",
    "PageMetaData",
    "SearchData",
    "ContentData",
    "AlternateUrl",
    "OpenGraphData",
    "TwitterCardData",
    "SeoData",
    "Page",
    "MenuItem",
    "ThemeHeader",
    "ThemeFooter",
    "Theme",
    "visible_items",
    "normalize_slug",
    "is_valid_slug",
    "Settings",
    "get_settings",
    "configure_logging",
]
