"""Codec JSON des pages — parser + serializer + fichiers."""
from ..core.slug import normalize_slug, is_valid_slug
from .parser import (
    has_page_shape,
    is_valid_page_json,
    parse_page,
    parse_page_dict,
    parse_theme,
    process_block,
)
from .serializer import collect_block_types, serialize_page, serialize_theme
from .files import load_page, save_page

__all__ = [
    "has_page_shape",
    "is_valid_page_json",
    "parse_page",
    "parse_page_dict",
    "parse_theme",
    "process_block",
    "serialize_page",
    "serialize_theme",
    "collect_block_types",
    "load_page",
    "save_page",
    "normalize_slug",
    "is_valid_slug",
]
