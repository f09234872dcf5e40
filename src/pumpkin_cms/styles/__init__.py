"""Styles — fusion full-replace des slots + classes par défaut."""
from .merge import SlotMap, merge_classes
from .defaults import (
    DEFAULT_CLASS_NAMES,
    FOOTER_DEFAULTS,
    HEADER_DEFAULTS,
    resolve_block_classes,
)

__all__ = [
    "SlotMap",
    "merge_classes",
    "DEFAULT_CLASS_NAMES",
    "HEADER_DEFAULTS",
    "FOOTER_DEFAULTS",
    "resolve_block_classes",
]
