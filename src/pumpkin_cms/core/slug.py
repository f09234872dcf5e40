"""
Slugs de page — forme normalisée : minuscules, séparateurs (/, \\, espaces) → un tiret,
pas de tiret en tête/queue, jamais deux tirets consécutifs.

    "My Page/Title"       → "my-page-title"
    "home\\products"       → "home-products"
    "-leading-trailing-"  → "leading-trailing"
"""
import re

_SEPARATORS = re.compile(r"[\\/\s]+")
_HYPHEN_RUN = re.compile(r"-{2,}")


def normalize_slug(raw: str) -> str:
    """Normalise un slug (idempotent)."""
    if raw is None:
        return ""
    slug = _SEPARATORS.sub("-", str(raw).lower())
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def is_valid_slug(slug: str) -> bool:
    """Vrai ssi le slug est déjà sous forme normalisée."""
    return isinstance(slug, str) and normalize_slug(slug) == slug
