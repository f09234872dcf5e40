"""
Renderer HTML — document complet d'une Page (head SEO + header + blocs + footer)
et sitemap XML d'un ensemble de pages.
"""
import json
import logging
import re
from datetime import datetime
from html import escape
from typing import Any, Dict, Iterable, Mapping, Optional
from xml.sax.saxutils import escape as xml_escape

from ..core.schemas import AlternateUrl, OpenGraphData, Page, SeoData, TwitterCardData
from ..core.theme import Theme
from .dispatch import BlockOverrides, Fallback, render_block
from .layout import render_footer, render_header

log = logging.getLogger(__name__)

# Ancres de section stables (liens du menu "#features", "#faq"…)
SECTION_IDS: Dict[str, str] = {
    "Hero":         "hero",
    "CardGrid":     "features",
    "HowItWorks":   "how-it-works",
    "FAQ":          "faq",
    "Blog":         "blog",
    "Contact":      "contact",
    "Testimonials": "testimonials",
    "Gallery":      "gallery",
}

_MULTI_SLASH      = re.compile(r"(?<!:)/{2,}")
_SCRIPT_CLOSE_ESC = "<\\/"


def section_id(block: Any) -> str:
    tag = getattr(block, "type", "") or ""
    return SECTION_IDS.get(tag) or str(getattr(block, "id", None) or "") or tag.lower()


# ── Blocs ────────────────────────────────────────────────────────────────────

def render_blocks(
    page: Page,
    block_styles: Optional[Mapping[str, Mapping[str, str]]] = None,
    overrides: Optional[BlockOverrides] = None,
    fallback: Optional[Fallback] = None,
) -> str:
    """Blocs actifs (enabled != False), chacun dans sa <section>."""
    parts = []
    for block in page.blocks:
        if getattr(block, "enabled", None) is False:
            continue
        inner = render_block(block, block_styles, overrides, fallback)
        if not inner:
            continue
        parts.append(f'<section id="{escape(section_id(block))}">\n{inner}\n</section>')
    return "\n".join(parts)


# ── Head ─────────────────────────────────────────────────────────────────────

def _str(value: Any) -> str:
    """Valeur texte du <head> ; une valeur brute non textuelle compte pour vide."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _keywords(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ", ".join(_str(k) for k in value if _str(k))
    return ""


def build_metadata(page: Page) -> Dict[str, Any]:
    """Valeurs du <head> : seo en priorité, puis MetaData ; og/twitter retombent sur seo."""
    seo = page.seo if isinstance(page.seo, SeoData) else SeoData()
    og  = seo.open_graph if isinstance(seo.open_graph, OpenGraphData) else OpenGraphData()
    tw  = seo.twitter_card if isinstance(seo.twitter_card, TwitterCardData) else TwitterCardData()
    alternates = seo.alternate_urls if isinstance(seo.alternate_urls, list) else []

    title       = _str(seo.meta_title) or _str(page.meta_data.title)
    description = _str(seo.meta_description) or _str(page.meta_data.description)
    canonical   = _str(seo.canonical_url)
    return {
        "title":       title,
        "description": description,
        "keywords":    _keywords(seo.keywords),
        "robots":      _str(seo.robots),
        "canonical":   canonical,
        "alternates":  [
            (_str(a.href_lang), _str(a.href))
            for a in alternates
            if isinstance(a, AlternateUrl) and _str(a.href)
        ],
        "og": {
            "og:title":       _str(og.title) or title,
            "og:description": _str(og.description) or description,
            "og:type":        _str(og.type),
            "og:url":         _str(og.url) or canonical,
            "og:image":       _str(og.image),
            "og:image:alt":   _str(og.image_alt),
            "og:site_name":   _str(og.site_name),
            "og:locale":      _str(og.locale),
        },
        "twitter": {
            "twitter:card":        _str(tw.card),
            "twitter:title":       _str(tw.title) or _str(og.title) or title,
            "twitter:description": _str(tw.description) or _str(og.description) or description,
            "twitter:image":       _str(tw.image) or _str(og.image),
            "twitter:site":        _str(tw.site),
            "twitter:creator":     _str(tw.creator),
        },
    }


def _json_ld(structured: Any) -> str:
    if not structured:
        return ""
    if isinstance(structured, str):
        payloads = [structured]
    else:
        items = structured if isinstance(structured, list) else [structured]
        payloads = [json.dumps(item, ensure_ascii=False) for item in items]
    # "</" fermerait la balise <script>
    safe = [p.replace("</", _SCRIPT_CLOSE_ESC) for p in payloads]
    return "\n  ".join(f'<script type="application/ld+json">{p}</script>' for p in safe)


def _render_head(meta: Dict[str, Any]) -> str:
    lines = [f"<title>{escape(meta['title'])}</title>"]
    if meta["description"]:
        lines.append(f'<meta name="description" content="{escape(meta["description"])}">')
    if meta["keywords"]:
        lines.append(f'<meta name="keywords" content="{escape(meta["keywords"])}">')
    if meta["robots"]:
        lines.append(f'<meta name="robots" content="{escape(meta["robots"])}">')
    if meta["canonical"]:
        lines.append(f'<link rel="canonical" href="{escape(meta["canonical"])}">')
    for lang, href in meta["alternates"]:
        lines.append(f'<link rel="alternate" hreflang="{escape(lang)}" href="{escape(href)}">')
    for prop, value in meta["og"].items():
        if value:
            lines.append(f'<meta property="{prop}" content="{escape(value)}">')
    for name, value in meta["twitter"].items():
        if value:
            lines.append(f'<meta name="{name}" content="{escape(value)}">')
    return "\n  ".join(lines)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_page(
    page: Page,
    theme: Optional[Theme] = None,
    overrides: Optional[BlockOverrides] = None,
    fallback: Optional[Fallback] = None,
    extra_head: str = "",
) -> str:
    """Génère le HTML complet d'une page."""
    head         = _render_head(build_metadata(page))
    json_ld      = _json_ld(page.seo.structured_data if isinstance(page.seo, SeoData) else None)
    block_styles = theme.block_styles if theme else None
    header_html  = render_header(theme, current_path=f"/{page.page_slug}") if theme else ""
    footer_html  = render_footer(theme) if theme else ""
    blocks_html  = render_blocks(page, block_styles, overrides, fallback)
    log.debug("Page rendue : %s (%d blocs)", page.page_slug, len(page.blocks))

    return f"""<!DOCTYPE html>
<html lang="{escape(_str(page.meta_data.language) or 'en')}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  {head}
  {json_ld}
  {extra_head}
</head>
<body>
{header_html}
<main>
{blocks_html}
</main>
{footer_html}
</body>
</html>"""


# ── Sitemap ──────────────────────────────────────────────────────────────────

def _lastmod(page: Page) -> str:
    raw = _str(page.published_at) or _str(page.meta_data.updated_at)
    if not raw:
        return ""
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        log.debug("Date illisible pour %s : %r", page.page_slug, raw)
        return ""


def build_sitemap_xml(pages: Iterable[Page], base_url: str) -> str:
    """<urlset> des pages incluses dans le sitemap."""
    entries = []
    for page in pages:
        if not page.include_in_sitemap:
            continue
        loc = _MULTI_SLASH.sub("/", f"{base_url.rstrip('/')}/{page.page_slug}")
        lastmod = _lastmod(page)
        lastmod_xml = f"<lastmod>{lastmod}</lastmod>" if lastmod else ""
        entries.append(f"  <url><loc>{xml_escape(loc)}</loc>{lastmod_xml}</url>")

    body = "\n".join(entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{body}\n"
        "</urlset>"
    )
