"""Header et footer du site, à partir du thème tenant."""
import re
from datetime import date
from html import escape
from typing import List, Optional

from ..core.config import get_settings
from ..core.theme import MenuItem, Theme, visible_items
from ..styles import FOOTER_DEFAULTS, HEADER_DEFAULTS, merge_classes

_YEAR_RE = re.compile(r"\{year\}", re.IGNORECASE)


def _target(target: str) -> str:
    if target == "_blank":
        return ' target="_blank" rel="noopener"'
    return f' target="{escape(target)}"' if target else ""


# ── Header ───────────────────────────────────────────────────────────────────

def _nav_items(items: List[MenuItem], cls: dict, current_path: Optional[str]) -> str:
    html = ""
    for item in visible_items(items):
        children = visible_items(item.children)
        if children:
            links = "".join(
                f'<a href="{escape(c.url)}" class="{escape(cls["navDropdownItem"])}"{_target(c.target)}>{escape(c.label)}</a>'
                for c in children
            )
            html += (f'<div class="{escape(cls["navDropdown"])}">'
                     f'<button type="button" class="{escape(cls["navDropdownTrigger"])}" aria-haspopup="true">'
                     f'{escape(item.label)} <span aria-hidden="true">▾</span></button>'
                     f'<div class="{escape(cls["navDropdownMenu"])}">{links}</div></div>')
            continue
        active = current_path is not None and item.url == current_path
        slot   = "navLinkActive" if active else "navLink"
        aria   = ' aria-current="page"' if active else ""
        html += (f'<a href="{escape(item.url)}" class="{escape(cls[slot])}"{aria}'
                 f'{_target(item.target)}>{escape(item.label)}</a>')
    return html


def render_header(theme: Theme, current_path: Optional[str] = None) -> str:
    h   = theme.header
    cls = merge_classes(HEADER_DEFAULTS, h.class_names)

    root = cls["root"]
    if h.sticky and "sticky" not in root:
        root = f"{root} sticky top-0 z-40"

    if h.logo_url:
        logo = f'<img src="{escape(h.logo_url)}" alt="{escape(h.logo_alt or theme.name)}" class="{escape(cls["logoImage"])}">'
    else:
        logo = f'<span class="{escape(cls["logoText"])}">{escape(h.logo_alt or theme.name)}</span>'

    cta = ""
    if h.cta_text:
        cta = (f'<a href="{escape(h.cta_url or "#")}" class="{escape(cls["ctaButton"])}"'
               f'{_target(h.cta_target)}>{escape(h.cta_text)}</a>')

    return f"""<header class="{escape(root)}">
  <div class="{escape(cls["container"])}">
    <a href="/" class="{escape(cls["logoWrapper"])}">{logo}</a>
    <nav class="{escape(cls["nav"])}">{_nav_items(theme.menu, cls, current_path)}</nav>
    {cta}
  </div>
</header>"""


# ── Footer ───────────────────────────────────────────────────────────────────

def render_footer(theme: Theme, year: Optional[int] = None) -> str:
    f   = theme.footer
    cls = merge_classes(FOOTER_DEFAULTS, f.class_names)
    year = year or date.today().year

    if theme.header.logo_url:
        logo = (f'<img src="{escape(theme.header.logo_url)}" alt="{escape(theme.header.logo_alt or theme.name)}" '
                f'class="{escape(cls["brandLogoImage"])}">')
    else:
        logo = f'<span class="{escape(cls["brandLogoText"])}">{escape(theme.name)}</span>'
    description = f'<p class="{escape(cls["brandDescription"])}">{escape(f.description)}</p>' if f.description else ""

    # Une colonne par entrée de menu visible ayant des enfants
    columns = ""
    for item in visible_items(theme.menu):
        children = visible_items(item.children)
        if not children:
            continue
        links = "".join(
            f'<li><a href="{escape(c.url)}" class="{escape(cls["columnLink"])}"{_target(c.target)}>{escape(c.label)}</a></li>'
            for c in children
        )
        columns += (f'<div><h3 class="{escape(cls["columnTitle"])}">{escape(item.label)}</h3>'
                    f'<ul class="{escape(cls["columnList"])}">{links}</ul></div>')

    copyright_text = _YEAR_RE.sub(str(year), f.copyright) if f.copyright else f"© {year} {theme.name}".strip()
    built_with_url = get_settings().built_with_url

    return f"""<footer class="{escape(cls["root"])}">
  <div class="{escape(cls["container"])}">
    <div class="{escape(cls["topSection"])}">
      <div class="{escape(cls["brandSection"])}">
        <div class="{escape(cls["brandLogoWrapper"])}">{logo}</div>
        {description}
      </div>
      <div class="{escape(cls["columnsSection"])}">{columns}</div>
    </div>
    <div class="{escape(cls["bottomBar"])}">
      <div class="{escape(cls["bottomBarInner"])}">
        <p class="{escape(cls["copyright"])}">{escape(copyright_text)}</p>
        <a href="{escape(built_with_url)}" class="{escape(cls["builtWith"])}" target="_blank" rel="noopener">Built with Pumpkin CMS</a>
      </div>
    </div>
  </div>
</footer>"""
