"""
Vues HTML des 14 blocs typés.

Signature commune : view(block, cls, ov) → str
  block : bloc typé (déjà re-typé par narrow)
  cls   : slot map effective (défauts ⊕ surcharges tenant)
  ov    : surcharges comportementales du tag (ou None)

Les champs optionnels absents sont traités comme vides ; tout le texte est échappé.
Une valeur restée brute (type inattendu) est affichée telle quelle ou ignorée,
jamais une exception.
"""
from html import escape
from typing import Any, Dict

from pydantic import BaseModel

from ..blocks import (
    BlogBlock, BreadcrumbsBlock, CardGridBlock, ContactBlock, FaqBlock,
    GalleryBlock, HeroBlock, HowItWorksBlock, LocalProTipsBlock,
    PrimaryCtaBlock, SecondaryCtaBlock, ServiceAreaMapBlock,
    TestimonialsBlock, TrustBarBlock,
)

Slots = Dict[str, str]


def _e(value: Any) -> str:
    return escape(str(value)) if value not in (None, "") else ""


def _c(cls: Slots, slot: str) -> str:
    return _e(cls.get(slot, ""))


def _items(values: Any) -> list:
    """Éléments typés d'une liste de payload ; les éléments restés bruts sont ignorés."""
    if not isinstance(values, (list, tuple)):
        return []
    return [v for v in values if isinstance(v, BaseModel)]


def _list(values: Any) -> list:
    """Liste de valeurs simples (tags, codes postaux…) ; une chaîne seule compte pour un élément."""
    if isinstance(values, (list, tuple)):
        return [v for v in values if v not in (None, "") and not isinstance(v, (dict, list))]
    if isinstance(values, str) and values:
        return [values]
    return []


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _header(c: Any, cls: Slots) -> str:
    """Bloc titre + sous-titre commun aux sections à grille."""
    if not (c.title or c.subtitle):
        return ""
    title    = f'<h2 class="{_c(cls, "title")}">{_e(c.title)}</h2>' if c.title else ""
    subtitle = f'<p class="{_c(cls, "subtitle")}">{_e(c.subtitle)}</p>' if c.subtitle else ""
    return f'<div class="{_c(cls, "header")}">{title}{subtitle}</div>'


# ── Hero / CTA ───────────────────────────────────────────────────────────────

def render_hero_block(b: HeroBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    style_attr   = f' style="background-image:url(\'{_e(d.background_image)}\')"' if d.background_image else ""
    overlay      = f'<div class="{_c(cls, "overlay")}"></div>' if d.background_image else ""
    subheadline  = f'<p class="{_c(cls, "subheadline")}">{_e(d.subheadline)}</p>' if d.subheadline else ""
    main_image   = (f'<img src="{_e(d.main_image)}" alt="{_e(d.main_image_alt_text)}" class="{_c(cls, "mainImage")}">'
                    if d.main_image else "")
    button       = (f'<a href="{_e(d.button_link) or "#"}" class="{_c(cls, "button")}">{_e(d.button_text)}</a>'
                    if d.button_text else "")

    return f"""<div class="{_c(cls, "root")}"{style_attr}>
  {overlay}
  <div class="{_c(cls, "container")}">
    <h1 class="{_c(cls, "headline")}">{_e(d.headline)}</h1>
    {subheadline}{main_image}{button}
  </div>
</div>"""


def render_primary_cta_block(b: PrimaryCtaBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    style_attr  = f' style="background-image:url(\'{_e(d.background_image)}\')"' if d.background_image else ""
    overlay     = f'<div class="{_c(cls, "overlay")}"></div>' if d.background_image else ""
    description = f'<p class="{_c(cls, "description")}">{_e(d.description)}</p>' if d.description else ""
    button      = (f'<a href="{_e(d.button_link) or "#"}" class="{_c(cls, "button")}">{_e(d.button_text)}</a>'
                   if d.button_text else "")

    secondary = ""
    if d.secondary_text or d.secondary_link:
        link = (f' <a href="{_e(d.secondary_link)}" class="{_c(cls, "secondaryLink")}">'
                f'{_e(d.secondary_link_text or d.secondary_link)}</a>' if d.secondary_link else "")
        secondary = f'<p class="{_c(cls, "secondaryWrapper")}">{_e(d.secondary_text)}{link}</p>'

    main_image = (f'<img src="{_e(d.main_image)}" alt="{_e(d.alt)}" class="{_c(cls, "mainImage")}">'
                  if d.main_image else "")

    return f"""<div class="{_c(cls, "root")}"{style_attr}>
  {overlay}
  <div class="{_c(cls, "container")}">
    <div class="{_c(cls, "textWrapper")}">
      <h2 class="{_c(cls, "title")}">{_e(d.title)}</h2>
      {description}{button}{secondary}
    </div>
    {main_image}
  </div>
</div>"""


def render_secondary_cta_block(b: SecondaryCtaBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content
    description = f'<p class="{_c(cls, "description")}">{_e(d.description)}</p>' if d.description else ""
    button      = (f'<a href="{_e(d.button_link) or "#"}" class="{_c(cls, "button")}">{_e(d.button_text)}</a>'
                   if d.button_text else "")
    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    <h2 class="{_c(cls, "title")}">{_e(d.title)}</h2>
    {description}{button}
  </div>
</div>"""


# ── Contenu ──────────────────────────────────────────────────────────────────

def render_card_grid_block(b: CardGridBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    cards_html = ""
    for card in _items(d.cards):
        image = (f'<img src="{_e(card.image)}" alt="{_e(card.image_alt or card.alt)}" class="{_c(cls, "cardImage")}">'
                 if card.image else "")
        icon  = f'<div class="{_c(cls, "cardIcon")}">{_e(card.icon)}</div>' if card.icon else ""
        desc  = f'<p class="{_c(cls, "cardDescription")}">{_e(card.description)}</p>' if card.description else ""
        link  = f'<a href="{_e(card.link)}" class="{_c(cls, "cardLink")}">Learn more →</a>' if card.link else ""
        cards_html += f"""<div class="{_c(cls, "card")}">
  {image}
  <div class="{_c(cls, "cardBody")}">{icon}<h3 class="{_c(cls, "cardTitle")}">{_e(card.title)}</h3>{desc}{link}</div>
</div>"""

    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {_header(d, cls)}
    <div class="{_c(cls, "grid")}">{cards_html}</div>
  </div>
</div>"""


def render_faq_block(b: FaqBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    items_html = "".join(
        f'<div class="{_c(cls, "item")}">'
        f'<button type="button" class="{_c(cls, "question")}"><span>{_e(item.question)}</span>'
        f'<span class="{_c(cls, "questionIcon")}">+</span></button>'
        f'<div class="{_c(cls, "answer")}">{_e(item.answer)}</div>'
        f'</div>'
        for item in _items(d.items)
    )

    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {_header(d, cls)}
    <div class="{_c(cls, "list")}">{items_html}</div>
  </div>
</div>"""


# ── Navigation / réassurance ─────────────────────────────────────────────────

def render_breadcrumbs_block(b: BreadcrumbsBlock, cls: Slots, ov: Any = None) -> str:
    parts = []
    for i, item in enumerate(_items(b.content.items)):
        sep = f'<span class="{_c(cls, "separator")}">/</span>' if i > 0 else ""
        if item.current:
            label = f'<span class="{_c(cls, "itemCurrent")}" aria-current="page">{_e(item.label)}</span>'
        elif item.url:
            label = f'<a href="{_e(item.url)}" class="{_c(cls, "link")}">{_e(item.label)}</a>'
        else:
            label = _e(item.label)
        parts.append(f'<li class="{_c(cls, "item")}">{sep}{label}</li>')

    return f"""<nav aria-label="Breadcrumb" class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    <ol class="{_c(cls, "list")}">{"".join(parts)}</ol>
  </div>
</nav>"""


def render_trust_bar_block(b: TrustBarBlock, cls: Slots, ov: Any = None) -> str:
    items_html = ""
    for item in _items(b.content.items):
        icon = (f'<img src="{_e(item.icon)}" alt="{_e(item.alt or item.title)}" class="{_c(cls, "icon")}">'
                if item.icon else "")
        text = f'<p class="{_c(cls, "itemText")}">{_e(item.text)}</p>' if item.text else ""
        items_html += (f'<div class="{_c(cls, "item")}">{icon}'
                       f'<p class="{_c(cls, "itemTitle")}">{_e(item.title)}</p>{text}</div>')

    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    <div class="{_c(cls, "grid")}">{items_html}</div>
  </div>
</div>"""


def render_how_it_works_block(b: HowItWorksBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    steps_html = ""
    for i, step in enumerate(_items(d.steps)):
        if step.image:
            marker = f'<img src="{_e(step.image)}" alt="{_e(step.alt or step.title)}" class="{_c(cls, "stepImage")}">'
        else:
            marker = f'<div class="{_c(cls, "stepNumber")}">{i + 1}</div>'
        steps_html += (f'<div class="{_c(cls, "step")}">{marker}'
                       f'<h3 class="{_c(cls, "stepTitle")}">{_e(step.title)}</h3>'
                       f'<p class="{_c(cls, "stepText")}">{_e(step.text)}</p></div>')

    title = f'<h2 class="{_c(cls, "title")}">{_e(d.title)}</h2>' if d.title else ""
    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {title}
    <div class="{_c(cls, "steps")}">{steps_html}</div>
  </div>
</div>"""


def render_service_area_map_block(b: ServiceAreaMapBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    map_html = ""
    if d.map_embed_url:
        map_html = (f'<div class="{_c(cls, "mapWrapper")}">'
                    f'<iframe src="{_e(d.map_embed_url)}" title="{_e(d.title or "Service area map")}" '
                    f'class="{_c(cls, "mapIframe")}" loading="lazy" allowfullscreen></iframe></div>')

    lists_html = ""
    for label, values in (("Neighborhoods", d.neighborhoods),
                          ("Zip Codes", d.zip_codes),
                          ("Nearby Cities", d.nearby_cities)):
        values = _list(values)
        if not values:
            continue
        lis = "".join(f'<li class="{_c(cls, "listItem")}">{_e(v)}</li>' for v in values)
        lists_html += (f'<div class="{_c(cls, "listSection")}">'
                       f'<h3 class="{_c(cls, "listTitle")}">{label}</h3>'
                       f'<ul class="{_c(cls, "listItems")}">{lis}</ul></div>')
    if lists_html:
        lists_html = f'<div class="{_c(cls, "lists")}">{lists_html}</div>'

    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {_header(d, cls)}
    {map_html}
    {lists_html}
  </div>
</div>"""


def render_local_pro_tips_block(b: LocalProTipsBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    items_html = ""
    for item in _items(d.items):
        if item.image:
            visual = f'<img src="{_e(item.image)}" alt="{_e(item.title)}" class="{_c(cls, "itemImage")}">'
        elif item.icon:
            visual = f'<span class="{_c(cls, "itemIcon")}">{_e(item.icon)}</span>'
        else:
            visual = ""
        items_html += (f'<div class="{_c(cls, "item")}">{visual}'
                       f'<div class="{_c(cls, "itemBody")}">'
                       f'<h3 class="{_c(cls, "itemTitle")}">{_e(item.title)}</h3>'
                       f'<p class="{_c(cls, "itemText")}">{_e(item.text)}</p></div></div>')

    title = f'<h2 class="{_c(cls, "title")}">{_e(d.title)}</h2>' if d.title else ""
    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {title}
    <div class="{_c(cls, "grid")}">{items_html}</div>
  </div>
</div>"""


# ── Interaction ──────────────────────────────────────────────────────────────

def render_gallery_block(b: GalleryBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    images_html = ""
    for img in _items(d.images):
        caption = f'<div class="{_c(cls, "caption")}">{_e(img.caption)}</div>' if img.caption else ""
        images_html += (f'<figure class="{_c(cls, "imageWrapper")}">'
                        f'<img src="{_e(img.src)}" alt="{_e(img.alt or img.caption)}" class="{_c(cls, "image")}" loading="lazy">'
                        f'{caption}</figure>')

    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {_header(d, cls)}
    <div class="{_c(cls, "grid")}">{images_html}</div>
  </div>
</div>"""


def render_testimonials_block(b: TestimonialsBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    cards_html = ""
    for item in _items(d.items):
        rating = max(0, min(_int(item.rating), 5))
        stars  = ""
        if rating:
            stars = "".join(
                f'<span class="{_c(cls, "star" if i < rating else "starEmpty")}">★</span>'
                for i in range(5)
            )
            stars = f'<div class="{_c(cls, "stars")}" aria-label="{rating} out of 5">{stars}</div>'
        event = f'<p class="{_c(cls, "eventType")}">{_e(item.event_type)}</p>' if item.event_type else ""
        cards_html += (f'<div class="{_c(cls, "card")}">'
                       f'<p class="{_c(cls, "quote")}">“{_e(item.quote)}”</p>{stars}'
                       f'<p class="{_c(cls, "author")}">{_e(item.author)}</p>{event}</div>')

    return f"""<div class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {_header(d, cls)}
    <div class="{_c(cls, "grid")}">{cards_html}</div>
  </div>
</div>"""


def _contact_field(field: Any, cls: Slots) -> str:
    name     = _e(str(field.label or "field").strip().lower().replace(" ", "_"))
    required = " required" if field.required else ""
    holder   = f' placeholder="{_e(field.placeholder)}"' if field.placeholder else ""
    label    = f'<label for="{name}" class="{_c(cls, "fieldLabel")}">{_e(field.label)}</label>'
    if field.type == "textarea":
        control = f'<textarea id="{name}" name="{name}" class="{_c(cls, "fieldTextarea")}"{holder}{required}></textarea>'
    else:
        control = (f'<input id="{name}" name="{name}" type="{_e(field.type or "text")}" '
                   f'class="{_c(cls, "fieldInput")}"{holder}{required}>')
    return f'<div class="{_c(cls, "fieldWrapper")}">{label}{control}</div>'


def render_contact_block(b: ContactBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    info_html = ""
    for label, value, href in (("Address", d.address, ""),
                               ("Phone",   d.phone,   f"tel:{d.phone}"),
                               ("Email",   d.email,   f"mailto:{d.email}"),
                               ("Hours",   d.hours,   "")):
        if not value:
            continue
        shown = f'<a href="{_e(href)}">{_e(value)}</a>' if href else _e(value)
        info_html += (f'<div class="{_c(cls, "infoItem")}">'
                      f'<span class="{_c(cls, "infoLabel")}">{label}</span>'
                      f'<span class="{_c(cls, "infoValue")}">{shown}</span></div>')

    social = "".join(
        f'<a href="{_e(s.url)}" class="{_c(cls, "socialLink")}" aria-label="{_e(s.platform)}" '
        f'target="_blank" rel="noopener">{_e(s.icon or s.platform)}</a>'
        for s in _items(d.social_links)
    )
    if social:
        social = f'<div class="{_c(cls, "socialLinks")}">{social}</div>'

    form_html = ""
    fields = _items(d.form_fields)
    if fields:
        action   = getattr(ov, "form_action", None)
        onsubmit = getattr(ov, "on_submit", None)
        action_attr   = f' action="{_e(action)}"' if action else ""
        onsubmit_attr = f' onsubmit="{_e(onsubmit())}"' if onsubmit else ""
        fields_html   = "".join(_contact_field(f, cls) for f in fields)
        form_html = (f'<form method="post" class="{_c(cls, "form")}"{action_attr}{onsubmit_attr}>'
                     f'{fields_html}'
                     f'<button type="submit" class="{_c(cls, "submitButton")}">{_e(d.submit_button_text) or "Submit"}</button>'
                     f'</form>')

    id_attr  = f' id="{_e(d.id)}"' if d.id else ""
    title    = f'<h2 class="{_c(cls, "title")}">{_e(d.title)}</h2>' if d.title else ""
    subtitle = f'<p class="{_c(cls, "subtitle")}">{_e(d.subtitle)}</p>' if d.subtitle else ""
    return f"""<div class="{_c(cls, "root")}"{id_attr}>
  <div class="{_c(cls, "container")}">
    <div class="{_c(cls, "infoSection")}">{title}{subtitle}{info_html}{social}</div>
    {form_html}
  </div>
</div>"""


# ── Blog ─────────────────────────────────────────────────────────────────────

def render_blog_block(b: BlogBlock, cls: Slots, ov: Any = None) -> str:
    d = b.content

    render_body = getattr(ov, "render_body", None)
    body = render_body(_text(d.body)) if render_body else _text(d.body)

    featured = (f'<img src="{_e(d.featured_image)}" alt="{_e(d.featured_image_alt or d.title)}" '
                f'class="{_c(cls, "featuredImage")}">' if d.featured_image else "")
    subtitle = f'<p class="{_c(cls, "subtitle")}">{_e(d.subtitle)}</p>' if d.subtitle else ""

    meta = ""
    if d.author:
        avatar = (f'<img src="{_e(d.author_image)}" alt="{_e(d.author)}" class="{_c(cls, "authorImage")}">'
                  if d.author_image else "")
        meta += (f'<div class="{_c(cls, "authorWrapper")}">{avatar}'
                 f'<span class="{_c(cls, "authorName")}">{_e(d.author)}</span></div>')
    if d.published_date:
        meta += f'<time class="{_c(cls, "date")}" datetime="{_e(d.published_date)}">{_e(d.published_date)}</time>'
    if _int(d.reading_time):
        meta += f'<span class="{_c(cls, "readingTime")}">{_int(d.reading_time)} min read</span>'
    if meta:
        meta = f'<div class="{_c(cls, "meta")}">{meta}</div>'

    tags = "".join(f'<span class="{_c(cls, "tag")}">{_e(t)}</span>' for t in _list(d.tags))
    if tags:
        tags = f'<div class="{_c(cls, "tags")}">{tags}</div>'

    related = ""
    posts = _items(d.related_posts)
    if posts:
        cards = ""
        for post in posts:
            image   = (f'<img src="{_e(post.image)}" alt="{_e(post.image_alt or post.title)}" '
                       f'class="{_c(cls, "relatedCardImage")}">' if post.image else "")
            excerpt = f'<p class="{_c(cls, "relatedCardExcerpt")}">{_e(post.excerpt)}</p>' if post.excerpt else ""
            cards += (f'<a href="/{_e(str(post.slug or "").lstrip("/"))}" class="{_c(cls, "relatedCard")}">{image}'
                      f'<div class="{_c(cls, "relatedCardBody")}">'
                      f'<h3 class="{_c(cls, "relatedCardTitle")}">{_e(post.title)}</h3>{excerpt}</div></a>')
        related = (f'<section class="{_c(cls, "relatedSection")}">'
                   f'<h2 class="{_c(cls, "relatedTitle")}">Related Posts</h2>'
                   f'<div class="{_c(cls, "relatedGrid")}">{cards}</div></section>')

    return f"""<article class="{_c(cls, "root")}">
  <div class="{_c(cls, "container")}">
    {featured}
    <header class="{_c(cls, "header")}">
      <h1 class="{_c(cls, "title")}">{_e(d.title)}</h1>
      {subtitle}{meta}{tags}
    </header>
    <div class="{_c(cls, "body")}">{body}</div>
    {related}
  </div>
</article>"""
