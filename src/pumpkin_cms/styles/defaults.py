"""
Classes par défaut (Tailwind) de chaque slot, par type de bloc + header/footer.

Données pures : la logique est dans merge.py. Les clés de slot sont celles
utilisées dans Theme.block_styles.
"""
from typing import Dict, Mapping, Optional

from ..blocks import BlockTag
from .merge import SlotMap, merge_classes

_BTN_ORANGE = "inline-block mt-6 px-8 py-3 bg-orange-500 text-white font-semibold rounded-lg hover:bg-orange-600 transition-colors"
_SECTION_TITLE = "text-3xl font-bold text-neutral-900"
_SECTION_SUBTITLE = "text-base text-neutral-600 mt-2"
_FIELD = "w-full px-3 py-2 text-sm border border-neutral-300 rounded-lg focus:outline-none focus:ring-2 focus:ring-orange-400 focus:border-orange-400"

HERO_DEFAULTS: SlotMap = {
    "root": "relative w-full min-h-[400px] flex items-center bg-cover bg-center overflow-hidden",
    "overlay": "absolute inset-0 bg-black/40",
    "container": "relative z-10 max-w-5xl mx-auto px-6 py-16",
    "headline": "text-4xl md:text-5xl font-bold text-white leading-tight",
    "subheadline": "text-lg md:text-xl text-white/90 mt-3 max-w-2xl",
    "mainImage": "mt-8 rounded-lg shadow-xl max-w-full h-auto",
    "button": _BTN_ORANGE,
}

PRIMARY_CTA_DEFAULTS: SlotMap = {
    "root": "relative w-full bg-cover bg-center overflow-hidden",
    "overlay": "absolute inset-0 bg-black/50",
    "container": "relative z-10 max-w-4xl mx-auto px-6 py-16 flex flex-col md:flex-row items-center gap-10",
    "textWrapper": "flex-1 text-center md:text-left",
    "title": "text-3xl md:text-4xl font-bold text-white",
    "description": "text-lg text-white/90 mt-3",
    "button": _BTN_ORANGE,
    "secondaryWrapper": "mt-4 text-sm text-white/80",
    "secondaryLink": "underline hover:text-white transition-colors",
    "mainImage": "flex-shrink-0 rounded-lg shadow-xl max-w-xs h-auto",
}

SECONDARY_CTA_DEFAULTS: SlotMap = {
    "root": "w-full bg-neutral-100 py-12",
    "container": "max-w-3xl mx-auto px-6 text-center",
    "title": "text-2xl md:text-3xl font-bold text-neutral-900",
    "description": "text-base text-neutral-600 mt-3 max-w-xl mx-auto",
    "button": "inline-block mt-6 px-6 py-2.5 bg-neutral-900 text-white font-semibold rounded-lg hover:bg-neutral-800 transition-colors",
}

CARD_GRID_DEFAULTS: SlotMap = {
    "root": "w-full py-12",
    "container": "max-w-6xl mx-auto px-6",
    "header": "text-center mb-10",
    "title": _SECTION_TITLE,
    "subtitle": _SECTION_SUBTITLE,
    "grid": "grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-3 gap-6",
    "card": "bg-white rounded-xl shadow-md border border-neutral-200 overflow-hidden hover:shadow-lg transition-shadow",
    "cardImage": "w-full h-48 object-cover",
    "cardBody": "p-5",
    "cardIcon": "text-2xl mb-2",
    "cardTitle": "text-lg font-semibold text-neutral-900",
    "cardDescription": "text-sm text-neutral-600 mt-1",
    "cardLink": "inline-block mt-3 text-sm font-medium text-orange-600 hover:text-orange-700 transition-colors",
}

FAQ_DEFAULTS: SlotMap = {
    "root": "w-full py-12",
    "container": "max-w-3xl mx-auto px-6",
    "header": "text-center mb-10",
    "title": _SECTION_TITLE,
    "subtitle": _SECTION_SUBTITLE,
    "list": "space-y-4",
    "item": "border border-neutral-200 rounded-lg overflow-hidden",
    "question": "w-full flex items-center justify-between px-5 py-4 text-left font-medium text-neutral-900 hover:bg-neutral-50 transition-colors cursor-pointer",
    "questionIcon": "ml-3 text-neutral-400 shrink-0 transition-transform",
    "answer": "px-5 pb-4 text-sm text-neutral-600 leading-relaxed",
}

BREADCRUMBS_DEFAULTS: SlotMap = {
    "root": "w-full py-3",
    "container": "max-w-6xl mx-auto px-6",
    "list": "flex items-center flex-wrap gap-1 text-sm",
    "item": "text-neutral-500 hover:text-neutral-800 transition-colors",
    "itemCurrent": "text-neutral-900 font-medium",
    "separator": "text-neutral-400 mx-1",
    "link": "hover:underline",
}

TRUST_BAR_DEFAULTS: SlotMap = {
    "root": "w-full py-8 bg-neutral-50 border-y border-neutral-200",
    "container": "max-w-6xl mx-auto px-6",
    "grid": "grid grid-cols-2 md:grid-cols-4 gap-6",
    "item": "flex flex-col items-center text-center",
    "icon": "w-10 h-10 mb-2",
    "itemTitle": "text-sm font-semibold text-neutral-900",
    "itemText": "text-xs text-neutral-500 mt-0.5",
}

HOW_IT_WORKS_DEFAULTS: SlotMap = {
    "root": "w-full py-12",
    "container": "max-w-5xl mx-auto px-6",
    "title": "text-3xl font-bold text-neutral-900 text-center mb-10",
    "steps": "grid grid-cols-1 md:grid-cols-3 gap-8",
    "step": "flex flex-col items-center text-center",
    "stepImage": "w-20 h-20 rounded-full object-cover mb-4",
    "stepNumber": "w-8 h-8 rounded-full bg-orange-500 text-white text-sm font-bold flex items-center justify-center mb-3",
    "stepTitle": "text-lg font-semibold text-neutral-900",
    "stepText": "text-sm text-neutral-600 mt-1",
}

SERVICE_AREA_MAP_DEFAULTS: SlotMap = {
    "root": "w-full py-12",
    "container": "max-w-5xl mx-auto px-6",
    "header": "text-center mb-8",
    "title": _SECTION_TITLE,
    "subtitle": _SECTION_SUBTITLE,
    "mapWrapper": "w-full rounded-xl overflow-hidden shadow-md border border-neutral-200",
    "mapIframe": "w-full h-80 md:h-[450px] border-0",
    "lists": "mt-8 grid grid-cols-1 md:grid-cols-3 gap-6",
    "listSection": "",
    "listTitle": "text-sm font-bold uppercase tracking-wider text-neutral-500 mb-2",
    "listItems": "flex flex-wrap gap-2",
    "listItem": "text-sm bg-neutral-100 text-neutral-700 px-3 py-1 rounded-full",
}

LOCAL_PRO_TIPS_DEFAULTS: SlotMap = {
    "root": "w-full py-12 bg-neutral-50",
    "container": "max-w-5xl mx-auto px-6",
    "title": "text-3xl font-bold text-neutral-900 text-center mb-10",
    "grid": "grid grid-cols-1 md:grid-cols-2 gap-6",
    "item": "bg-white rounded-xl shadow-sm border border-neutral-200 p-5 flex gap-4",
    "itemImage": "w-16 h-16 rounded-lg object-cover shrink-0",
    "itemIcon": "text-3xl shrink-0",
    "itemBody": "flex-1",
    "itemTitle": "text-base font-semibold text-neutral-900",
    "itemText": "text-sm text-neutral-600 mt-1",
}

GALLERY_DEFAULTS: SlotMap = {
    "root": "w-full py-12",
    "container": "max-w-6xl mx-auto px-6",
    "header": "text-center mb-10",
    "title": _SECTION_TITLE,
    "subtitle": _SECTION_SUBTITLE,
    "grid": "grid grid-cols-2 md:grid-cols-3 lg:grid-cols-4 gap-4",
    "imageWrapper": "relative rounded-lg overflow-hidden shadow-sm group cursor-pointer",
    "image": "w-full h-48 object-cover group-hover:scale-105 transition-transform duration-300",
    "caption": "absolute bottom-0 inset-x-0 bg-gradient-to-t from-black/70 to-transparent px-3 py-2 text-xs text-white opacity-0 group-hover:opacity-100 transition-opacity",
}

TESTIMONIALS_DEFAULTS: SlotMap = {
    "root": "w-full py-12 bg-neutral-50",
    "container": "max-w-5xl mx-auto px-6",
    "header": "text-center mb-10",
    "title": _SECTION_TITLE,
    "subtitle": _SECTION_SUBTITLE,
    "grid": "grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6",
    "card": "bg-white rounded-xl shadow-sm border border-neutral-200 p-6",
    "quote": "text-sm text-neutral-700 italic leading-relaxed",
    "stars": "flex gap-0.5 mt-3",
    "star": "w-4 h-4 text-amber-400",
    "starEmpty": "w-4 h-4 text-neutral-300",
    "author": "mt-4 text-sm font-semibold text-neutral-900",
    "eventType": "text-xs text-neutral-500",
}

CONTACT_DEFAULTS: SlotMap = {
    "root": "w-full py-12",
    "container": "max-w-5xl mx-auto px-6 grid grid-cols-1 md:grid-cols-2 gap-10",
    "infoSection": "space-y-5",
    "title": _SECTION_TITLE,
    "subtitle": "text-base text-neutral-600",
    "infoItem": "flex items-start gap-3",
    "infoLabel": "text-sm font-semibold text-neutral-900",
    "infoValue": "text-sm text-neutral-600",
    "socialLinks": "flex gap-3 mt-4",
    "socialLink": "w-9 h-9 rounded-full bg-neutral-200 flex items-center justify-center text-neutral-700 hover:bg-orange-500 hover:text-white transition-colors",
    "form": "space-y-4",
    "fieldWrapper": "",
    "fieldLabel": "block text-sm font-medium text-neutral-700 mb-1",
    "fieldInput": _FIELD,
    "fieldTextarea": f"{_FIELD} min-h-[100px]",
    "submitButton": "w-full px-6 py-2.5 bg-orange-500 text-white font-semibold rounded-lg hover:bg-orange-600 transition-colors",
}

BLOG_DEFAULTS: SlotMap = {
    "root": "w-full py-12",
    "container": "max-w-3xl mx-auto px-6",
    "featuredImage": "w-full h-72 object-cover rounded-xl mb-8",
    "header": "mb-8",
    "title": "text-4xl font-bold text-neutral-900 leading-tight",
    "subtitle": "text-lg text-neutral-600 mt-2",
    "meta": "flex items-center flex-wrap gap-4 mt-4 text-sm text-neutral-500",
    "authorWrapper": "flex items-center gap-2",
    "authorImage": "w-8 h-8 rounded-full object-cover",
    "authorName": "font-medium text-neutral-900",
    "date": "",
    "readingTime": "",
    "tags": "flex flex-wrap gap-2 mt-4",
    "tag": "text-xs bg-neutral-100 text-neutral-700 px-2.5 py-1 rounded-full",
    "body": "prose prose-neutral max-w-none",
    "relatedSection": "mt-12 pt-8 border-t border-neutral-200",
    "relatedTitle": "text-2xl font-bold text-neutral-900 mb-6",
    "relatedGrid": "grid grid-cols-1 sm:grid-cols-2 gap-6",
    "relatedCard": "block rounded-xl border border-neutral-200 overflow-hidden hover:shadow-md transition-shadow",
    "relatedCardImage": "w-full h-40 object-cover",
    "relatedCardBody": "p-4",
    "relatedCardTitle": "text-base font-semibold text-neutral-900",
    "relatedCardExcerpt": "text-sm text-neutral-600 mt-1",
}

HEADER_DEFAULTS: SlotMap = {
    "root": "w-full bg-white border-b border-neutral-200",
    "container": "max-w-6xl mx-auto px-6 h-16 flex items-center justify-between gap-6",
    "logoWrapper": "flex items-center gap-2",
    "logoIcon": "text-2xl",
    "logoImage": "h-8 w-auto",
    "logoText": "text-lg font-bold text-neutral-900",
    "nav": "hidden md:flex items-center gap-6",
    "navLink": "text-sm font-medium text-neutral-600 hover:text-neutral-900 transition-colors",
    "navLinkActive": "text-sm font-semibold text-orange-600",
    "navDropdown": "relative group",
    "navDropdownTrigger": "flex items-center gap-1 text-sm font-medium text-neutral-600 hover:text-neutral-900 transition-colors",
    "navDropdownMenu": "absolute left-0 top-full mt-2 w-48 rounded-lg bg-white shadow-lg border border-neutral-200 py-2 hidden group-hover:block",
    "navDropdownItem": "block px-4 py-2 text-sm text-neutral-700 hover:bg-neutral-50",
    "ctaButton": "hidden md:inline-block px-5 py-2 bg-orange-500 text-white text-sm font-semibold rounded-lg hover:bg-orange-600 transition-colors",
}

FOOTER_DEFAULTS: SlotMap = {
    "root": "w-full bg-neutral-900 text-neutral-300 pt-12 pb-6",
    "container": "max-w-6xl mx-auto px-6",
    "topSection": "grid grid-cols-1 md:grid-cols-4 gap-8 pb-8 border-b border-neutral-700",
    "brandSection": "md:col-span-1",
    "brandLogoWrapper": "flex items-center gap-2 mb-3",
    "brandLogoIcon": "text-2xl",
    "brandLogoImage": "h-8 w-auto",
    "brandLogoText": "text-lg font-bold text-white",
    "brandDescription": "text-sm leading-relaxed text-neutral-400",
    "columnsSection": "md:col-span-3 grid grid-cols-2 sm:grid-cols-3 gap-8",
    "columnTitle": "text-sm font-semibold uppercase tracking-wider text-white mb-3",
    "columnList": "space-y-2",
    "columnLink": "text-sm hover:text-orange-400 transition-colors",
    "bottomBar": "mt-8 pt-6 border-t border-neutral-700",
    "bottomBarInner": "flex flex-col sm:flex-row items-center justify-between gap-2 text-xs text-neutral-500",
    "copyright": "",
    "builtWith": "hover:text-orange-400 transition-colors",
}

DEFAULT_CLASS_NAMES: Dict[BlockTag, SlotMap] = {
    BlockTag.HERO:             HERO_DEFAULTS,
    BlockTag.PRIMARY_CTA:      PRIMARY_CTA_DEFAULTS,
    BlockTag.SECONDARY_CTA:    SECONDARY_CTA_DEFAULTS,
    BlockTag.CARD_GRID:        CARD_GRID_DEFAULTS,
    BlockTag.FAQ:              FAQ_DEFAULTS,
    BlockTag.BREADCRUMBS:      BREADCRUMBS_DEFAULTS,
    BlockTag.TRUST_BAR:        TRUST_BAR_DEFAULTS,
    BlockTag.HOW_IT_WORKS:     HOW_IT_WORKS_DEFAULTS,
    BlockTag.SERVICE_AREA_MAP: SERVICE_AREA_MAP_DEFAULTS,
    BlockTag.LOCAL_PRO_TIPS:   LOCAL_PRO_TIPS_DEFAULTS,
    BlockTag.GALLERY:          GALLERY_DEFAULTS,
    BlockTag.TESTIMONIALS:     TESTIMONIALS_DEFAULTS,
    BlockTag.CONTACT:          CONTACT_DEFAULTS,
    BlockTag.BLOG:             BLOG_DEFAULTS,
}


def resolve_block_classes(
    tag: BlockTag,
    block_styles: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> SlotMap:
    """Défauts du tag fusionnés avec l'entrée du tag dans une style map tenant."""
    overrides = (block_styles or {}).get(tag.value)
    return merge_classes(DEFAULT_CLASS_NAMES[tag], overrides)
