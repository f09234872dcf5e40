"""
Schémas Pydantic de la page — agrégat Page (unité de validation et de sérialisation).

Attributs Python en snake_case, clés wire d'origine via alias :
  PageId, tenantId, pageSlug, PageVersion, Layout, MetaData, searchData,
  ContentData.ContentBlocks, seo, isPublished, publishedAt, includeInSitemap
Les clés inconnues sont conservées (extra="allow") → aucune perte à la sérialisation.
Une valeur de type inattendu (ex. author: null, keywords: "a, b") reste brute :
la page est construite dès que la structure racine est valide.
"""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..blocks import AnyBlock, keep_raw_on_error
from .slug import normalize_slug


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PageRecord(WireModel):
    """Enregistrement de page tolérant : valeur typée si possible, sinon brute."""

    @field_validator("*", mode="wrap")
    @classmethod
    def _keep_raw(cls, value, handler):
        return keep_raw_on_error(value, handler)


# ── Métadonnées / recherche ──────────────────────────────────────────────────

class PageMetaData(PageRecord):
    category: str = ""
    product: str = ""
    keyword: str = ""
    page_type: str = Field(default="Keyword", alias="pageType")
    title: str = ""
    description: str = ""
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    author: str = ""
    language: str = "en-us"
    market: str = ""


class SearchData(PageRecord):
    state: str = ""
    city: str = ""
    metro: str = ""
    county: str = ""
    keyword: str = ""
    tags: List[str] = Field(default_factory=list)
    content_summary: str = Field(default="", alias="contentSummary")
    block_types: List[str] = Field(default_factory=list, alias="blockTypes")


class ContentData(PageRecord):
    content_blocks: List[AnyBlock] = Field(default_factory=list, alias="ContentBlocks")


# ── SEO ──────────────────────────────────────────────────────────────────────

class AlternateUrl(PageRecord):
    href_lang: str = Field(default="", alias="hrefLang")
    href: str = ""


class OpenGraphData(PageRecord):
    title: str = Field(default="", alias="og:title")
    description: str = Field(default="", alias="og:description")
    type: str = Field(default="website", alias="og:type")
    url: str = Field(default="", alias="og:url")
    image: str = Field(default="", alias="og:image")
    image_alt: str = Field(default="", alias="og:image:alt")
    site_name: str = Field(default="", alias="og:site_name")
    locale: str = Field(default="en_US", alias="og:locale")


class TwitterCardData(PageRecord):
    card: str = Field(default="summary_large_image", alias="twitter:card")
    title: str = Field(default="", alias="twitter:title")
    description: str = Field(default="", alias="twitter:description")
    image: str = Field(default="", alias="twitter:image")
    site: str = Field(default="", alias="twitter:site")
    creator: str = Field(default="", alias="twitter:creator")


class SeoData(PageRecord):
    meta_title: str = Field(default="", alias="metaTitle")
    meta_description: str = Field(default="", alias="metaDescription")
    keywords: List[str] = Field(default_factory=list)
    robots: str = "index, follow"
    canonical_url: str = Field(default="", alias="canonicalUrl")
    alternate_urls: List[AlternateUrl] = Field(default_factory=list, alias="alternateUrls")
    # Chaîne JSON-LD brute ou liste d'objets JSON-LD
    structured_data: Any = Field(default="", alias="structuredData")
    open_graph: OpenGraphData = Field(default_factory=OpenGraphData, alias="openGraph")
    twitter_card: TwitterCardData = Field(default_factory=TwitterCardData, alias="twitterCard")


# ── Page ─────────────────────────────────────────────────────────────────────

class Page(PageRecord):
    """Agrégat page : slug normalisé, métadonnées, SEO, blocs ordonnés."""
    id: Optional[str] = None
    page_id: str = Field(alias="PageId")
    tenant_id: str = Field(default="", alias="tenantId")
    page_slug: str = Field(alias="pageSlug")
    page_version: Union[int, float] = Field(default=1, alias="PageVersion")
    layout: str = Field(default="", alias="Layout")
    meta_data: PageMetaData = Field(default_factory=PageMetaData, alias="MetaData")
    search_data: SearchData = Field(default_factory=SearchData, alias="searchData")
    content_data: ContentData = Field(default_factory=ContentData, alias="ContentData")
    seo: SeoData = Field(default_factory=SeoData)
    is_published: bool = Field(default=False, alias="isPublished")
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    include_in_sitemap: bool = Field(default=True, alias="includeInSitemap")

    @field_validator("page_slug")
    @classmethod
    def _normalize_slug(cls, v: str) -> str:
        return normalize_slug(v)

    @model_validator(mode="after")
    def _mirror_id(self):
        # Document store : "id" reflète PageId
        if self.id is None or self.id == "":
            self.id = self.page_id
        return self

    @property
    def blocks(self) -> List[Any]:
        return self.content_data.content_blocks
