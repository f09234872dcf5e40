"""Blocs de navigation / réassurance — fil d'Ariane, barre de confiance, étapes, zone d'intervention, conseils locaux."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import BaseBlock, BlockContent, BlockItem


# ── Breadcrumbs ──────────────────────────────────────────────────────────────

class BreadcrumbItem(BlockItem):
    label: Optional[str] = ""
    url: Optional[str] = ""
    current: Optional[bool] = False


class BreadcrumbsContent(BlockContent):
    items: Optional[List[BreadcrumbItem]] = Field(default_factory=list)


class BreadcrumbsBlock(BaseBlock):
    type: Literal["Breadcrumbs"] = "Breadcrumbs"
    content: BreadcrumbsContent = Field(default_factory=BreadcrumbsContent)


# ── TrustBar ─────────────────────────────────────────────────────────────────

class TrustBarItem(BlockItem):
    icon: Optional[str] = ""
    title: Optional[str] = ""
    text: Optional[str] = ""
    alt: Optional[str] = ""


class TrustBarContent(BlockContent):
    items: Optional[List[TrustBarItem]] = Field(default_factory=list)


class TrustBarBlock(BaseBlock):
    type: Literal["TrustBar"] = "TrustBar"
    content: TrustBarContent = Field(default_factory=TrustBarContent)


# ── HowItWorks ───────────────────────────────────────────────────────────────

class Step(BlockItem):
    title: Optional[str] = ""
    text: Optional[str] = ""
    image: Optional[str] = ""
    alt: Optional[str] = ""


class HowItWorksContent(BlockContent):
    title: Optional[str] = ""
    steps: Optional[List[Step]] = Field(default_factory=list)


class HowItWorksBlock(BaseBlock):
    type: Literal["HowItWorks"] = "HowItWorks"
    content: HowItWorksContent = Field(default_factory=HowItWorksContent)


# ── ServiceAreaMap ───────────────────────────────────────────────────────────

class ServiceAreaMapContent(BlockContent):
    title: Optional[str] = ""
    subtitle: Optional[str] = ""
    map_embed_url: Optional[str] = ""
    neighborhoods: Optional[List[str]] = Field(default_factory=list)
    zip_codes: Optional[List[str]] = Field(default_factory=list)
    nearby_cities: Optional[List[str]] = Field(default_factory=list)


class ServiceAreaMapBlock(BaseBlock):
    type: Literal["ServiceAreaMap"] = "ServiceAreaMap"
    content: ServiceAreaMapContent = Field(default_factory=ServiceAreaMapContent)


# ── LocalProTips ─────────────────────────────────────────────────────────────

class ProTipItem(BlockItem):
    icon: Optional[str] = ""
    image: Optional[str] = ""
    title: Optional[str] = ""
    text: Optional[str] = ""


class LocalProTipsContent(BlockContent):
    title: Optional[str] = ""
    items: Optional[List[ProTipItem]] = Field(default_factory=list)


class LocalProTipsBlock(BaseBlock):
    type: Literal["LocalProTips"] = "LocalProTips"
    content: LocalProTipsContent = Field(default_factory=LocalProTipsContent)
