"""
Thème par tenant — header/footer, menu récursif et surcharges de styles par type de bloc.

block_styles : tag de bloc ("Hero", "CardGrid"…) → slot ("root", "headline"…) → classes CSS.
Les clés externes inconnues sont conservées mais jamais consultées au rendu.
"""
from typing import Dict, List, Optional

from pydantic import Field

from .schemas import WireModel


class MenuItem(WireModel):
    label: str = ""
    url: str = ""
    target: str = ""
    icon: str = ""
    order: int = 0
    is_visible: bool = Field(default=True, alias="isVisible")
    children: List["MenuItem"] = Field(default_factory=list)


class ThemeHeader(WireModel):
    logo_url: str = Field(default="", alias="logoUrl")
    logo_alt: str = Field(default="", alias="logoAlt")
    sticky: bool = False
    cta_text: str = Field(default="", alias="ctaText")      # vide → bouton masqué
    cta_url: str = Field(default="", alias="ctaUrl")
    cta_target: str = Field(default="", alias="ctaTarget")  # "_self" | "_blank"
    class_names: Dict[str, str] = Field(default_factory=dict, alias="classNames")


class ThemeFooter(WireModel):
    copyright: str = ""                                     # "{year}" remplacé au rendu
    description: str = ""
    class_names: Dict[str, str] = Field(default_factory=dict, alias="classNames")


class Theme(WireModel):
    id: Optional[str] = None
    theme_id: str = Field(default="", alias="themeId")
    tenant_id: str = Field(default="", alias="tenantId")
    name: str = ""
    description: str = ""
    is_active: bool = Field(default=True, alias="isActive")
    header: ThemeHeader = Field(default_factory=ThemeHeader)
    footer: ThemeFooter = Field(default_factory=ThemeFooter)
    block_styles: Dict[str, Dict[str, str]] = Field(default_factory=dict, alias="blockStyles")
    menu: List[MenuItem] = Field(default_factory=list)
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


def visible_items(items: List[MenuItem]) -> List[MenuItem]:
    """Entrées visibles triées par `order`."""
    return sorted((m for m in items if m.is_visible), key=lambda m: m.order)
