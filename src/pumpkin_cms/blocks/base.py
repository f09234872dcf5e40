"""
Blocs de base — contrat commun {type, content} + bloc générique de repli.

Le champ `type` est le discriminant : il fixe la forme de `content`.
Les champs de présentation (id, name, displayName, enabled) sont optionnels
et ne sont écrits dans le JSON que s'ils sont renseignés.
Une valeur de type inattendu (payload ou présentation) est conservée brute :
la forme du payload est l'affaire de la vue, pas du modèle.
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_serializer
from pydantic.alias_generators import to_camel


# ── Tags ─────────────────────────────────────────────────────────────────────

class BlockTag(str, Enum):
    HERO             = "Hero"
    PRIMARY_CTA      = "PrimaryCTA"
    SECONDARY_CTA    = "SecondaryCTA"
    CARD_GRID        = "CardGrid"
    FAQ              = "FAQ"
    BREADCRUMBS      = "Breadcrumbs"
    TRUST_BAR        = "TrustBar"
    HOW_IT_WORKS     = "HowItWorks"
    SERVICE_AREA_MAP = "ServiceAreaMap"
    LOCAL_PRO_TIPS   = "LocalProTips"
    GALLERY          = "Gallery"
    TESTIMONIALS     = "Testimonials"
    CONTACT          = "Contact"
    BLOG             = "Blog"


UNKNOWN_TAG = "Unknown"

_PRESENTATION_KEYS = ("id", "name", "displayName", "display_name", "enabled")


# ── Validation tolérante ─────────────────────────────────────────────────────

def keep_raw_on_error(value: Any, handler: Any) -> Any:
    """
    Validateur wrap : valeur typée si possible, sinon valeur brute conservée.

    Une liste refusée est reprise élément par élément : les éléments valides
    sont typés, les autres restent bruts. Aucune donnée n'est perdue.
    """
    try:
        return handler(value)
    except ValidationError:
        if isinstance(value, list):
            return [_item_or_raw(item, handler) for item in value]
        return value


def _item_or_raw(item: Any, handler: Any) -> Any:
    try:
        return handler([item])[0]
    except (ValidationError, TypeError, IndexError):
        return item


# ── Payload / bloc ───────────────────────────────────────────────────────────

class BlockContent(BaseModel):
    """Payload typé d'un bloc. Clés wire en camelCase ; clés inconnues conservées."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    @field_validator("*", mode="wrap")
    @classmethod
    def _keep_raw(cls, value, handler):
        return keep_raw_on_error(value, handler)


class BaseBlock(BaseModel):
    """Bloc de base (classe parente des blocs typés et du bloc générique)."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str
    content: Any = None
    id: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    enabled: Optional[bool] = None

    @field_validator("id", "name", "display_name", "enabled", mode="wrap")
    @classmethod
    def _keep_raw_presentation(cls, value, handler):
        return keep_raw_on_error(value, handler)

    @model_serializer(mode="wrap")
    def _drop_unset_presentation(self, handler):
        data = handler(self)
        for key in _PRESENTATION_KEYS:
            if key in data and data[key] is None:
                del data[key]
        return data


class GenericBlock(BaseBlock):
    """Bloc de repli : tag d'origine + payload brut (tag inconnu ou content non-objet)."""
    type: str = UNKNOWN_TAG
    content: Dict[str, Any] = Field(default_factory=dict)


class BlockItem(BlockContent):
    """Élément d'une liste dans un payload (carte, question, étape…)."""
    pass
