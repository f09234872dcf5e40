"""
Fusion des classes par slot — stratégie full-replace.

Une surcharge présente (non None) remplace entièrement la valeur par défaut du
slot : pas de concaténation, pas de raisonnement CSS. Les valeurs sont des
chaînes opaques (Tailwind, Bootstrap, CSS Modules… indifféremment).
"""
from typing import Dict, Mapping, Optional

SlotMap = Dict[str, str]


def merge_classes(defaults: SlotMap, overrides: Optional[Mapping[str, Optional[str]]] = None) -> SlotMap:
    """
    defaults + surcharges partielles → slot map effective.

    - overrides None → `defaults` renvoyé tel quel (partageable)
    - sinon copie ; seuls les slots déjà définis dans `defaults` sont surchargés
    - `defaults` n'est jamais modifié, l'ensemble de clés reste identique
    """
    if overrides is None:
        return defaults
    merged = dict(defaults)
    for slot, value in overrides.items():
        if value is not None and slot in merged:
            merged[slot] = value
    return merged
