"""Damage amount helpers."""

from pyrsistent import PMap, pmap

from offline_raiding.types import DamageType


def has_damage_type(damage_types: PMap[DamageType, float], damage_type: DamageType) -> bool:
    """True if ``damage_type`` contributes a non-zero amount."""
    return damage_types.get(damage_type, 0) > 0


def scale_all(damage_types: PMap[DamageType, float], factor: float) -> PMap[DamageType, float]:
    """Return a new map with every amount multiplied by ``factor``.

    Negative amounts are clamped to zero; scaled damage is never negative.
    """
    factor = max(0.0, factor)
    return pmap(
        {damage_type: max(0.0, amount) * factor for damage_type, amount in damage_types.items()}
    )
