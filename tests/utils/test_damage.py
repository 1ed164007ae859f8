# tests/utils/test_damage.py

import pytest
from pyrsistent import pmap

from offline_raiding.types import DamageType
from offline_raiding.utils.damage import has_damage_type, scale_all


def test_has_damage_type() -> None:
    damage = pmap({DamageType.EXPLOSION: 10.0, DamageType.HEAT: 0.0})
    assert has_damage_type(damage, DamageType.EXPLOSION)
    assert not has_damage_type(damage, DamageType.HEAT)
    assert not has_damage_type(damage, DamageType.BULLET)


def test_scale_all() -> None:
    damage = pmap({DamageType.EXPLOSION: 10.0, DamageType.BLUNT: 4.0})
    scaled = scale_all(damage, 0.25)
    assert scaled[DamageType.EXPLOSION] == pytest.approx(2.5)
    assert scaled[DamageType.BLUNT] == pytest.approx(1.0)
    assert damage[DamageType.EXPLOSION] == 10.0


def test_scale_all_clamps_negative_amounts() -> None:
    scaled = scale_all(pmap({DamageType.EXPLOSION: 8.0, DamageType.HEAT: -0.5}), 0.5)
    assert scaled[DamageType.EXPLOSION] == pytest.approx(4.0)
    assert scaled[DamageType.HEAT] == 0.0


def test_scale_all_never_goes_negative() -> None:
    scaled = scale_all(pmap({DamageType.EXPLOSION: 1.0}), -0.5)
    assert scaled[DamageType.EXPLOSION] == 0.0
