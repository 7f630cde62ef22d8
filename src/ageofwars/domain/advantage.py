"""Static class-advantage table.

The relation is directed and deliberately incomplete: several class pairs
have no advantage in either direction, and no class has advantage over
itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .enums import UnitClass

ADVANTAGES: Mapping[UnitClass, frozenset[UnitClass]] = MappingProxyType(
    {
        UnitClass.MILITIA: frozenset({UnitClass.SPEARMEN, UnitClass.LIGHT_CAVALRY}),
        UnitClass.SPEARMEN: frozenset({UnitClass.LIGHT_CAVALRY, UnitClass.HEAVY_CAVALRY}),
        UnitClass.LIGHT_CAVALRY: frozenset({UnitClass.FOOT_ARCHER, UnitClass.CAVALRY_ARCHER}),
        UnitClass.HEAVY_CAVALRY: frozenset(
            {UnitClass.MILITIA, UnitClass.FOOT_ARCHER, UnitClass.LIGHT_CAVALRY}
        ),
        UnitClass.CAVALRY_ARCHER: frozenset({UnitClass.SPEARMEN, UnitClass.HEAVY_CAVALRY}),
        UnitClass.FOOT_ARCHER: frozenset({UnitClass.MILITIA, UnitClass.CAVALRY_ARCHER}),
    }
)

_NO_ADVANTAGE: frozenset[UnitClass] = frozenset()


def advantages_of(unit_class: UnitClass | str) -> frozenset[UnitClass]:
    """Return the classes ``unit_class`` has advantage over (empty if unknown)."""
    return ADVANTAGES.get(unit_class, _NO_ADVANTAGE)


def has_advantage(attacker: UnitClass | str, defender: UnitClass | str) -> bool:
    """Return True when ``attacker`` holds advantage over ``defender``."""
    return defender in advantages_of(attacker)
