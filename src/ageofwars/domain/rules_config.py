"""Declarative rule configuration for the domain layer."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import UnitClass

DEFAULT_BATTLE_SIZE = 5  # earlier rulesets fielded 6 platoons per side
# Upper bound accepted from configuration and HTTP clients; 8! = 40320 orderings.
MAX_BATTLE_SIZE = 8


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Constants governing a single arrangement search."""

    battle_size: int = DEFAULT_BATTLE_SIZE
    advantage_multiplier: int = 2
    # Classes the interactive console asks about, in prompt order.
    prompt_classes: tuple[UnitClass, ...] = (
        UnitClass.MILITIA,
        UnitClass.SPEARMEN,
        UnitClass.LIGHT_CAVALRY,
        UnitClass.HEAVY_CAVALRY,
        UnitClass.FOOT_ARCHER,
    )


DEFAULT_RULES = BattleRules()
