"""Immutable values describing platoons and armies.

Platoons and armies are built once from already-parsed data and are never
mutated while a battle is searched; candidate orderings are new ``Army``
values over the same platoon objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .advantage import has_advantage
from .enums import Outcome, UnitClass
from .rules_config import DEFAULT_RULES, BattleRules


def _coerce_soldiers(value: object) -> int:
    try:
        count = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)


@dataclass(frozen=True, slots=True)
class Platoon:
    """A group of soldiers of a single unit class.

    Soldier counts that are negative or not numeric are coerced to zero;
    construction never fails. Unknown class names are kept as plain strings
    and hold no advantage in either direction.
    """

    unit_class: UnitClass | str
    soldiers: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "soldiers", _coerce_soldiers(self.soldiers))

    def __str__(self) -> str:
        return f"{self.unit_class}#{self.soldiers}"

    def effective_strength_against(
        self, opponent: Platoon, *, rules: BattleRules = DEFAULT_RULES
    ) -> int:
        """Soldier count, multiplied when this platoon's class has advantage."""
        if has_advantage(self.unit_class, opponent.unit_class):
            return self.soldiers * rules.advantage_multiplier
        return self.soldiers

    def outcome_against(self, opponent: Platoon, *, rules: BattleRules = DEFAULT_RULES) -> Outcome:
        mine = self.effective_strength_against(opponent, rules=rules)
        if mine > opponent.soldiers:
            return Outcome.WIN
        if mine == opponent.soldiers:
            return Outcome.DRAW
        return Outcome.LOSS


@dataclass(frozen=True, slots=True, init=False)
class Army:
    """Ordered sequence of platoons; position is the pairing key.

    Any length is accepted here. Battle arity is checked by the simulator.
    """

    platoons: tuple[Platoon, ...]

    def __init__(self, platoons: Iterable[Platoon] = ()) -> None:
        object.__setattr__(self, "platoons", tuple(platoons))

    def __len__(self) -> int:
        return len(self.platoons)

    def __iter__(self) -> Iterator[Platoon]:
        return iter(self.platoons)

    def __getitem__(self, index: int) -> Platoon:
        return self.platoons[index]

    def __str__(self) -> str:
        return ";".join(str(platoon) for platoon in self.platoons)
