"""Arrangement search.

A battle pairs position ``i`` of the attacker with position ``i`` of the
defender. The simulator tries every ordering of the attacker's platoons
against the defender's fixed order and accepts the first one that wins at
least ``ceil(N / 2)`` pairings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .enums import Outcome, SearchState
from .models import Army
from .permutations import permutations
from .rules_config import DEFAULT_RULES, BattleRules

logger = logging.getLogger(__name__)


class ArmySizeError(ValueError):
    """Raised when an army does not field exactly the expected platoon count."""

    def __init__(self, expected: int, attacker_count: int, defender_count: int) -> None:
        self.expected = expected
        self.attacker_count = attacker_count
        self.defender_count = defender_count
        super().__init__(
            f"Both armies must contain exactly {expected} platoons "
            f"(attacker has {attacker_count}, defender has {defender_count})."
        )


@dataclass(frozen=True, slots=True)
class Found:
    """A winning ordering of the attacker's platoons."""

    arrangement: Army
    wins: int
    orderings_tried: int


@dataclass(frozen=True, slots=True)
class Exhausted:
    """Every ordering was tried and none reached the majority threshold."""

    orderings_tried: int


SearchResult = Found | Exhausted


def majority_threshold(battle_size: int) -> int:
    """Wins needed out of ``battle_size`` pairings, i.e. ``ceil(battle_size / 2)``."""
    return -(-battle_size // 2)


def score_pairings(
    arrangement: Army, defender: Army, *, rules: BattleRules = DEFAULT_RULES
) -> list[Outcome]:
    """Outcome of each positional pairing, attacker's perspective."""
    return [
        own.outcome_against(opponent, rules=rules)
        for own, opponent in zip(arrangement, defender, strict=True)
    ]


def count_wins(arrangement: Army, defender: Army, *, rules: BattleRules = DEFAULT_RULES) -> int:
    """Number of pairings ``arrangement`` wins against ``defender`` position by position."""
    outcomes = score_pairings(arrangement, defender, rules=rules)
    return sum(1 for outcome in outcomes if outcome is Outcome.WIN)


class BattleSimulator:
    """Exhaustive search for a majority-winning arrangement.

    The simulator owns its two armies and never mutates them, so
    :meth:`find_winning_arrangement` may be called repeatedly and returns
    equal results each time.
    """

    def __init__(
        self,
        attacker: Army,
        defender: Army,
        battle_size: int | None = None,
        *,
        rules: BattleRules = DEFAULT_RULES,
    ) -> None:
        size = rules.battle_size if battle_size is None else battle_size
        if size < 1:
            raise ValueError(f"battle_size must be positive, got {size}")
        self.attacker = attacker
        self.defender = defender
        self.battle_size = size
        self.rules = rules
        self.state = SearchState.UNVALIDATED

    @property
    def threshold(self) -> int:
        return majority_threshold(self.battle_size)

    def validate(self) -> None:
        """Check both armies field exactly ``battle_size`` platoons.

        Raises:
            ArmySizeError: if either army has the wrong length.
        """
        attacker_count = len(self.attacker)
        defender_count = len(self.defender)
        if attacker_count != self.battle_size or defender_count != self.battle_size:
            logger.warning(
                "Rejected battle: expected %d platoons, attacker=%d defender=%d",
                self.battle_size,
                attacker_count,
                defender_count,
            )
            raise ArmySizeError(self.battle_size, attacker_count, defender_count)

    def find_winning_arrangement(self) -> SearchResult:
        """Return the first ordering meeting the majority threshold.

        Orderings are tried in the generator's deterministic order and the
        search stops at the first acceptable one.

        Returns:
            ``Found`` with the winning arrangement, or ``Exhausted``.

        Raises:
            ArmySizeError: if validation fails; no ordering is generated.
        """
        self.validate()
        self.state = SearchState.SEARCHING
        threshold = self.threshold
        logger.debug(
            "Searching arrangements of %s against %s (threshold %d)",
            self.attacker,
            self.defender,
            threshold,
        )

        tried = 0
        for ordering in permutations(self.attacker.platoons):
            tried += 1
            candidate = Army(ordering)
            wins = count_wins(candidate, self.defender, rules=self.rules)
            if wins >= threshold:
                self.state = SearchState.FOUND
                logger.debug("Accepted %s with %d wins after %d orderings", candidate, wins, tried)
                return Found(arrangement=candidate, wins=wins, orderings_tried=tried)

        self.state = SearchState.EXHAUSTED
        logger.debug("No winning arrangement after %d orderings", tried)
        return Exhausted(orderings_tried=tried)
