"""Enumerations used across the Age of Wars domain."""

from __future__ import annotations

from enum import StrEnum


class UnitClass(StrEnum):
    """The six combat archetypes a platoon can belong to.

    Values double as the wire names used by the textual army encoding.
    """

    MILITIA = "Militia"
    SPEARMEN = "Spearmen"
    LIGHT_CAVALRY = "LightCavalry"
    HEAVY_CAVALRY = "HeavyCavalry"
    CAVALRY_ARCHER = "CavalryArcher"
    FOOT_ARCHER = "FootArcher"


class Outcome(StrEnum):
    """Result of a single platoon-versus-platoon pairing."""

    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"


class SearchState(StrEnum):
    """Lifecycle of a battle simulator."""

    UNVALIDATED = "unvalidated"
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"
