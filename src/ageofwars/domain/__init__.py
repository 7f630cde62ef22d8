"""Domain model for the Age of Wars solver.

This package hosts the pure rules layer.  It exposes:

* Enumerations for unit classes and pairing outcomes (see :mod:`enums`).
* The static class-advantage table (see :mod:`advantage`).
* Immutable platoon and army values (see :mod:`models`).
* The lazy permutation generator and the battle search built on it.
* The textual army encoding used by the console and HTTP layers.

Nothing in here performs I/O; the CLI and API are thin adapters on top.
"""

from . import advantage, battle, enums, models, notation, permutations, rules_config

__all__ = [
    "advantage",
    "battle",
    "enums",
    "models",
    "notation",
    "permutations",
    "rules_config",
]
