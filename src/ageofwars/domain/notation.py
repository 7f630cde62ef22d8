"""Textual army encoding.

Armies travel as ``;``-separated ``ClassName#count`` tokens, e.g.
``Militia#10;Spearmen#20``. Parsing is tolerant: missing or malformed counts
become zero and unknown class names are kept verbatim, so nothing here ever
raises. Encoding is ``str(army)``.
"""

from __future__ import annotations

import re

from .enums import UnitClass
from .models import Army, Platoon

TOKEN_SEPARATOR = ";"
COUNT_SEPARATOR = "#"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_count(text: object) -> int:
    """Parse the leading integer of ``text``; anything else yields 0."""
    if not isinstance(text, str):
        return 0
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # past the interpreter's int-conversion digit limit
        return 0


def parse_unit_class(name: str) -> UnitClass | str:
    """Resolve a wire name to a UnitClass, keeping unknown names as-is."""
    try:
        return UnitClass(name)
    except ValueError:
        return name


def parse_platoon(token: str) -> Platoon:
    fields = [part.strip() for part in token.split(COUNT_SEPARATOR)]
    name = fields[0]
    count = fields[1] if len(fields) > 1 else "0"
    return Platoon(parse_unit_class(name), parse_count(count))


def parse_army(text: object) -> Army:
    """Decode an army string; empty or non-string input gives an empty army."""
    if not text or not isinstance(text, str):
        return Army()
    tokens = (token.strip() for token in text.split(TOKEN_SEPARATOR))
    return Army(parse_platoon(token) for token in tokens if token)
