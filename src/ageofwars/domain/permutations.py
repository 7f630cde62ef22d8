"""Lazy enumeration of orderings.

Orderings are produced by index-based recursion over an immutable tuple:
each branch fixes one position as the head and recurses on a new tuple of
the remaining elements. Elements are distinguished by position, so equal
values still produce ``n!`` orderings. Emission order is lexicographic by
original position, starting with the identity ordering.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from math import factorial
from typing import TypeVar

T = TypeVar("T")


def permutations(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yield every ordering of ``items`` as a fresh tuple.

    Only the current recursion path is held in memory, so callers may stop
    after the first ordering they accept.
    """
    return _permute(tuple(items))


def _permute(items: tuple[T, ...]) -> Iterator[tuple[T, ...]]:
    if len(items) <= 1:
        yield items
        return
    for index, head in enumerate(items):
        rest = items[:index] + items[index + 1 :]
        for tail in _permute(rest):
            yield (head, *tail)


def permutation_count(size: int) -> int:
    """Number of orderings produced for a sequence of ``size`` elements."""
    if size < 0:
        raise ValueError("size must be non-negative")
    return factorial(size)
