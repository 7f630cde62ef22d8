"""Tests for the lazy permutation generator.

Tests cover:
- Completeness (n! distinct position orderings)
- Determinism and restartability
- Laziness (no eager materialisation)
- Equal values kept distinct by position
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from math import factorial

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ageofwars.domain.permutations import permutation_count, permutations


class TestCompleteness:
    @pytest.mark.parametrize("size", range(0, 7))
    def test_yields_full_permutation_group(self, size):
        positions = tuple(range(size))
        orderings = list(permutations(positions))
        assert len(orderings) == factorial(size)
        assert set(orderings) == set(itertools.permutations(positions))

    @given(st.lists(st.integers(min_value=0, max_value=3), min_size=0, max_size=5))
    def test_duplicates_are_distinguished_by_position(self, values):
        tagged = list(enumerate(values))
        orderings = list(permutations(tagged))
        assert len(orderings) == factorial(len(values))
        assert len(set(orderings)) == len(orderings)
        for ordering in orderings:
            assert sorted(ordering) == tagged

    def test_equal_values_still_produce_n_factorial(self):
        assert sum(1 for _ in permutations(["x", "x", "x"])) == 6

    def test_empty_input_yields_one_empty_ordering(self):
        assert list(permutations([])) == [()]


class TestOrder:
    def test_identity_comes_first(self):
        assert next(permutations("abcd")) == ("a", "b", "c", "d")

    def test_lexicographic_by_position(self):
        orderings = list(permutations(range(4)))
        assert orderings == sorted(orderings)

    def test_restartable_and_deterministic(self):
        items = ("a", "b", "c", "d", "e")
        assert list(permutations(items)) == list(permutations(items))


class TestLaziness:
    def test_returns_iterator(self):
        assert isinstance(permutations([1, 2, 3]), Iterator)

    def test_large_input_is_not_materialised(self):
        # 20! orderings would never fit in memory; only the first few are pulled.
        first = list(itertools.islice(permutations(range(20)), 3))
        assert first[0] == tuple(range(20))
        assert len(first) == 3

    def test_yielded_orderings_are_independent(self):
        source = [1, 2, 3]
        gen = permutations(source)
        first = next(gen)
        source.append(4)
        second = next(gen)
        assert first == (1, 2, 3)
        assert second == (1, 3, 2)


def test_permutation_count():
    assert permutation_count(5) == 120
    assert permutation_count(0) == 1
    with pytest.raises(ValueError, match="non-negative"):
        permutation_count(-1)
