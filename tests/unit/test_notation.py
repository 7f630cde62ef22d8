"""Tests for the textual army encoding."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ageofwars.domain.enums import UnitClass
from ageofwars.domain.models import Army, Platoon
from ageofwars.domain.notation import parse_army, parse_count, parse_platoon, parse_unit_class


class TestParseCount:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12", 12),
            (" 7 ", 7),
            ("12abc", 12),
            ("abc", 0),
            ("", 0),
            ("-3", -3),
            ("+4", 4),
        ],
    )
    def test_leading_integer(self, text, expected):
        assert parse_count(text) == expected

    def test_non_string_is_zero(self):
        assert parse_count(None) == 0
        assert parse_count(12) == 0

    def test_count_beyond_int_conversion_limit_is_zero(self):
        assert parse_count("9" * 5000) == 0

    @given(st.text())
    def test_never_raises(self, text):
        assert isinstance(parse_count(text), int)


class TestParsePlatoon:
    def test_known_class(self):
        assert parse_platoon("Militia#10") == Platoon(UnitClass.MILITIA, 10)

    def test_fields_are_trimmed(self):
        assert parse_platoon("  Spearmen  #  20 ") == Platoon(UnitClass.SPEARMEN, 20)

    def test_missing_count_defaults_to_zero(self):
        assert parse_platoon("FootArcher") == Platoon(UnitClass.FOOT_ARCHER, 0)
        assert parse_platoon("FootArcher#") == Platoon(UnitClass.FOOT_ARCHER, 0)

    def test_negative_count_is_coerced(self):
        assert parse_platoon("Militia#-5").soldiers == 0

    def test_unknown_class_is_kept(self):
        platoon = parse_platoon("Catapult#3")
        assert platoon.unit_class == "Catapult"
        assert not isinstance(platoon.unit_class, UnitClass)

    def test_extra_fields_are_ignored(self):
        assert parse_platoon("Militia#4#9") == Platoon(UnitClass.MILITIA, 4)

    def test_oversized_count_is_zero(self):
        assert parse_army("Militia#" + "9" * 5000) == Army([Platoon(UnitClass.MILITIA, 0)])


def test_parse_unit_class():
    assert parse_unit_class("HeavyCavalry") is UnitClass.HEAVY_CAVALRY
    assert parse_unit_class("heavycavalry") == "heavycavalry"


class TestParseArmy:
    def test_preserves_order(self):
        army = parse_army("Spearmen#10;Militia#30;FootArcher#20")
        assert [p.unit_class for p in army] == [
            UnitClass.SPEARMEN,
            UnitClass.MILITIA,
            UnitClass.FOOT_ARCHER,
        ]
        assert [p.soldiers for p in army] == [10, 30, 20]

    def test_empty_tokens_are_dropped(self):
        assert len(parse_army(" ;Militia#1;; ;Spearmen#2;")) == 2

    @pytest.mark.parametrize("text", ["", None, 42, ["Militia#1"]])
    def test_empty_or_non_string_gives_empty_army(self, text):
        assert parse_army(text) == Army()

    def test_encoding_round_trip(self):
        text = "Spearmen#10;Militia#30;FootArcher#20;LightCavalry#1000;HeavyCavalry#120"
        assert str(parse_army(text)) == text

    def test_encoding_normalises_counts(self):
        assert str(parse_army("Militia; Spearmen # 12abc ;Catapult#-1")) == (
            "Militia#0;Spearmen#12;Catapult#0"
        )

    @given(st.text())
    def test_never_raises(self, text):
        army = parse_army(text)
        assert all(platoon.soldiers >= 0 for platoon in army)
