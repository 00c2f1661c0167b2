"""
Tests for the Allocation value type and LayoutVariant coercion.

Author: Michael Economou
Date: 2026-10-03
"""

import math

import pytest

from trisplit.domain.allocation import Allocation, LayoutVariant


class TestFromMapping:
    def test_reads_numbers(self):
        assert Allocation.from_mapping({"left": 30, "main": 40.5, "right": 29.5}) == Allocation(
            30.0, 40.5, 29.5
        )

    def test_keeps_non_finite_values_for_the_caller(self):
        result = Allocation.from_mapping({"left": math.inf, "main": 40, "right": 30})
        assert result is not None
        assert math.isinf(result.left)

    @pytest.mark.parametrize(
        "data",
        [
            None,
            [30, 40, 30],
            "30,40,30",
            {"left": 30, "main": 40},
            {"left": None, "main": 40, "right": 30},
            {"left": "30", "main": 40, "right": 30},
            {"left": True, "main": 40, "right": 30},
            {"left": 10**400, "main": 40, "right": 30},
        ],
    )
    def test_rejects_malformed_data(self, data):
        assert Allocation.from_mapping(data) is None


def test_replace_and_total():
    allocation = Allocation(30, 40, 30)
    assert allocation.total == 100
    assert allocation.replace(left=20) == Allocation(20, 40, 30)
    assert allocation.to_dict() == {"left": 30, "main": 40, "right": 30}


class TestLayoutVariant:
    def test_known_tags_map_to_members(self):
        assert LayoutVariant.coerce("WIDE") is LayoutVariant.WIDE
        assert LayoutVariant.coerce(LayoutVariant.INPUTLESS) is LayoutVariant.INPUTLESS

    def test_none_is_regular(self):
        assert LayoutVariant.coerce(None) is LayoutVariant.REGULAR

    def test_unknown_tags_are_kept(self):
        assert LayoutVariant.coerce("Custom") == "custom"
        assert LayoutVariant.tag_of(LayoutVariant.coerce("Custom")) == "custom"
