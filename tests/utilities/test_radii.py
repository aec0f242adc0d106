"""Tests for the round radius sequence."""

import math

import pytest

from grannysquare.utilities.radii import (
    ROUND_GROWTH_STITCH_HEIGHTS,
    foundation_radius,
    radii_for_rounds,
)


class TestFoundationRadius:
    def test_square_one_stitch_across(self):
        """Side of the foundation square equals the stitch width."""
        assert math.sqrt(2) * foundation_radius(24.0) == pytest.approx(24.0)


class TestRadiiForRounds:
    def test_zero_rounds_is_empty(self):
        assert radii_for_rounds(0, 24.0, 24.0) == []

    def test_negative_rounds_is_empty(self):
        assert radii_for_rounds(-2, 24.0, 24.0) == []

    def test_includes_foundation(self):
        assert len(radii_for_rounds(4, 24.0, 24.0)) == 5

    def test_known_values(self):
        radii = radii_for_rounds(2, 24.0, 10.0)
        assert radii[0] == pytest.approx(24.0 / math.sqrt(2))
        assert radii[1] == pytest.approx(radii[0] + 25.0)
        assert radii[2] == pytest.approx(radii[0] + 50.0)

    def test_strictly_increasing(self):
        radii = radii_for_rounds(8, 8.0, 8.0)
        assert all(b > a for a, b in zip(radii, radii[1:]))

    def test_growth_constant(self):
        assert ROUND_GROWTH_STITCH_HEIGHTS == 2.5
