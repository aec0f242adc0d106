"""Tests for grannysquare/palette/mapping.py."""

import pytest

from grannysquare.palette import (
    Palette,
    RepetitionMethod,
    color_for_round,
    colors_for_rounds,
    generative_color,
    palette_index,
)

FIVE = Palette(name="Five", colors=("#000000", "#111111", "#222222", "#333333", "#444444"))


class TestPaletteIndex:
    def test_sequential_wraps(self):
        got = [palette_index(i, 5, RepetitionMethod.SEQUENTIAL) for i in range(7)]
        assert got == [0, 1, 2, 3, 4, 0, 1]

    def test_alternating_reflects(self):
        got = [palette_index(i, 5, RepetitionMethod.ALTERNATING) for i in range(10)]
        assert got == [0, 1, 2, 3, 4, 3, 2, 1, 0, 1]

    def test_alternating_two_colors(self):
        got = [palette_index(i, 2, RepetitionMethod.ALTERNATING) for i in range(4)]
        assert got == [0, 1, 0, 1]

    @pytest.mark.parametrize("method", list(RepetitionMethod))
    def test_single_color_always_zero(self, method):
        assert {palette_index(i, 1, method) for i in range(6)} == {0}

    @pytest.mark.parametrize("method", list(RepetitionMethod))
    def test_index_in_range(self, method):
        for n in range(1, 7):
            for i in range(20):
                assert 0 <= palette_index(i, n, method) < n

    def test_zero_colors_raises(self):
        with pytest.raises(ValueError):
            palette_index(0, 0, RepetitionMethod.SEQUENTIAL)


class TestGenerativeColor:
    def test_round_zero(self):
        assert generative_color(0) == "hsl(180 70% 40%)"

    def test_hue_steps_by_55(self):
        assert generative_color(1) == "hsl(235 70% 40%)"
        assert generative_color(4) == "hsl(40 70% 40%)"


class TestColorForRound:
    def test_palette_color(self):
        assert color_for_round(6, FIVE) == "#111111"

    def test_alternating_method(self):
        assert color_for_round(6, FIVE, RepetitionMethod.ALTERNATING) == "#222222"

    def test_none_palette_is_generative(self):
        assert color_for_round(3, None) == generative_color(3)

    def test_empty_palette_is_generative(self):
        assert color_for_round(3, Palette(name="Default", colors=())) == generative_color(3)

    def test_colors_for_rounds_order(self):
        assert colors_for_rounds([2, 0, 1], FIVE) == ["#222222", "#000000", "#111111"]
