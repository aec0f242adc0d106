"""Tests for writer.templates: space naming and per-round prose."""

import pytest

from grannysquare.compiler.builder import build
from grannysquare.compiler.compiler import compile_round
from grannysquare.schemas.round import AnchorType
from grannysquare.utilities.radii import radii_for_rounds
from grannysquare.utilities.types import Vec2
from grannysquare.writer.templates import (
    FOUNDATION_TEXT,
    render_foundation,
    render_growth_round,
    render_ring_round,
    render_side_run,
    render_summary,
    side_space_runs,
    space_name,
    worked_into,
)

ORIGIN = Vec2(0.0, 0.0)
_ROUNDS = build(radii_for_rounds(5, 24.0, 24.0), ORIGIN, 24.0, 24.0)


class TestSpaceName:
    @pytest.mark.parametrize(
        "anchor_type, expected",
        [
            (AnchorType.CENTER_RING, "the ring"),
            (AnchorType.CORNER, "the corner chain-2 space"),
            (AnchorType.SIDE_SPACE, "the chain-1 space"),
        ],
    )
    def test_every_anchor_type_named(self, anchor_type, expected):
        assert space_name(anchor_type) == expected


class TestWorkedInto:
    def test_round_one_into_ring(self):
        assert worked_into(_ROUNDS[1]) == AnchorType.CENTER_RING

    def test_later_rounds_into_corner(self):
        for rnd in _ROUNDS[2:]:
            assert worked_into(rnd) == AnchorType.CORNER

    def test_unanchored_round_falls_back(self):
        assert worked_into(compile_round(None, 1, ORIGIN, 50.0, 24.0, 24.0)) == AnchorType.CENTER_RING
        assert worked_into(compile_round(None, 3, ORIGIN, 90.0, 24.0, 24.0)) == AnchorType.CORNER


class TestRenderFoundation:
    def test_ring_line(self):
        assert render_foundation() == FOUNDATION_TEXT
        assert "ring" in FOUNDATION_TEXT


class TestRenderRingRound:
    def test_three_lines_into_ring(self):
        lines = render_ring_round(_ROUNDS[1])
        assert len(lines) == 3
        assert "into the ring" in lines[0]
        assert "2 more times" in lines[1]
        assert lines[2].startswith("Join")


class TestRenderSideRun:
    def test_no_chain_one_spaces(self):
        assert side_space_runs(1) == 0
        assert render_side_run(1) is None

    def test_single_run_has_no_repeat(self):
        assert render_side_run(2) == "Chain 1, work 3 dc in the next chain-1 space."

    def test_two_runs_repeat_once(self):
        assert render_side_run(3).endswith("Repeat from * to * 1 more time.")

    def test_many_runs_plural(self):
        assert render_side_run(6).endswith("Repeat from * to * 4 more times.")

    @pytest.mark.parametrize("round_id", [2, 3, 4, 5])
    def test_runs_match_previous_round_side_spaces(self, round_id):
        prev = _ROUNDS[round_id - 1]
        side_spaces = [
            a for a in prev.sides[0].anchors_on_this_side if a.type == AnchorType.SIDE_SPACE
        ]
        side_clusters = len(_ROUNDS[round_id].sides[0].clusters) - 1
        assert side_space_runs(side_clusters) == len(side_spaces)


class TestRenderGrowthRound:
    def test_six_steps(self):
        assert len(render_growth_round(_ROUNDS[3], 2)) == 6

    def test_five_steps_without_side_spaces(self):
        lines = render_growth_round(_ROUNDS[2], 1)
        assert len(lines) == 5
        assert lines[3] == "Repeat step 3 two more times to work the remaining sides."
        assert not any("chain-1 space" in line for line in lines)

    def test_first_corner_named_from_anchor(self):
        assert "the corner chain-2 space" in render_growth_round(_ROUNDS[2], 1)[1]

    def test_closing_join(self):
        for round_id, side_clusters in ((2, 1), (4, 3)):
            assert render_growth_round(_ROUNDS[round_id], side_clusters)[-1].endswith(
                "Chain 1. Join with a slip stitch to the top of the beginning chain-3."
            )


class TestRenderSummary:
    @pytest.mark.parametrize("round_id", [1, 2, 3, 4])
    def test_counts_all_groups(self, round_id):
        assert render_summary(_ROUNDS[round_id]).startswith(f"You now have {4 * round_id} groups")
