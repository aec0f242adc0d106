"""
Schematic SVG chart of a compiled square.

Draws each round in its own color: a dashed bounding square, ellipses for
corner chains and stitches, and, for every anchored cluster, a double
crochet symbol (post plus crossbar) running from the anchor it was worked
into. The round's starting cluster replaces its first stitch with the
beginning chain-3.

Output is a standalone SVG document string; nothing is rasterized.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import assert_never

from grannysquare.compiler.compiler import AnchorSlotError
from grannysquare.schemas.round import AnchorType, Cluster, Round, Stitch
from grannysquare.utilities.geometry import distance, lerp, side_endpoints
from grannysquare.utilities.types import SideIndex, Vec2

_LINE_WIDTH = 1.5
_START_CHAIN_SCALE = 0.8


def render_chart_svg(
    rounds: Sequence[Round],
    colors: Sequence[str],
    stitch_width: float,
    stitch_height: float,
    show_stitches: bool = True,
    size: int = 400,
    padding: int = 20,
) -> str:
    """
    Render *rounds* as a square SVG chart *size* pixels across.

    Args:
        rounds: Compiled rounds, foundation first.
        colors: One stroke color per round.
        stitch_width, stitch_height: Nominal stitch dimensions; set symbol sizes.
        show_stitches: When False, cluster stitches are drawn flat.
        size: Width and height of the document in pixels.
        padding: Margin kept free around the outermost round.

    Raises:
        ValueError: If *colors* does not hold exactly one entry per round.
        AnchorSlotError: If a cluster references an anchor slot its source
            round does not have.
        IndexError: If a cluster references a round missing from *rounds*.
    """
    if len(colors) != len(rounds):
        raise ValueError(f"Expected {len(rounds)} colors, got {len(colors)}")

    lines: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">',
        f'<rect width="{size}" height="{size}" fill="white"/>',
        f'<g transform="translate({size / 2:.2f} {size / 2:.2f}) '
        f'scale({_scale(rounds, size, padding):.4f})">',
    ]
    rx = stitch_width / 4
    ry = stitch_height / 8

    for rnd, color in zip(rounds, colors):
        lines.append(f'<g stroke="{color}" fill="none" stroke-width="{_LINE_WIDTH}">')
        _outline(lines, rnd)
        if rnd.is_foundation:
            _foundation(lines, rnd, rx, ry)
        else:
            for side in rnd.sides:
                for chain in side.corner_chains:
                    _ellipse(lines, chain.position, rx, ry, side.side.is_vertical)
                for cluster in side.clusters:
                    anchor = _anchor_position(rounds, cluster)
                    if anchor is not None:
                        _cluster_posts(lines, cluster, anchor, rx, ry, stitch_width)
                    for stitch in cluster.stitches:
                        _ellipse(
                            lines,
                            stitch.position,
                            rx,
                            ry if show_stitches else 0,
                            side.side.is_vertical,
                        )
        lines.append("</g>")

    lines.append("</g>")
    lines.append("</svg>")
    return "\n".join(lines)


def _scale(rounds: Sequence[Round], size: int, padding: int) -> float:
    """Fit the outermost round's side into the canvas minus padding."""
    if not rounds:
        return 1.0
    dimension = math.sqrt(2) * rounds[-1].geo.circumradius
    if dimension <= 0:
        return 1.0
    return (size - padding) / dimension


def _fmt(p: Vec2) -> str:
    return f"{p.x:.2f},{p.y:.2f}"


def _outline(lines: list[str], rnd: Round) -> None:
    points = " ".join(_fmt(c) for c in rnd.geo.corners)
    lines.append(
        f'<polygon points="{points}" stroke-width="1" stroke-dasharray="3,3" opacity="0.6"/>'
    )


def _foundation(lines: list[str], rnd: Round, rx: float, ry: float) -> None:
    """Ring through the side midpoints with one chain symbol per side."""
    mids = [lerp(*side_endpoints(rnd.geo.corners, s), 0.5) for s in SideIndex]
    lines.append(f'<polygon points="{" ".join(_fmt(m) for m in mids)}"/>')
    for side, mid in zip(SideIndex, mids):
        _ellipse(lines, mid, rx, ry, side.is_vertical)


def _ellipse(
    lines: list[str], p: Vec2, rx: float, ry: float, vertical: bool, angle: float = 0.0
) -> None:
    rotation = angle + (90.0 if vertical else 0.0)
    transform = f' transform="rotate({rotation:.2f} {p.x:.2f} {p.y:.2f})"' if rotation else ""
    lines.append(
        f'<ellipse cx="{p.x:.2f}" cy="{p.y:.2f}" rx="{rx:.2f}" ry="{ry:.2f}"{transform}/>'
    )


def _anchor_position(rounds: Sequence[Round], cluster: Cluster) -> Vec2 | None:
    """Position of the anchor *cluster* was worked into; None for unanchored clusters."""
    ref = cluster.anchor_ref
    if ref is None:
        return None
    anchors = rounds[ref.round_id].sides[ref.side].anchors_on_this_side
    if ref.slot_index >= len(anchors):
        raise AnchorSlotError(ref.round_id + 1, ref.side, ref.slot_index, len(anchors))
    return anchors[ref.slot_index].position


def _starts_round(cluster: Cluster) -> bool:
    """The starting cluster gets a chain-3 only when worked into a corner or the ring."""
    if not cluster.is_starting_cluster or cluster.anchor_ref is None:
        return False
    match cluster.anchor_ref.type:
        case AnchorType.CORNER | AnchorType.CENTER_RING:
            return True
        case AnchorType.SIDE_SPACE:
            return False
        case _:
            assert_never(cluster.anchor_ref.type)


def _cluster_posts(
    lines: list[str],
    cluster: Cluster,
    anchor: Vec2,
    rx: float,
    ry: float,
    stitch_width: float,
) -> None:
    if _starts_round(cluster):
        first = cluster.stitches[0].position
        angle = math.degrees(math.atan2(first.y - anchor.y, first.x - anchor.x))
        for t in (0.25, 0.5, 0.75):
            _ellipse(
                lines,
                lerp(anchor, first, t),
                rx * _START_CHAIN_SCALE,
                ry * _START_CHAIN_SCALE,
                False,
                angle,
            )
        for stitch in cluster.stitches[1:]:
            _double_crochet(lines, anchor, stitch, 0.25, stitch_width / 3)
    else:
        for stitch in cluster.stitches:
            _double_crochet(lines, anchor, stitch, 0.3, stitch_width / 5)


def _double_crochet(
    lines: list[str], anchor: Vec2, stitch: Stitch, bar_at: float, bar_half_width: float
) -> None:
    """Post from *anchor* to the stitch, crossed *bar_at* of the way back from its top."""
    top = stitch.position
    lines.append(
        f'<line x1="{anchor.x:.2f}" y1="{anchor.y:.2f}" x2="{top.x:.2f}" y2="{top.y:.2f}"/>'
    )
    length = distance(anchor, top)
    if length == 0:
        return
    ux, uy = (top.x - anchor.x) / length, (top.y - anchor.y) / length
    bar = Vec2(top.x - ux * length * bar_at, top.y - uy * length * bar_at)
    a = Vec2(bar.x + uy * bar_half_width, bar.y - ux * bar_half_width)
    b = Vec2(bar.x - uy * bar_half_width, bar.y + ux * bar_half_width)
    lines.append(f'<line x1="{a.x:.2f}" y1="{a.y:.2f}" x2="{b.x:.2f}" y2="{b.y:.2f}"/>')
