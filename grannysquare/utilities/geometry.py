"""
Geometry primitives for axis-aligned squares.

All functions are pure and stateless. Points are Vec2 values
in motif space; corners are always ordered TL, TR, BR, BL.
"""

from __future__ import annotations

import math
from typing import assert_never

from .types import SideIndex, Vec2

Corners = tuple[Vec2, Vec2, Vec2, Vec2]

# Outward unit normals in screen coordinates (y grows downward).
_OUTWARD: dict[SideIndex, tuple[float, float]] = {
    SideIndex.TOP: (0.0, -1.0),
    SideIndex.RIGHT: (1.0, 0.0),
    SideIndex.BOTTOM: (0.0, 1.0),
    SideIndex.LEFT: (-1.0, 0.0),
}


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Linear interpolation from *a* (t=0) to *b* (t=1)."""
    return Vec2(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def square_from_circumradius(center: Vec2, r: float) -> Corners:
    """
    Corners of the axis-aligned square with circumradius *r* around *center*.

    The half side is ``r·√2/2``. A negative radius is a caller error and is
    not checked here.
    """
    half_side = math.sqrt(2) * r / 2
    return (
        Vec2(center.x - half_side, center.y - half_side),  # top-left
        Vec2(center.x + half_side, center.y - half_side),  # top-right
        Vec2(center.x + half_side, center.y + half_side),  # bottom-right
        Vec2(center.x - half_side, center.y + half_side),  # bottom-left
    )


def side_endpoints(corners: Corners, side: SideIndex) -> tuple[Vec2, Vec2]:
    """Start and end corner of *side*, walking the square clockwise."""
    match side:
        case SideIndex.TOP:
            return corners[0], corners[1]
        case SideIndex.RIGHT:
            return corners[1], corners[2]
        case SideIndex.BOTTOM:
            return corners[2], corners[3]
        case SideIndex.LEFT:
            return corners[3], corners[0]
        case _:
            assert_never(side)


def pin_to_side(point: Vec2, on_line: Vec2, side: SideIndex) -> Vec2:
    """
    Force *point* onto the straight line of *side*.

    The off-axis coordinate (x for vertical sides, y for horizontal sides) is
    replaced by the coordinate of *on_line*, any point of the side.
    """
    if side.is_vertical:
        return Vec2(on_line.x, point.y)
    return Vec2(point.x, on_line.y)


def growth_offset(point: Vec2, side: SideIndex, amount: float) -> Vec2:
    """Move *point* outward from the motif center by *amount*, perpendicular to *side*."""
    dx, dy = _OUTWARD[side]
    return Vec2(point.x + dx * amount, point.y + dy * amount)


def along_side(point: Vec2, side: SideIndex, amount: float) -> Vec2:
    """Move *point* by *amount* along the in-axis direction of *side* (+x or +y)."""
    if side.is_vertical:
        return Vec2(point.x, point.y + amount)
    return Vec2(point.x + amount, point.y)
