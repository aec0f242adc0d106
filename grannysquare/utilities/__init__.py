"""
Shared geometry utilities for the granny square generator.

Provides the point and side types, pure square geometry helpers, and the
radius sequence used to size each round.
"""

from .geometry import (
    Corners,
    along_side,
    distance,
    growth_offset,
    lerp,
    pin_to_side,
    side_endpoints,
    square_from_circumradius,
)
from .radii import ROUND_GROWTH_STITCH_HEIGHTS, foundation_radius, radii_for_rounds
from .types import SideIndex, Vec2

__all__ = [
    # types
    "Vec2",
    "SideIndex",
    "Corners",
    # geometry
    "lerp",
    "distance",
    "square_from_circumradius",
    "side_endpoints",
    "pin_to_side",
    "growth_offset",
    "along_side",
    # radii
    "ROUND_GROWTH_STITCH_HEIGHTS",
    "foundation_radius",
    "radii_for_rounds",
]
