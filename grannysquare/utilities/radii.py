"""
Circumradius sequence for a square of a given number of rounds.

The foundation ring is one stitch wide; every stitch round then adds two and
a half stitch heights to the circumradius.
"""

from __future__ import annotations

import math

ROUND_GROWTH_STITCH_HEIGHTS: float = 2.5


def foundation_radius(stitch_width: float) -> float:
    """Circumradius of the foundation ring: a square one stitch width across."""
    return stitch_width / math.sqrt(2)


def radii_for_rounds(n_rounds: int, stitch_width: float, stitch_height: float) -> list[float]:
    """
    Radii for the foundation ring followed by *n_rounds* stitch rounds.

    Args:
        n_rounds: Number of stitch rounds worked around the ring.
        stitch_width: Nominal width of one stitch.
        stitch_height: Nominal height of one stitch.

    Returns:
        ``n_rounds + 1`` strictly increasing radii, index 0 being the
        foundation. Empty when ``n_rounds <= 0``.
    """
    if n_rounds <= 0:
        return []
    radii = [foundation_radius(stitch_width)]
    for _ in range(n_rounds):
        radii.append(radii[-1] + ROUND_GROWTH_STITCH_HEIGHTS * stitch_height)
    return radii
