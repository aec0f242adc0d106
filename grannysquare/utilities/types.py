"""
Core type definitions for the geometry layer.

Vec2 is a frozen dataclass; SideIndex is the fixed, cyclically ordered set of
square sides. Both are immutable and safe to share across rounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class Vec2:
    """A 2D point in motif space (origin at the motif center, y grows downward)."""

    x: float
    y: float


class SideIndex(IntEnum):
    """Square sides in clockwise order, starting at the top."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    @property
    def is_vertical(self) -> bool:
        return self in (SideIndex.RIGHT, SideIndex.LEFT)

    @property
    def next(self) -> SideIndex:
        """The following side in clockwise order (LEFT wraps to TOP)."""
        return SideIndex((self.value + 1) % 4)
