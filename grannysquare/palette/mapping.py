"""
Round → color mapping for renderers.

The geometry core never sees colors; callers compute one color per round
here and pass the list to a renderer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from .types import Palette, RepetitionMethod


def generative_color(round_id: int) -> str:
    """A distinct hue per round, used when no palette colors are available."""
    return f"hsl({(round_id * 55 + 180) % 360} 70% 40%)"


def palette_index(round_id: int, n_colors: int, method: RepetitionMethod) -> int:
    """
    Index into an *n_colors* palette for round *round_id*.

    ALTERNATING walks the palette forward then back without repeating the
    end colors (period ``2(n - 1)``); with a single color it behaves like
    SEQUENTIAL.
    """
    if n_colors < 1:
        raise ValueError(f"n_colors must be >= 1, got {n_colors}")
    match method:
        case RepetitionMethod.SEQUENTIAL:
            return round_id % n_colors
        case RepetitionMethod.ALTERNATING:
            if n_colors == 1:
                return 0
            period = 2 * (n_colors - 1)
            i = round_id % period
            return i if i < n_colors else period - i
        case _:
            assert_never(method)


def color_for_round(
    round_id: int,
    palette: Palette | None,
    method: RepetitionMethod = RepetitionMethod.SEQUENTIAL,
) -> str:
    if palette is None or palette.is_generative:
        return generative_color(round_id)
    return palette.colors[palette_index(round_id, len(palette.colors), method)]


def colors_for_rounds(
    round_ids: Iterable[int],
    palette: Palette | None,
    method: RepetitionMethod = RepetitionMethod.SEQUENTIAL,
) -> list[str]:
    """One color per round id, in the order given."""
    return [color_for_round(i, palette, method) for i in round_ids]
