"""
Yarn palettes and per-round color assignment.

Palettes are configuration for renderers; the round compiler never reads
them.
"""

from .mapping import color_for_round, colors_for_rounds, generative_color, palette_index
from .registry import DEFAULT_PALETTE_NAME, PaletteRegistry, get_registry
from .types import Palette, RepetitionMethod

__all__ = [
    "Palette",
    "RepetitionMethod",
    "PaletteRegistry",
    "DEFAULT_PALETTE_NAME",
    "get_registry",
    "color_for_round",
    "colors_for_rounds",
    "generative_color",
    "palette_index",
]
