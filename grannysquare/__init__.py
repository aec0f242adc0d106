"""
grannysquare: round-by-round granny square pattern generator.

Compiles a sequence of round circumradii into an immutable geometric model
(rounds → sides → clusters → stitches → anchors) and projects it into
written crochet instructions and a schematic SVG chart.
"""

from grannysquare.compiler.builder import build
from grannysquare.compiler.compiler import AnchorSlotError, compile_round
from grannysquare.compiler.pitch import FixedPitch, PitchPolicy, ProportionalPitch

__all__ = [
    "build",
    "compile_round",
    "AnchorSlotError",
    "PitchPolicy",
    "FixedPitch",
    "ProportionalPitch",
]
