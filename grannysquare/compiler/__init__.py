"""
Round compilation engine.

One compiler with an injected pitch policy; the builder sequences it over a
list of radii.
"""

from .builder import build
from .compiler import AnchorSlotError, build_round_geo, compile_round, compile_side, stitch_units
from .pitch import (
    FixedPitch,
    PitchPolicy,
    ProportionalPitch,
    get_pitch_policy,
    list_policies,
    resolve_pitch,
)

__all__ = [
    "build",
    "compile_round",
    "compile_side",
    "build_round_geo",
    "stitch_units",
    "AnchorSlotError",
    "PitchPolicy",
    "FixedPitch",
    "ProportionalPitch",
    "get_pitch_policy",
    "list_policies",
    "resolve_pitch",
]
