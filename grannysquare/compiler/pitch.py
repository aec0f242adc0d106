"""
Pitch policies: how far apart the stitches of a cluster are spread.

The round compiler takes one policy as an injected strategy. FixedPitch
draws every round with the nominal stitch width (the schematic "chart"
layout); ProportionalPitch divides the actual side length evenly between
the side's stitch units (the "realistic" layout), so stitches of large
rounds spread out to fill their side.

Usage
-----
Policies are looked up by name::

    from grannysquare.compiler.pitch import get_pitch_policy

    pitch = get_pitch_policy("realistic")
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PitchPolicy(Protocol):
    """Protocol for stitch pitch strategies."""

    name: str

    def effective_stitch_width(
        self, side_length: float, stitch_units: int, stitch_width: float
    ) -> float: ...


class FixedPitch:
    """Every stitch is ``stitch_width`` wide regardless of the side length."""

    name = "chart"

    def effective_stitch_width(
        self, side_length: float, stitch_units: int, stitch_width: float
    ) -> float:
        return stitch_width

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixedPitch)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return "FixedPitch()"


class ProportionalPitch:
    """Each stitch unit gets an equal share of the side length."""

    name = "realistic"

    def effective_stitch_width(
        self, side_length: float, stitch_units: int, stitch_width: float
    ) -> float:
        if stitch_units < 1:
            raise ValueError(f"stitch_units must be >= 1, got {stitch_units}")
        return side_length / stitch_units

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ProportionalPitch)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return "ProportionalPitch()"


_REGISTRY: dict[str, PitchPolicy] = {
    FixedPitch.name: FixedPitch(),
    ProportionalPitch.name: ProportionalPitch(),
}


def get_pitch_policy(name: str) -> PitchPolicy:
    """Return the pitch policy registered under *name*.

    Raises
    ------
    KeyError
        If *name* is not a known policy.
    """
    if name not in _REGISTRY:
        raise KeyError(f"Unknown pitch policy: {name!r}")
    return _REGISTRY[name]


def list_policies() -> list[str]:
    """Return a sorted list of all registered pitch policy names."""
    return sorted(_REGISTRY.keys())


def resolve_pitch(pitch: PitchPolicy | str) -> PitchPolicy:
    """Accept either a policy object or its registered name."""
    if isinstance(pitch, str):
        return get_pitch_policy(pitch)
    return pitch
