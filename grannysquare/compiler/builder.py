"""
Pattern builder: compiles a full square from its list of round radii.

Round 0 is the foundation ring; every later round is compiled from the
round immediately before it, because its clusters are worked into that
round's anchors. This is the only place where rounds are sequenced.

Radii are expected to be positive and strictly increasing. Violations are
logged and compiled as given: a shrinking radius produces an overlapping,
geometrically meaningless square, but never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from grannysquare.compiler.compiler import compile_round
from grannysquare.compiler.pitch import FixedPitch, PitchPolicy, resolve_pitch
from grannysquare.schemas.round import Round
from grannysquare.utilities.types import Vec2

logger = logging.getLogger(__name__)


def build(
    radii: Sequence[float],
    center: Vec2,
    stitch_height: float,
    stitch_width: float,
    pitch: PitchPolicy | str | None = None,
    mark_starting_cluster: bool = True,
) -> tuple[Round, ...]:
    """
    Compile every round of the square.

    Args:
        radii: Circumradius per round; index 0 is the foundation ring.
        center: Motif center.
        stitch_height: Nominal stitch height.
        stitch_width: Nominal stitch width.
        pitch: Pitch policy object or registered name; defaults to the fixed
            "chart" pitch.
        mark_starting_cluster: Forwarded to :func:`compile_round`.

    Returns:
        One Round per radius, in order; ``result[0]`` is the foundation.
        Empty when *radii* is empty.
    """
    policy = resolve_pitch(pitch) if pitch is not None else FixedPitch()
    _warn_on_invalid_radii(radii)

    rounds: list[Round] = []
    prev: Round | None = None
    for round_id, r in enumerate(radii):
        current = compile_round(
            prev,
            round_id,
            center,
            r,
            stitch_height,
            stitch_width,
            policy,
            mark_starting_cluster,
        )
        rounds.append(current)
        prev = current

    logger.debug("Built %d rounds with %s pitch", len(rounds), policy.name)
    return tuple(rounds)


def _warn_on_invalid_radii(radii: Sequence[float]) -> None:
    for i, r in enumerate(radii):
        if r <= 0:
            logger.warning("Radius %d is not positive (%s); compiling as given", i, r)
        if i > 0 and r <= radii[i - 1]:
            logger.warning(
                "Radius %d (%s) does not exceed radius %d (%s); rounds will overlap",
                i,
                r,
                i - 1,
                radii[i - 1],
            )
