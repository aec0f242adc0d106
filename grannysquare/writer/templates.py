"""
Round prose templates for the TemplateWriter.

render_foundation returns the starting-ring line.
render_ring_round and render_growth_round convert one compiled Round into
pattern lines; a growth round works one chain-1 run per chain-1 space of the
round before it.
space_name names the space a cluster is worked into, from its AnchorType.
"""

from __future__ import annotations

from typing import assert_never

from grannysquare.schemas.round import AnchorType, Round

FOUNDATION_TEXT = "Start: Chain 4. Join with a slip stitch to the first chain to form a ring."
JOIN_TEXT = "Join with a slip stitch to the top of the beginning chain-3."


def space_name(anchor_type: AnchorType) -> str:
    """Crochet name of the space an anchor of *anchor_type* represents."""
    match anchor_type:
        case AnchorType.CENTER_RING:
            return "the ring"
        case AnchorType.CORNER:
            return "the corner chain-2 space"
        case AnchorType.SIDE_SPACE:
            return "the chain-1 space"
        case _:
            assert_never(anchor_type)


def worked_into(rnd: Round) -> AnchorType:
    """
    AnchorType of the space the round begins in.

    Read from the first cluster's anchor reference; rounds compiled without
    a previous round fall back to the ring for round 1 and a corner after.
    """
    first = next((c for side in rnd.sides for c in side.clusters), None)
    if first is not None and first.anchor_ref is not None:
        return first.anchor_ref.type
    return AnchorType.CENTER_RING if rnd.id == 1 else AnchorType.CORNER


def render_foundation() -> str:
    return FOUNDATION_TEXT


def render_ring_round(rnd: Round) -> list[str]:
    """Lines for the first stitch round, worked directly into the ring."""
    ring = space_name(worked_into(rnd))
    return [
        f"Chain 3 (counts as first dc), work 2 dc into {ring}, then chain 2.",
        f"*Work 3 dc into {ring}, chain 2.* Repeat from * to * 2 more times.",
        JOIN_TEXT,
    ]


def side_space_runs(side_clusters: int) -> int:
    """Chain-1 spaces of the previous round along one side: one per gap between its clusters."""
    return max(side_clusters - 1, 0)


def render_side_run(side_clusters: int) -> str | None:
    """
    The chain-1 / 3 dc run along one side, or None when the side has no
    chain-1 spaces to work into.

    The run is worked ``side_space_runs(side_clusters)`` times in total, so
    the repeat count is one less than that.
    """
    runs = side_space_runs(side_clusters)
    if runs == 0:
        return None
    step = f"Chain 1, work 3 dc in the next {_short(AnchorType.SIDE_SPACE)}."
    extra = runs - 1
    if extra == 0:
        return step
    plural = "time" if extra == 1 else "times"
    return f"*{step}* Repeat from * to * {extra} more {plural}."


def render_growth_round(rnd: Round, side_clusters: int) -> list[str]:
    """Lines for a round worked into the corner and chain-1 spaces of the last one."""
    corner = space_name(worked_into(rnd))
    run = render_side_run(side_clusters)
    lines = [
        f"Slip stitch across to the next {_short(AnchorType.CORNER)}.",
        f"Chain 3 (counts as first dc), work (2 dc, chain 2, 3 dc) all in {corner}. "
        "(This makes the first corner.)",
    ]
    if run is not None:
        lines.append(run)
    lines.append(
        "Chain 1, work (3 dc, chain 2, 3 dc) in the next corner space. (This makes a corner.)"
    )
    side_steps = "steps 3 and 4" if run is not None else "step 3"
    lines.append(f"Repeat {side_steps} two more times to work the remaining sides.")
    closing = f"Chain 1. {JOIN_TEXT}"
    lines.append(f"{run} {closing}" if run is not None else closing)
    return lines


def render_summary(rnd: Round) -> str:
    return (
        f"You now have {rnd.cluster_count} groups of 3 dc "
        f"and 4 corner chain-2 spaces."
    )


def _short(anchor_type: AnchorType) -> str:
    return space_name(anchor_type).removeprefix("the ")
