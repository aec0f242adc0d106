"""
Round compiler: turns one round's parameters into a fully populated Round.

Foundation (round 0):
  Each side gets no clusters, no corner chains, and a single CENTER_RING
  anchor at its midpoint: the four places round 1 is worked into the ring.

Growth (round n >= 1), per side:
  1. n clusters; the side is divided into ``stitch_units(n)`` units.
  2. Two corner chains half a unit in from each end, snapped onto the edge.
  3. Cluster j is worked into anchor slot j of the same side of the previous
     round: its center is that anchor pushed outward by one stitch height and
     pinned onto this side's line. Without a previous round the center is
     placed parametrically instead.
  4. Three double crochet per cluster, spread along the side at 0.8 × the
     pitch policy's effective stitch width.
  5. Outgoing anchors: first corner, the gaps between adjacent clusters,
     last corner, n + 1 in total.

Sides never read each other's output; each only reads the matching side of
the previous round, so ``compile_side`` may be called in any order.
"""

from __future__ import annotations

from grannysquare.compiler.pitch import FixedPitch, PitchPolicy
from grannysquare.schemas.round import (
    Anchor,
    AnchorRef,
    AnchorType,
    Cluster,
    Round,
    RoundGeo,
    Side,
    Stitch,
    StitchKind,
)
from grannysquare.utilities.geometry import (
    along_side,
    distance,
    growth_offset,
    lerp,
    pin_to_side,
    side_endpoints,
    square_from_circumradius,
)
from grannysquare.utilities.types import SideIndex, Vec2

STITCH_SPREAD: float = 0.8
_STITCH_OFFSETS: tuple[int, int, int] = (-1, 0, 1)


class AnchorSlotError(IndexError):
    """Raised when a cluster references an anchor slot the previous round does not have.

    Attributes:
        round_id: Round being compiled.
        side: Side being compiled.
        slot_index: Requested slot in the previous round's anchor list.
        available: Number of anchors that side actually exposes.
    """

    def __init__(self, round_id: int, side: SideIndex, slot_index: int, available: int) -> None:
        super().__init__(
            f"round {round_id} side {side.name}: anchor slot {slot_index} out of range "
            f"(previous round exposes {available} anchors)"
        )
        self.round_id = round_id
        self.side = side
        self.slot_index = slot_index
        self.available = available


def build_round_geo(round_id: int, center: Vec2, r: float) -> RoundGeo:
    """Bounding square of round *round_id* with circumradius *r*."""
    return RoundGeo(circumradius=r, corners=square_from_circumradius(center, r), center=center)


def stitch_units(round_id: int) -> int:
    """
    Number of stitch units one side of round *round_id* is divided into.

    Round 1 has a single cluster flanked by corner chains (4 units); later
    rounds have three units per cluster plus one per corner chain.
    """
    if round_id < 1:
        raise ValueError(f"stitch_units is defined for round_id >= 1, got {round_id}")
    if round_id == 1:
        return 4
    return 3 * round_id + 2


def compile_round(
    prev: Round | None,
    round_id: int,
    center: Vec2,
    r: float,
    stitch_height: float,
    stitch_width: float,
    pitch: PitchPolicy | None = None,
    mark_starting_cluster: bool = True,
) -> Round:
    """
    Compile one round.

    Parameters
    ----------
    prev:
        The immediately preceding round, or None. Round 0 ignores it.
    round_id:
        Index of the round being compiled; 0 is the foundation ring.
    center:
        Motif center.
    r:
        Circumradius of this round's bounding square.
    stitch_height, stitch_width:
        Nominal stitch dimensions.
    pitch:
        Stitch pitch policy; defaults to :class:`FixedPitch`.
    mark_starting_cluster:
        Flag the first cluster of the RIGHT side as the round's starting
        cluster.

    Returns
    -------
    Round
        The immutable compiled round.

    Raises
    ------
    AnchorSlotError
        If the previous round exposes fewer anchors than this round needs.
    """
    geo = build_round_geo(round_id, center, r)
    policy = pitch if pitch is not None else FixedPitch()

    if round_id == 0:
        return Round(id=0, geo=geo, sides=tuple(_foundation_side(geo, s) for s in SideIndex))

    sides = tuple(
        compile_side(
            prev, round_id, geo, side, stitch_height, stitch_width, policy, mark_starting_cluster
        )
        for side in SideIndex
    )
    return Round(id=round_id, geo=geo, sides=sides)


def _foundation_side(geo: RoundGeo, side: SideIndex) -> Side:
    p0, p1 = side_endpoints(geo.corners, side)
    return Side(
        side=side,
        clusters=(),
        corner_chains=(),
        anchors_on_this_side=(Anchor(position=lerp(p0, p1, 0.5), type=AnchorType.CENTER_RING),),
    )


def compile_side(
    prev: Round | None,
    round_id: int,
    geo: RoundGeo,
    side: SideIndex,
    stitch_height: float,
    stitch_width: float,
    pitch: PitchPolicy,
    mark_starting_cluster: bool = True,
) -> Side:
    """Compile a single side of growth round *round_id* (>= 1)."""
    p0, p1 = side_endpoints(geo.corners, side)
    num_clusters = round_id
    units = stitch_units(round_id)
    spread = STITCH_SPREAD * pitch.effective_stitch_width(distance(p0, p1), units, stitch_width)

    corner_t = 0.5 / units
    corner1 = pin_to_side(lerp(p0, p1, corner_t), p0, side)
    corner2 = pin_to_side(lerp(p0, p1, 1 - corner_t), p0, side)
    corner_chains = (
        Stitch(id=f"r{round_id}-s{side.value}-corner1", kind=StitchKind.CHAIN, position=corner1),
        Stitch(id=f"r{round_id}-s{side.value}-corner2", kind=StitchKind.CHAIN, position=corner2),
    )

    prev_anchors = prev.sides[side].anchors_on_this_side if prev is not None else ()
    clusters: list[Cluster] = []

    for j in range(num_clusters):
        anchor_ref: AnchorRef | None = None
        if prev is not None:
            if j >= len(prev_anchors):
                raise AnchorSlotError(round_id, side, j, len(prev_anchors))
            anchor = prev_anchors[j]
            anchor_ref = AnchorRef(round_id=prev.id, side=side, slot_index=j, type=anchor.type)
            center = growth_offset(anchor.position, side, stitch_height)
        else:
            t = 0.5 if round_id == 1 else (3 * j + 2.5) / units
            center = lerp(p0, p1, t)
        center = pin_to_side(center, p0, side)

        cluster_id = f"r{round_id}-s{side.value}-c{j}"
        stitches = tuple(
            Stitch(
                id=f"{cluster_id}-dc{k + 1}",
                kind=StitchKind.DOUBLE_CROCHET,
                position=along_side(center, side, k * spread),
            )
            for k in _STITCH_OFFSETS
        )
        clusters.append(
            Cluster(
                id=cluster_id,
                side=side,
                center_position=center,
                stitches=stitches,
                anchor_ref=anchor_ref,
                is_starting_cluster=mark_starting_cluster and side == SideIndex.RIGHT and j == 0,
            )
        )

    gaps = tuple(
        Anchor(position=lerp(a.center_position, b.center_position, 0.5), type=AnchorType.SIDE_SPACE)
        for a, b in zip(clusters, clusters[1:])
    )
    anchors = (
        (Anchor(position=corner1, type=AnchorType.CORNER),)
        + gaps
        + (Anchor(position=corner2, type=AnchorType.CORNER),)
    )

    return Side(
        side=side,
        clusters=tuple(clusters),
        corner_chains=corner_chains,
        anchors_on_this_side=anchors,
    )
