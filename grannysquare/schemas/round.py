"""
Round model schema: the output contract of the round compiler.

A Round is the complete, immutable description of one round of the square:
its bounding geometry and four Sides. Each Side carries its clusters of
double crochet, its two corner chains, and the anchors the *next* round
attaches to. Clusters point back at the anchor they grew from through an
AnchorRef, forming the positional chain from the center ring outward.

Renderers and writers consume Round tuples; nothing modifies a Round after
the compiler returns it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from grannysquare.utilities.types import SideIndex, Vec2


class AnchorType(str, Enum):
    """The kind of space an anchor represents."""

    CORNER = "corner"
    SIDE_SPACE = "side-space"
    CENTER_RING = "center-ring"


class StitchKind(str, Enum):
    CHAIN = "chain"
    DOUBLE_CROCHET = "dc"


@dataclass(frozen=True)
class RoundGeo:
    """
    Bounding square of a round.

    Attributes:
        circumradius: Distance from ``center`` to each corner.
        corners: Corner points ordered top-left, top-right, bottom-right,
            bottom-left.
        center: Center of the square.
    """

    circumradius: float
    corners: tuple[Vec2, Vec2, Vec2, Vec2]
    center: Vec2


@dataclass(frozen=True)
class Stitch:
    id: str
    kind: StitchKind
    position: Vec2


@dataclass(frozen=True)
class Anchor:
    """A point on a round where a cluster of the next round may be worked."""

    position: Vec2
    type: AnchorType


@dataclass(frozen=True)
class AnchorRef:
    """
    Back-reference from a cluster to the anchor it was worked into.

    ``slot_index`` indexes ``anchors_on_this_side`` of side ``side`` in round
    ``round_id``.
    """

    round_id: int
    side: SideIndex
    slot_index: int
    type: AnchorType

    def __post_init__(self) -> None:
        if self.round_id < 0:
            raise ValueError(f"round_id must be >= 0, got {self.round_id}")
        if self.slot_index < 0:
            raise ValueError(f"slot_index must be >= 0, got {self.slot_index}")


@dataclass(frozen=True)
class Cluster:
    """
    A group of three double crochet worked into one anchor.

    Attributes:
        id: ``r{round}-s{side}-c{slot}``.
        side: Side the cluster sits on.
        center_position: Position of the middle stitch.
        stitches: The three DOUBLE_CROCHET stitches, in in-axis order.
        anchor_ref: Anchor of the previous round this cluster is worked into,
            or None when the round was compiled without a previous round.
        is_starting_cluster: True for the cluster whose first stitch is
            replaced by the round's beginning chain-3.
    """

    id: str
    side: SideIndex
    center_position: Vec2
    stitches: tuple[Stitch, Stitch, Stitch]
    anchor_ref: AnchorRef | None = None
    is_starting_cluster: bool = False

    def __post_init__(self) -> None:
        if len(self.stitches) != 3:
            raise ValueError(f"Cluster '{self.id}' must have 3 stitches, got {len(self.stitches)}")


@dataclass(frozen=True)
class Side:
    """
    One side of a round.

    ``corner_chains`` is empty for the foundation round and holds exactly two
    chain stitches otherwise. ``anchors_on_this_side`` lists, in order along
    the side, the spaces the next round is worked into.
    """

    side: SideIndex
    clusters: tuple[Cluster, ...]
    corner_chains: tuple[Stitch, ...]
    anchors_on_this_side: tuple[Anchor, ...]

    def __post_init__(self) -> None:
        if len(self.corner_chains) not in (0, 2):
            raise ValueError(
                f"Side {self.side.name} must have 0 or 2 corner chains, "
                f"got {len(self.corner_chains)}"
            )

    @property
    def stitches(self) -> tuple[Stitch, ...]:
        """Corner chains followed by every cluster stitch on this side."""
        return self.corner_chains + tuple(s for c in self.clusters for s in c.stitches)


@dataclass(frozen=True)
class Round:
    """A compiled round: ``id`` 0 is the foundation ring."""

    id: int
    geo: RoundGeo
    sides: tuple[Side, Side, Side, Side]

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"Round id must be >= 0, got {self.id}")
        if [s.side for s in self.sides] != list(SideIndex):
            raise ValueError(f"Round {self.id} sides must be ordered TOP, RIGHT, BOTTOM, LEFT")

    @property
    def is_foundation(self) -> bool:
        return self.id == 0

    @property
    def cluster_count(self) -> int:
        """Total clusters (groups of 3 dc) across all four sides."""
        return sum(len(s.clusters) for s in self.sides)
