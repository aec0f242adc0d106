"""
Schema definitions for the compiled round model.

Provides the immutable data structures (rounds, sides, clusters, stitches,
anchors) that flow from the round compiler to the writer and renderer.
"""

from .round import (
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

__all__ = [
    "AnchorType",
    "StitchKind",
    "RoundGeo",
    "Stitch",
    "Anchor",
    "AnchorRef",
    "Cluster",
    "Side",
    "Round",
]
