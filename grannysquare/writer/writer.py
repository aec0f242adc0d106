"""
TemplateWriter: converts a compiled round list into written pattern steps.

Pipeline:
  1. Emits the foundation ring line as the preamble (round 0).
  2. For each later round, renders numbered steps from the round's own
     structure: round 1 is worked into the ring; round n >= 2 reads its
     side_clusters from the clusters on its first side.
  3. Appends a stitch-count summary to every round.

Rounds are displayed as ``id + 1``: the foundation ring is round 1 of the
finished square, so the first stitch round reads "Round 2".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from grannysquare.schemas.round import Round
from grannysquare.writer.templates import (
    render_foundation,
    render_growth_round,
    render_ring_round,
    render_summary,
)

EMPTY_PATTERN = "No pattern to display."


@dataclass(frozen=True)
class WriterInput:
    """Complete input bundle for a pattern writer."""

    rounds: tuple[Round, ...]


@dataclass(frozen=True)
class RoundInstruction:
    """Written instructions for one stitch round."""

    round_id: int
    display_number: int
    side_clusters: int
    text: str

    @property
    def section_key(self) -> str:
        return f"round_{self.display_number}"


@dataclass(frozen=True)
class WriterOutput:
    """Output of a successful pattern write."""

    preamble: str
    steps: tuple[RoundInstruction, ...]
    full_pattern: str  # preamble and every step, separated by blank lines


@runtime_checkable
class PatternWriter(Protocol):
    """Protocol for pattern writers."""

    def write(self, writer_input: WriterInput) -> WriterOutput: ...


def display_number(round_id: int) -> int:
    return round_id + 1


def join_pattern(preamble: str, steps: tuple[RoundInstruction, ...]) -> str:
    """Concatenate preamble and round texts the way every writer presents them."""
    parts = ([preamble] if preamble else []) + [s.text for s in steps]
    return "\n\n".join(parts) if parts else EMPTY_PATTERN


class TemplateWriter:
    """
    Deterministic template-based writer.

    Trusts its input: the rounds are assumed to come straight from the
    compiler, so cluster counts are read, not re-validated.
    """

    def write(self, wi: WriterInput) -> WriterOutput:
        """
        Convert compiled rounds into pattern prose.

        Parameters
        ----------
        wi:
            WriterInput holding the round list, foundation first.

        Returns
        -------
        WriterOutput
            Preamble, one RoundInstruction per round after the foundation,
            and the full concatenated pattern.
        """
        preamble = ""
        steps: list[RoundInstruction] = []

        for rnd in wi.rounds:
            if rnd.is_foundation:
                preamble = render_foundation()
                continue
            steps.append(self.write_round(rnd))

        return WriterOutput(
            preamble=preamble,
            steps=tuple(steps),
            full_pattern=join_pattern(preamble, tuple(steps)),
        )

    def write_round(self, rnd: Round) -> RoundInstruction:
        """Render a single stitch round (id >= 1)."""
        side_clusters = len(rnd.sides[0].clusters) - 1
        if rnd.id == 1:
            lines = render_ring_round(rnd)
        else:
            lines = render_growth_round(rnd, side_clusters)

        number = display_number(rnd.id)
        body = "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))
        text = f"Round {number}:\n{body}\n{render_summary(rnd)}"
        return RoundInstruction(
            round_id=rnd.id,
            display_number=number,
            side_clusters=side_clusters,
            text=text,
        )
