"""
Public pattern generation API.

generate_pattern() is the single entry point that takes generator settings
and returns the compiled rounds, the written instructions, and a schematic
SVG chart. It wires the full pipeline: settings → radii → pattern builder →
writer, and palette → colors → renderer.

Every call recomputes the whole square; there is no incremental update.
"""

from __future__ import annotations

from dataclasses import dataclass

from grannysquare.compiler.builder import build
from grannysquare.config.settings import GeneratorSettings
from grannysquare.palette.mapping import colors_for_rounds
from grannysquare.palette.registry import get_registry
from grannysquare.render.svg import render_chart_svg
from grannysquare.schemas.round import Round
from grannysquare.utilities.radii import radii_for_rounds
from grannysquare.utilities.types import Vec2
from grannysquare.writer.writer import PatternWriter, TemplateWriter, WriterInput, WriterOutput


@dataclass(frozen=True)
class GeneratedPattern:
    """Everything produced for one set of generator settings."""

    settings: GeneratorSettings
    radii: tuple[float, ...]
    rounds: tuple[Round, ...]
    colors: tuple[str, ...]
    instructions: WriterOutput
    svg: str


def generate_pattern(
    settings: GeneratorSettings | None = None,
    writer: PatternWriter | None = None,
    center: Vec2 = Vec2(0.0, 0.0),
) -> GeneratedPattern:
    """
    Generate a complete granny square from generator settings.

    Parameters
    ----------
    settings:
        Generator parameters; defaults to :class:`GeneratorSettings` defaults.
    writer:
        Pattern writer for the instructions; defaults to :class:`TemplateWriter`.
        Pass an ``LLMWriter`` for rewritten prose.
    center:
        Motif center in chart coordinates.

    Returns
    -------
    GeneratedPattern
        Radii, rounds (foundation first), per-round colors, written
        instructions, and the SVG chart.

    Raises
    ------
    KeyError
        If ``settings.palette_name`` is not a registered palette.
    """
    settings = settings or GeneratorSettings()
    writer = writer or TemplateWriter()
    palette = get_registry().get(settings.palette_name)

    radii = radii_for_rounds(settings.n_rounds, settings.stitch_width, settings.stitch_height)
    rounds = build(
        radii,
        center,
        settings.stitch_height,
        settings.stitch_width,
        pitch=settings.pitch,
    )
    colors = colors_for_rounds((r.id for r in rounds), palette, settings.repetition)

    return GeneratedPattern(
        settings=settings,
        radii=tuple(radii),
        rounds=rounds,
        colors=tuple(colors),
        instructions=writer.write(WriterInput(rounds=rounds)),
        svg=render_chart_svg(
            rounds,
            colors,
            settings.stitch_width,
            settings.stitch_height,
            show_stitches=settings.show_stitches,
        ),
    )
