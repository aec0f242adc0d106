"""Chart renderers for compiled rounds."""

from .svg import render_chart_svg

__all__ = ["render_chart_svg"]
