"""
Palette type definitions.

Palette entries are loaded from YAML and frozen after startup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class RepetitionMethod(str, Enum):
    """How palette colors are reused once every color has had a round."""

    SEQUENTIAL = "sequential"  # 0 1 2 3 4 0 1 2 …
    ALTERNATING = "alternating"  # 0 1 2 3 4 3 2 1 0 1 …


@dataclass(frozen=True)
class Palette:
    """
    A named, ordered list of ``#rrggbb`` colors.

    An empty palette is valid: it selects the generative per-round hue.
    """

    name: str
    colors: tuple[str, ...]
    notes: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Palette name must not be empty")
        for color in self.colors:
            if not _HEX_COLOR.match(color):
                raise ValueError(f"Palette '{self.name}': invalid color {color!r}")

    @property
    def is_generative(self) -> bool:
        return not self.colors
