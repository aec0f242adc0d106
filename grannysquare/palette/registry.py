"""
Palette registry: loads the named palettes from YAML at first use and
exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
Instantiate PaletteRegistry directly to load a custom data directory
(e.g. in tests). Nothing writes to a registry after it is loaded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from .types import Palette

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

DEFAULT_PALETTE_NAME = "Default"


class PaletteRegistry:
    """
    Read-only registry of named palettes.

    ``palettes`` is a MappingProxyType keyed by palette name, in file order.
    """

    def __init__(self, data_dir: Path = _DATA_DIR, filename: str = "palettes.yaml") -> None:
        self._data_dir = data_dir
        self._filename = filename
        self.palettes: MappingProxyType[str, Palette]
        self._load()

    def _load_yaml(self) -> dict[str, Any]:
        path = self._data_dir / self._filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Palette data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse palette data file {path}: {exc}") from exc

    def _load(self) -> None:
        data = self._load_yaml()
        if not isinstance(data, dict) or "entries" not in data:
            raise ValueError(f"Palette data file {self._filename} must define 'entries'")

        result: dict[str, Palette] = {}
        for entry in data["entries"]:
            palette = Palette(
                name=entry["name"],
                colors=tuple(entry.get("colors") or ()),
                notes=str(entry.get("notes", "")).strip(),
            )
            if palette.name in result:
                raise ValueError(f"Duplicate palette name: {palette.name!r}")
            result[palette.name] = palette

        self.palettes = MappingProxyType(result)
        logger.debug("Loaded %d palettes from %s", len(result), self._data_dir / self._filename)

    def get(self, name: str) -> Palette:
        """Return the palette named *name*.

        Raises
        ------
        KeyError
            If no palette with that name is registered.
        """
        if name not in self.palettes:
            raise KeyError(f"Unknown palette: {name!r}")
        return self.palettes[name]

    def names(self, include_generative: bool = False) -> list[str]:
        """Palette names in file order; the generative palette is hidden by default."""
        return [
            p.name for p in self.palettes.values() if include_generative or not p.is_generative
        ]


_registry: PaletteRegistry | None = None


def get_registry() -> PaletteRegistry:
    """Return the module-level PaletteRegistry, loading it on first call."""
    global _registry
    if _registry is None:
        _registry = PaletteRegistry()
    return _registry
