"""
Generator settings: the parameters a control surface hands to the generator.

Defaults and allowed ranges are read from ``data/defaults.yaml``.
load_settings() layers an optional user YAML file and keyword overrides on
top of the defaults and validates the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from grannysquare.compiler.pitch import list_policies
from grannysquare.palette.types import RepetitionMethod

logger = logging.getLogger(__name__)

_DEFAULTS_PATH = Path(__file__).parent / "data" / "defaults.yaml"


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Settings file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse settings file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return cast(dict[str, Any], data)


def _load_ranges() -> MappingProxyType[str, tuple[float, float]]:
    raw = _read_yaml(_DEFAULTS_PATH).get("ranges", {})
    return MappingProxyType({k: (v[0], v[1]) for k, v in raw.items()})


RANGES: MappingProxyType[str, tuple[float, float]] = _load_ranges()


@dataclass(frozen=True)
class GeneratorSettings:
    """
    Validated generator parameters.

    n_rounds counts stitch rounds; the foundation ring is added on top.
    palette_name and repetition only affect rendering colors.
    """

    n_rounds: int = 4
    stitch_width: float = 24
    stitch_height: float = 24
    pitch: str = "chart"
    palette_name: str = "Sunset Glow"
    repetition: RepetitionMethod = RepetitionMethod.SEQUENTIAL
    show_stitches: bool = True

    def __post_init__(self) -> None:
        # Accept plain strings from YAML and promote to the enum.
        if not isinstance(self.repetition, RepetitionMethod):
            object.__setattr__(self, "repetition", RepetitionMethod(self.repetition))

        for name in ("n_rounds", "stitch_width", "stitch_height"):
            low, high = RANGES[name]
            value = getattr(self, name)
            if not (low <= value <= high):
                raise ValueError(f"{name} must be in [{low}, {high}], got {value}")
        if self.pitch not in list_policies():
            raise ValueError(f"pitch must be one of {list_policies()}, got {self.pitch!r}")
        if not self.palette_name:
            raise ValueError("palette_name must not be empty")


def load_settings(path: Path | str | None = None, **overrides: Any) -> GeneratorSettings:
    """
    Build settings from packaged defaults, an optional YAML file, and overrides.

    Later layers win: defaults < file < keyword overrides.

    Raises:
        KeyError: If the file or overrides name an unknown setting.
        ValueError: If a value is out of range or the file cannot be parsed.
    """
    values: dict[str, Any] = dict(_read_yaml(_DEFAULTS_PATH).get("defaults", {}))
    if path is not None:
        logger.info("Loading settings from %s", path)
        values.update(_read_yaml(Path(path)))
    values.update(overrides)

    known = {f.name for f in fields(GeneratorSettings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise KeyError(f"Unknown settings: {', '.join(unknown)}")
    return GeneratorSettings(**values)
