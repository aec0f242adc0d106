"""Generator settings and packaged defaults."""

from .settings import RANGES, GeneratorSettings, load_settings

__all__ = ["RANGES", "GeneratorSettings", "load_settings"]
