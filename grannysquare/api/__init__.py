"""Public API."""

from .generate import GeneratedPattern, generate_pattern

__all__ = ["GeneratedPattern", "generate_pattern"]
