"""
Pattern writers: project a compiled round list into written instructions.

TemplateWriter is deterministic and always available; LLMWriter (optional
``llm`` extra) rewrites its output into friendlier prose.
"""

from .writer import (
    EMPTY_PATTERN,
    PatternWriter,
    RoundInstruction,
    TemplateWriter,
    WriterInput,
    WriterOutput,
    display_number,
)

__all__ = [
    "EMPTY_PATTERN",
    "PatternWriter",
    "RoundInstruction",
    "TemplateWriter",
    "WriterInput",
    "WriterOutput",
    "display_number",
]
