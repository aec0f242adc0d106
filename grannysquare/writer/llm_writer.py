"""
LLMWriter: two-pass LLM-enhanced pattern writer.

Pass 1 (deterministic): TemplateWriter generates correct, complete prose with
exact stitch and repeat counts.

Pass 2 (LLM): the model receives the template prose, one section per round,
and rewrites it via the write_crochet_pattern tool. The template already
states every number, so the model only rephrases.

On any failure (network error, no tool_use block, malformed JSON, missing
round), write() returns the TemplateWriter output for the affected rounds, so
the caller always gets a usable pattern.

Requires the ``anthropic`` package (``pip install grannysquare[llm]``). The
import is deferred to ``__init__`` so the rest of the module is importable
without the package installed.
"""

from __future__ import annotations

import dataclasses
import logging
import warnings

from grannysquare.writer.prompts import LLM_WRITER_TOOL_SCHEMA, SYSTEM_PROMPT
from grannysquare.writer.writer import TemplateWriter, WriterInput, WriterOutput, join_pattern

logger = logging.getLogger(__name__)


def _build_user_content(template_out: WriterOutput) -> str:
    """Label each round with its section key so the tool output can be matched back."""
    blocks = [f"[preamble]\n{template_out.preamble}"] if template_out.preamble else []
    blocks.extend(f"[{step.section_key}]\n{step.text}" for step in template_out.steps)
    return "\n\n".join(blocks)


class LLMWriter:
    """
    Two-pass LLM-enhanced pattern writer.

    Satisfies the PatternWriter Protocol: accepts WriterInput, returns
    WriterOutput. The preamble is kept verbatim; only round sections are
    rewritten.

    The Anthropic client reads ``ANTHROPIC_API_KEY`` from the environment.
    """

    def __init__(
        self,
        model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 4096,
    ) -> None:
        try:
            import anthropic

            self._client = anthropic.Anthropic()
        except ImportError as exc:
            raise ImportError(
                "Install the LLM extras for writer support: pip install grannysquare[llm]"
            ) from exc
        self._model = model
        self._max_tokens = max_tokens
        self._template_writer = TemplateWriter()

    def write(self, wi: WriterInput) -> WriterOutput:
        """
        Enhance template prose with LLM rewriting.

        Falls back to TemplateWriter output with a UserWarning on any LLM failure.
        """
        template_out = self._template_writer.write(wi)
        if not template_out.steps:
            return template_out

        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=SYSTEM_PROMPT,
                tools=[LLM_WRITER_TOOL_SCHEMA],
                tool_choice={"type": "any"},
                messages=[{"role": "user", "content": _build_user_content(template_out)}],
            )
            tool_block = next((b for b in response.content if b.type == "tool_use"), None)
            if tool_block is None:
                logger.info("LLM response had no tool_use block; keeping template prose")
                return template_out

            raw_sections: dict[str, str] = tool_block.input["sections"]
            # Fall back to template prose for any round the LLM omitted.
            steps = tuple(
                dataclasses.replace(step, text=raw_sections.get(step.section_key, step.text))
                for step in template_out.steps
            )
            return WriterOutput(
                preamble=template_out.preamble,
                steps=steps,
                full_pattern=join_pattern(template_out.preamble, steps),
            )
        except Exception as exc:  # noqa: BLE001
            warnings.warn(
                f"LLMWriter failed, returning template prose: {exc}",
                stacklevel=2,
            )
            return template_out
