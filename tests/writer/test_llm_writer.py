"""
Tests for grannysquare/writer/llm_writer.py: LLMWriter.

The Anthropic client is replaced with a MagicMock via unittest.mock.patch, so
no real API calls are made. Integration tests require ANTHROPIC_API_KEY and
are skipped otherwise.
"""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest

from grannysquare.compiler.builder import build
from grannysquare.utilities.radii import radii_for_rounds
from grannysquare.utilities.types import Vec2
from grannysquare.writer.writer import PatternWriter, TemplateWriter, WriterInput, WriterOutput

# ── Shared fixtures ────────────────────────────────────────────────────────────

_ROUNDS = build(radii_for_rounds(4, 24.0, 24.0), Vec2(0.0, 0.0), 24.0, 24.0)
_WI = WriterInput(rounds=_ROUNDS)
_KEYS = [f"round_{n}" for n in (2, 3, 4, 5)]


def _make_mock_client(sections: dict[str, str]) -> MagicMock:
    """Return a mock anthropic.Anthropic() that yields a tool_use block with given sections."""
    tool_block = MagicMock()
    tool_block.type = "tool_use"
    tool_block.input = {"sections": sections}
    response = MagicMock()
    response.content = [tool_block]
    client = MagicMock()
    client.messages.create.return_value = response
    return client


def _make_llm_writer(client: MagicMock):
    from grannysquare.writer.llm_writer import LLMWriter

    with patch("anthropic.Anthropic", return_value=client):
        return LLMWriter()


# ── TestLLMWriter ──────────────────────────────────────────────────────────────


class TestLLMWriter:
    def test_satisfies_protocol(self):
        writer = _make_llm_writer(_make_mock_client({}))
        assert isinstance(writer, PatternWriter)

    def test_write_returns_writer_output(self):
        writer = _make_llm_writer(_make_mock_client({k: f"Enhanced {k}" for k in _KEYS}))
        assert isinstance(writer.write(_WI), WriterOutput)

    def test_sections_replaced(self):
        writer = _make_llm_writer(_make_mock_client({k: f"Enhanced {k}" for k in _KEYS}))
        out = writer.write(_WI)
        assert [s.text for s in out.steps] == [f"Enhanced {k}" for k in _KEYS]

    def test_structure_preserved(self):
        template_out = TemplateWriter().write(_WI)
        writer = _make_llm_writer(_make_mock_client({k: "x" for k in _KEYS}))
        out = writer.write(_WI)
        assert out.preamble == template_out.preamble
        assert [(s.round_id, s.side_clusters) for s in out.steps] == [
            (s.round_id, s.side_clusters) for s in template_out.steps
        ]

    def test_round_order_preserved_in_full_pattern(self):
        writer = _make_llm_writer(_make_mock_client({k: f"SECTION_{k}" for k in _KEYS}))
        out = writer.write(_WI)
        positions = [out.full_pattern.index(f"SECTION_{k}") for k in _KEYS]
        assert positions == sorted(positions)

    def test_missing_section_falls_back_to_template(self):
        template_out = TemplateWriter().write(_WI)
        writer = _make_llm_writer(_make_mock_client({"round_2": "LLM round two"}))
        out = writer.write(_WI)
        assert out.steps[0].text == "LLM round two"
        for step, template_step in zip(out.steps[1:], template_out.steps[1:]):
            assert step.text == template_step.text

    def test_no_tool_block_falls_back_to_template(self):
        response = MagicMock()
        response.content = []
        client = MagicMock()
        client.messages.create.return_value = response
        writer = _make_llm_writer(client)
        assert writer.write(_WI) == TemplateWriter().write(_WI)

    def test_api_exception_falls_back_to_template(self):
        client = MagicMock()
        client.messages.create.side_effect = RuntimeError("network error")
        writer = _make_llm_writer(client)
        with pytest.warns(UserWarning, match="LLMWriter failed"):
            out = writer.write(_WI)
        assert out == TemplateWriter().write(_WI)

    def test_no_rounds_skips_api_call(self):
        client = _make_mock_client({})
        writer = _make_llm_writer(client)
        out = writer.write(WriterInput(rounds=_ROUNDS[:1]))
        client.messages.create.assert_not_called()
        assert out.steps == ()

    def test_user_message_labels_sections(self):
        client = _make_mock_client({})
        writer = _make_llm_writer(client)
        writer.write(_WI)
        user_content = client.messages.create.call_args[1]["messages"][0]["content"]
        for key in _KEYS:
            assert f"[{key}]" in user_content
        assert "[preamble]" in user_content

    def test_tool_choice_forces_tool(self):
        client = _make_mock_client({})
        writer = _make_llm_writer(client)
        writer.write(_WI)
        kwargs = client.messages.create.call_args[1]
        assert kwargs["tool_choice"] == {"type": "any"}
        assert kwargs["tools"][0]["name"] == "write_crochet_pattern"


# ── Integration (real API) ─────────────────────────────────────────────────────


@pytest.mark.skipif(not os.environ.get("ANTHROPIC_API_KEY"), reason="ANTHROPIC_API_KEY not set")
class TestLLMWriterIntegration:
    def test_real_call_keeps_every_round(self):
        from grannysquare.writer.llm_writer import LLMWriter

        out = LLMWriter().write(_WI)
        assert len(out.steps) == 4
        assert all(s.text for s in out.steps)
