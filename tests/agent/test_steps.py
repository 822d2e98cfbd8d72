"""Tests for step decoding."""

import pytest

from thinkact.agent.steps import Action, Output, Think, decode_reply, parse_step
from thinkact.errors import FormatError, ParseError


class TestDecodeReply:
    def test_valid_json(self):
        assert decode_reply('{"step": "think", "content": "x"}') == {
            "step": "think",
            "content": "x",
        }

    def test_invalid_json_keeps_raw_text(self):
        with pytest.raises(ParseError) as exc_info:
            decode_reply("THINK: I should list files")

        assert exc_info.value.raw == "THINK: I should list files"
        assert exc_info.value.detail

    def test_empty_text(self):
        with pytest.raises(ParseError):
            decode_reply("")

    def test_trailing_text_rejected(self):
        """Two concatenated steps are not a single JSON object."""
        with pytest.raises(ParseError):
            decode_reply('{"step": "think", "content": "a"}\n{"step": "output", "content": "b"}')


class TestParseStep:
    def test_think(self):
        assert parse_step({"step": "think", "content": "hmm"}) == Think("hmm")

    def test_output(self):
        assert parse_step({"step": "output", "content": "42"}) == Output("42")

    def test_action(self):
        step = parse_step({"step": "action", "tool": "executeCommand", "input": "ls"})
        assert step == Action(tool="executeCommand", input="ls")

    def test_extra_fields_ignored(self):
        assert parse_step({"step": "think", "content": "a", "confidence": 1}) == Think("a")

    def test_kind(self):
        assert Think("a").kind == "think"
        assert Action("t", "i").kind == "action"
        assert Output("o").kind == "output"

    @pytest.mark.parametrize(
        "payload",
        [
            {"content": "no step"},
            {"step": "THINK", "content": "case matters"},
            {"step": "observe", "content": "not a model step"},
            {"step": None},
            [],
            "think",
            3,
            None,
        ],
    )
    def test_unknown_shapes_rejected(self, payload):
        with pytest.raises(FormatError) as exc_info:
            parse_step(payload)
        assert exc_info.value.payload == payload

    @pytest.mark.parametrize(
        "payload",
        [
            {"step": "think"},
            {"step": "output", "content": ["a", "b"]},
            {"step": "action", "input": "ls"},
            {"step": "action", "tool": "executeCommand"},
            {"step": "action", "tool": "executeCommand", "input": {"cmd": "ls"}},
        ],
    )
    def test_missing_or_mistyped_fields_rejected(self, payload):
        with pytest.raises(FormatError, match="must be a string"):
            parse_step(payload)
