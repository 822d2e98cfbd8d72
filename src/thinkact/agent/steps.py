"""Step records decoded from model replies.

A reply is one JSON object whose ``step`` field selects the variant:

    {"step": "think", "content": "..."}
    {"step": "action", "tool": "...", "input": "..."}
    {"step": "output", "content": "..."}
"""

import json
from dataclasses import dataclass
from typing import Any, Union

from ..errors import FormatError, ParseError


@dataclass(frozen=True)
class Think:
    content: str

    kind = "think"


@dataclass(frozen=True)
class Action:
    tool: str
    input: str

    kind = "action"


@dataclass(frozen=True)
class Output:
    content: str

    kind = "output"


Step = Union[Think, Action, Output]


def decode_reply(raw: str) -> Any:
    """Decode the raw reply text as JSON.

    Raises:
        ParseError: if the text is not valid JSON.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(raw, str(e)) from e


def _string_field(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise FormatError(
            f"Field '{key}' of a '{payload['step']}' step must be a string", payload
        )
    return value


def parse_step(payload: Any) -> Step:
    """Classify a decoded reply into a step.

    Raises:
        FormatError: if the payload is not an object with a known ``step``.
    """
    if not isinstance(payload, dict):
        raise FormatError("Unexpected response format: expected a JSON object", payload)

    step = payload.get("step")
    if step == "think":
        return Think(_string_field(payload, "content"))
    if step == "output":
        return Output(_string_field(payload, "content"))
    if step == "action":
        return Action(_string_field(payload, "tool"), _string_field(payload, "input"))

    raise FormatError(f"Unexpected response format: step={step!r}", payload)
