"""Errors raised while driving the agent loop."""

from typing import Any


class AgentError(Exception):
    """Base class for agent loop errors."""


class TransportError(AgentError):
    """The completion endpoint was unreachable or rejected the request."""


class ParseError(AgentError):
    """The model reply is not valid JSON."""

    def __init__(self, raw: str, detail: str) -> None:
        super().__init__(f"Failed to parse JSON response: {detail}")
        self.raw = raw
        self.detail = detail


class FormatError(AgentError):
    """The model reply is JSON but not a recognised step."""

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class UnknownToolError(AgentError):
    """An action step named a tool that is not registered."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Unknown tool: {tool}")
        self.tool = tool


class ToolExecutionError(AgentError):
    """A registered tool failed.

    Tools may raise this; the registry turns it into a failed ToolResult.
    """

    def __init__(self, tool: str, message: str) -> None:
        super().__init__(message)
        self.tool = tool
        self.message = message


class TurnLimitError(AgentError):
    """The loop reached its configured maximum number of model calls."""

    def __init__(self, max_turns: int) -> None:
        super().__init__(f"Stopped after {max_turns} turns without an output step")
        self.max_turns = max_turns
