"""Command-line interface for thinkact."""

import json
import os
import sys
import uuid
from typing import Callable, TypeVar

from groq import AsyncGroq

from .agent import AgentConfig, AgentLoop, Completed, TerminalResult
from .errors import AgentError, FormatError, ParseError, TransportError, UnknownToolError
from .logging import configure_event_log
from .tools import ShellTool, ToolRegistry

DEFAULT_QUERY = "List files in current directory"

T = TypeVar("T", int, float)


class ConfigError(ValueError):
    """An environment variable holds an unusable value."""


def _env_number(name: str, cast: Callable[[str], T], default: T | None = None) -> T | None:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return cast(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}") from None


def _config_from_env() -> AgentConfig:
    """Load configuration from environment variables.

    Raises:
        ConfigError: if a numeric setting cannot be parsed.
    """
    return AgentConfig(
        model=os.getenv("GROQ_MODEL", "llama-3.1-70b-versatile"),
        max_tokens=_env_number("THINKACT_MAX_TOKENS", int, 1024),
        max_turns=_env_number("THINKACT_MAX_TURNS", int),
    )


def build_registry() -> ToolRegistry:
    """Registry with the tools available to the model."""
    registry = ToolRegistry()
    registry.register(ShellTool(timeout=_env_number("THINKACT_SHELL_TIMEOUT", float)))
    return registry


def _error(message: str) -> None:
    print(message, file=sys.stderr)


class ConsoleReporter:
    """Prints each loop event with a marker; failures go to stderr."""

    def on_think(self, content: str) -> None:
        print(f"🧠 THINK: {content}")

    def on_action(self, tool: str, input: str) -> None:
        print(f"⛏️ ACTION: Calling {tool} with input: {input}")

    def on_observe(self, success: bool, text: str) -> None:
        if success:
            print(f"📋 OBSERVE: {text}")
        else:
            _error(f"❌ Tool execution failed: {text}")

    def on_output(self, content: str) -> None:
        print(f"🤖 OUTPUT: {content}")

    def on_error(self, error: AgentError) -> None:
        if isinstance(error, ParseError):
            _error(f"❌ Failed to parse JSON response: {error.raw}")
            _error(f"JSON Error: {error.detail}")
        elif isinstance(error, FormatError):
            _error(f"❌ Unexpected response format: {json.dumps(error.payload)}")
        elif isinstance(error, UnknownToolError):
            _error(f"❌ Unknown tool: {error.tool}")
        elif isinstance(error, TransportError):
            _error(f"❌ Error in main loop: {error}")
        else:
            _error(f"❌ {error}")


async def run_cli(query: str = DEFAULT_QUERY) -> int:
    """Run a single query through the agent. Returns the exit status."""
    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        _error("❌ Error: GROQ_API_KEY environment variable not set")
        _error("Please set it in your .env file or environment")
        return 1

    try:
        config = _config_from_env()
        registry = build_registry()
    except ConfigError as e:
        _error(f"❌ Error: {e}")
        return 1

    event_log = configure_event_log(log_dir=os.getenv("THINKACT_LOG_DIR") or None)
    event_log.bind_session(f"cli-{uuid.uuid4().hex[:8]}")

    agent = AgentLoop(
        registry,
        config,
        groq_client=AsyncGroq(api_key=api_key),
        reporter=ConsoleReporter(),
        event_log=event_log,
    )

    print(f"🚀 Starting query: {query}")
    result: TerminalResult = await agent.run(query)
    return 0 if isinstance(result, Completed) else 1
