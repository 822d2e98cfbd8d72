"""Agent loop implementation."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

from groq import APIError, AsyncGroq

from ..errors import (
    AgentError,
    FormatError,
    ParseError,
    TransportError,
    TurnLimitError,
    UnknownToolError,
)
from ..logging import EventLog, get_event_log
from ..tools import ToolRegistry
from .history import ConversationHistory
from .prompt import CONTINUE_MESSAGE, build_system_prompt, format_observation
from .steps import Action, Output, Think, decode_reply, parse_step


class StopReason(Enum):
    """Reasons for stopping the agent loop."""

    COMPLETE = "complete"
    TRANSPORT_ERROR = "transport_error"
    PARSE_ERROR = "parse_error"
    FORMAT_ERROR = "format_error"
    UNKNOWN_TOOL = "unknown_tool"
    MAX_TURNS = "max_turns"
    ERROR = "error"


_STOP_REASONS: dict[type[AgentError], StopReason] = {
    TransportError: StopReason.TRANSPORT_ERROR,
    ParseError: StopReason.PARSE_ERROR,
    FormatError: StopReason.FORMAT_ERROR,
    UnknownToolError: StopReason.UNKNOWN_TOOL,
    TurnLimitError: StopReason.MAX_TURNS,
}


@dataclass
class AgentConfig:
    """Configuration for the agent loop."""

    model: str = "llama-3.1-70b-versatile"
    max_tokens: int = 1024
    max_turns: int | None = None


@dataclass(frozen=True)
class Completed:
    """The model produced an output step."""

    text: str
    history: ConversationHistory
    turns: int

    @property
    def stop_reason(self) -> StopReason:
        return StopReason.COMPLETE


@dataclass(frozen=True)
class Aborted:
    """The loop stopped on a terminal error."""

    error: AgentError
    history: ConversationHistory
    turns: int

    @property
    def reason(self) -> str:
        return str(self.error)

    @property
    def stop_reason(self) -> StopReason:
        for cls in type(self.error).__mro__:
            if cls in _STOP_REASONS:
                return _STOP_REASONS[cls]
        return StopReason.ERROR


TerminalResult = Union[Completed, Aborted]


class StepReporter(Protocol):
    """Receives progress events as the loop runs."""

    def on_think(self, content: str) -> None: ...

    def on_action(self, tool: str, input: str) -> None: ...

    def on_observe(self, success: bool, text: str) -> None: ...

    def on_output(self, content: str) -> None: ...

    def on_error(self, error: AgentError) -> None: ...


class NullReporter:
    """Reporter that ignores every event."""

    def on_think(self, content: str) -> None:
        pass

    def on_action(self, tool: str, input: str) -> None:
        pass

    def on_observe(self, success: bool, text: str) -> None:
        pass

    def on_output(self, content: str) -> None:
        pass

    def on_error(self, error: AgentError) -> None:
        pass


class AgentLoop:
    """Main agent loop: think → act → observe.

    Each model reply is a single JSON step. Think steps are acknowledged with a
    continue message, action steps run a registered tool and feed the result
    back as an observation, and an output step ends the run.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        config: AgentConfig | None = None,
        groq_client: AsyncGroq | None = None,
        reporter: StepReporter | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or AgentConfig()
        self.client = groq_client or AsyncGroq(api_key=os.getenv("GROQ_API_KEY"))
        self.reporter = reporter or NullReporter()
        self.events = event_log or get_event_log()
        self.system_prompt = build_system_prompt(registry.describe())

    async def _complete(self, history: ConversationHistory, turn: int) -> str:
        """Send the history to the endpoint and return the reply text."""
        messages = history.to_api(self.system_prompt)
        self.events.log_llm_request(turn, self.config.model, len(messages))

        start_time = time.time()
        try:
            response = await self.client.chat.completions.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                messages=messages,
            )
        except APIError as e:
            raise TransportError(str(e)) from e
        duration_ms = (time.time() - start_time) * 1000

        raw = ""
        if response.choices:
            raw = response.choices[0].message.content or ""

        self.events.log_llm_response(turn, raw, duration_ms)
        return raw

    def _abort(
        self, error: AgentError, history: ConversationHistory, turn: int
    ) -> Aborted:
        self.reporter.on_error(error)
        self.events.log_error(turn, error)
        return Aborted(error=error, history=history, turns=turn)

    async def _act(
        self, action: Action, history: ConversationHistory, turn: int
    ) -> ConversationHistory:
        """Run the action's tool and append the observation."""
        if action.tool not in self.registry:
            raise UnknownToolError(action.tool)

        self.reporter.on_action(action.tool, action.input)
        self.events.log_tool_call(turn, action.tool, action.input)

        start_time = time.time()
        result = await self.registry.dispatch(action.tool, action.input)
        duration_ms = (time.time() - start_time) * 1000

        self.events.log_tool_result(
            turn,
            action.tool,
            result.success,
            duration_ms=duration_ms,
            error=result.error,
        )

        self.reporter.on_observe(
            result.success, result.output if result.success else result.error or ""
        )
        return history.user(
            format_observation(result.success, result.output, result.error)
        )

    async def step(
        self, history: ConversationHistory, turn: int = 1
    ) -> tuple[ConversationHistory, TerminalResult | None]:
        """Run one think/act/observe iteration.

        Args:
            history: History to send to the model.
            turn: 1-based index of this model call.

        Returns:
            The extended history and, when the run is over, its result.
        """
        try:
            raw = await self._complete(history, turn)
            payload = decode_reply(raw)
        except (TransportError, ParseError) as e:
            return history, self._abort(e, history, turn)

        # The reply is recorded before its tag is interpreted
        history = history.assistant(raw)

        try:
            step = parse_step(payload)
            self.events.log_step(turn, step.kind)

            if isinstance(step, Think):
                self.reporter.on_think(step.content)
                return history.user(CONTINUE_MESSAGE), None

            if isinstance(step, Output):
                self.reporter.on_output(step.content)
                return history, Completed(text=step.content, history=history, turns=turn)

            return await self._act(step, history, turn), None
        except (FormatError, UnknownToolError) as e:
            return history, self._abort(e, history, turn)

    async def run(self, initial_query: str) -> TerminalResult:
        """Run the loop until an output step or a terminal error.

        Args:
            initial_query: The user's query, sent as the first message.

        Returns:
            Completed with the output text, or Aborted with the error.
        """
        history = ConversationHistory.start(initial_query)
        self.events.emit("session_start", query=initial_query, model=self.config.model)

        turn = 0
        result: TerminalResult | None = None
        while result is None:
            if self.config.max_turns is not None and turn >= self.config.max_turns:
                result = self._abort(TurnLimitError(self.config.max_turns), history, turn)
                break
            turn += 1
            history, result = await self.step(history, turn)

        self.events.log_agent_stop(result.stop_reason.value, turns=result.turns)
        return result
