"""Agent loop and core logic."""

from .history import ConversationHistory, Message
from .loop import (
    AgentConfig,
    AgentLoop,
    Aborted,
    Completed,
    NullReporter,
    StepReporter,
    StopReason,
    TerminalResult,
)
from .prompt import build_system_prompt
from .steps import Action, Output, Step, Think, decode_reply, parse_step

__all__ = [
    "AgentConfig",
    "AgentLoop",
    "Aborted",
    "Action",
    "Completed",
    "ConversationHistory",
    "Message",
    "NullReporter",
    "Output",
    "Step",
    "StepReporter",
    "StopReason",
    "TerminalResult",
    "Think",
    "build_system_prompt",
    "decode_reply",
    "parse_step",
]
