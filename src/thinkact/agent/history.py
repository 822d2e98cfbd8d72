"""Conversation history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Literal

Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A single conversation message."""

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ConversationHistory:
    """Append-only message history for one agent run.

    Appending returns a new history; the original is left untouched.
    """

    messages: tuple[Message, ...] = ()

    @classmethod
    def start(cls, query: str) -> ConversationHistory:
        """History holding only the initial user query."""
        return cls((Message("user", query),))

    def append(self, role: Role, content: str) -> ConversationHistory:
        return ConversationHistory(self.messages + (Message(role, content),))

    def user(self, content: str) -> ConversationHistory:
        return self.append("user", content)

    def assistant(self, content: str) -> ConversationHistory:
        return self.append("assistant", content)

    @property
    def last(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def to_api(self, system: str | None = None) -> list[dict[str, Any]]:
        """Messages in chat-completions format, system prompt first."""
        messages: list[dict[str, Any]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.extend(m.to_dict() for m in self.messages)
        return messages

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __getitem__(self, index: int) -> Message:
        return self.messages[index]
