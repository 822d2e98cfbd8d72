"""Base tool interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class ToolResult:
    """Result from tool execution."""

    success: bool
    output: str
    error: str | None = None
    metadata: dict[str, Any] | None = None


class Tool(ABC):
    """Base interface for all tools.

    A tool takes a single string input and resolves to a ToolResult.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool name, as the model refers to it."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description for the system prompt."""
        ...

    @property
    def signature(self) -> str:
        """Call signature shown to the model, e.g. ``run(command): string``."""
        return f"{self.name}(input): string"

    @abstractmethod
    async def execute(self, input: str) -> ToolResult:
        """Execute the tool with the given input."""
        ...

    def describe(self) -> str:
        """One-line listing for the system prompt."""
        return f"- {self.signature} {self.description}"
