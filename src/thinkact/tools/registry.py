"""Tool registry for managing and dispatching tools."""

from ..errors import ToolExecutionError
from .base import Tool, ToolResult


class ToolRegistry:
    """Registry for available tools."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool."""
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool

    def unregister(self, name: str) -> None:
        """Unregister a tool by name."""
        if name in self._tools:
            del self._tools[name]

    def get(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def list_tools(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def describe(self) -> str:
        """Tool listing for the system prompt."""
        if not self._tools:
            return "No tools available."
        return "\n".join(tool.describe() for tool in self._tools.values())

    async def dispatch(self, tool_name: str, input: str) -> ToolResult:
        """Dispatch a tool call by name with its input."""
        tool = self._tools.get(tool_name)

        if tool is None:
            return ToolResult(
                success=False,
                output="",
                error=f"Unknown tool: {tool_name}",
            )

        try:
            return await tool.execute(input)
        except ToolExecutionError as e:
            return ToolResult(success=False, output="", error=e.message)
        except Exception as e:
            return ToolResult(
                success=False,
                output="",
                error=f"Tool execution failed: {e}",
            )
