"""Tests for tool registry."""

import pytest

from thinkact.errors import ToolExecutionError
from thinkact.tools import Tool, ToolResult, ToolRegistry


class EchoTool(Tool):
    """Simple echo tool for testing."""

    @property
    def name(self) -> str:
        return "echo"

    @property
    def description(self) -> str:
        return "Echoes the input message"

    async def execute(self, input: str) -> ToolResult:
        return ToolResult(success=True, output=input)


class RaisingTool(Tool):
    """Tool that raises instead of returning a result."""

    def __init__(self, error: Exception):
        self._error = error

    @property
    def name(self) -> str:
        return "raiser"

    @property
    def description(self) -> str:
        return "Always raises"

    async def execute(self, input: str) -> ToolResult:
        raise self._error


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture
def echo_tool() -> EchoTool:
    return EchoTool()


def test_register_tool(registry: ToolRegistry, echo_tool: EchoTool) -> None:
    registry.register(echo_tool)
    assert "echo" in registry.list_tools()
    assert "echo" in registry


def test_register_duplicate_raises(registry: ToolRegistry, echo_tool: EchoTool) -> None:
    registry.register(echo_tool)
    with pytest.raises(ValueError, match="already registered"):
        registry.register(echo_tool)


def test_unregister(registry: ToolRegistry, echo_tool: EchoTool) -> None:
    registry.register(echo_tool)
    registry.unregister("echo")
    assert registry.get("echo") is None
    registry.unregister("echo")


def test_get_tool(registry: ToolRegistry, echo_tool: EchoTool) -> None:
    registry.register(echo_tool)
    assert registry.get("echo") is echo_tool


def test_get_unknown_tool(registry: ToolRegistry) -> None:
    assert registry.get("unknown") is None
    assert "unknown" not in registry


def test_describe(registry: ToolRegistry, echo_tool: EchoTool) -> None:
    registry.register(echo_tool)
    assert registry.describe() == "- echo(input): string Echoes the input message"


@pytest.mark.asyncio
async def test_dispatch_success(registry: ToolRegistry, echo_tool: EchoTool) -> None:
    registry.register(echo_tool)
    result = await registry.dispatch("echo", "hello")
    assert result.success is True
    assert result.output == "hello"


@pytest.mark.asyncio
async def test_dispatch_unknown_tool(registry: ToolRegistry) -> None:
    result = await registry.dispatch("unknown", "")
    assert result.success is False
    assert "Unknown tool" in result.error


@pytest.mark.asyncio
async def test_dispatch_tool_execution_error(registry: ToolRegistry) -> None:
    registry.register(RaisingTool(ToolExecutionError("raiser", "disk full")))
    result = await registry.dispatch("raiser", "x")
    assert result.success is False
    assert result.error == "disk full"


@pytest.mark.asyncio
async def test_dispatch_unexpected_exception(registry: ToolRegistry) -> None:
    registry.register(RaisingTool(RuntimeError("kaboom")))
    result = await registry.dispatch("raiser", "x")
    assert result.success is False
    assert result.error == "Tool execution failed: kaboom"
