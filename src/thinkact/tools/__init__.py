"""Tool registry and tool implementations."""

from .base import Tool, ToolResult
from .registry import ToolRegistry
from .shell import ShellTool

__all__ = ["ShellTool", "Tool", "ToolResult", "ToolRegistry"]
