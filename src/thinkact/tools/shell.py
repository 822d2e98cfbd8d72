"""Shell command tool.

Runs the model-supplied string through the system shell. There is no
allow-list and no input validation; register a different tool under the
same name to restrict what the model can run.
"""

import asyncio
import os
import signal
import time
from pathlib import Path

from .base import Tool, ToolResult


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


class ShellTool(Tool):
    """Execute a shell command and return its captured output."""

    def __init__(
        self,
        timeout: float | None = None,
        cwd: str | Path | None = None,
        max_output_chars: int | None = None,
    ) -> None:
        self._timeout = timeout
        self._cwd = str(cwd) if cwd is not None else None
        self._max_output = max_output_chars

    @property
    def name(self) -> str:
        return "executeCommand"

    @property
    def description(self) -> str:
        return "Executes a given linux command"

    @property
    def signature(self) -> str:
        return f"{self.name}(command): string"

    def _truncate(self, text: str) -> tuple[str, bool]:
        if self._max_output is None or len(text) <= self._max_output:
            return text, False
        return text[: self._max_output] + "\n... [output truncated]", True

    async def execute(self, input: str) -> ToolResult:
        """Run ``input`` in a shell and wait for it to exit."""
        command = input
        start_time = time.time()

        try:
            proc = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self._cwd,
                start_new_session=True,
            )
        except OSError as e:
            return ToolResult(success=False, output="", error=str(e))

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self._timeout
            )
        except asyncio.TimeoutError:
            # The shell may have forked; kill its whole process group
            try:
                os.killpg(proc.pid, signal.SIGKILL)
            except ProcessLookupError:
                pass
            await proc.wait()
            return ToolResult(
                success=False,
                output="",
                error=f"Command timed out after {self._timeout}s: {command}",
            )

        duration_ms = (time.time() - start_time) * 1000
        out_text, out_truncated = self._truncate(_decode(stdout))
        err_text, err_truncated = self._truncate(_decode(stderr))
        metadata = {
            "exit_code": proc.returncode,
            "duration_ms": duration_ms,
            "truncated": out_truncated or err_truncated,
        }

        if proc.returncode != 0:
            return ToolResult(
                success=False,
                output="",
                error=f"Command failed: {command}\n{err_text}",
                metadata=metadata,
            )

        return ToolResult(
            success=True,
            output=f"stdout: {out_text}\nstderr: {err_text}",
            metadata=metadata,
        )
