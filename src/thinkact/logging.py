"""JSONL event log for agent sessions.

Every event becomes one JSON object per line::

    {"ts": "...", "event": "tool_call", "session": "cli-1a2b3c4d", "seq": 7, ...}

``seq`` counts events within the log object so a session can be replayed in
order even when timestamps collide. Fields whose value is None are dropped.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

DEFAULT_LOG_DIR = Path.home() / ".thinkact" / "logs"


class EventLog:
    """Append-only JSONL event log with numbered backups."""

    def __init__(
        self,
        log_dir: str | Path | None = None,
        filename: str = "events.jsonl",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        self.log_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.path = self.log_dir / filename
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.session_id: str | None = None
        self._seq = 0

    def bind_session(self, session_id: str | None) -> None:
        """Stamp subsequent events with ``session_id``."""
        self.session_id = session_id

    def _backup(self, n: int) -> Path:
        return self.path.with_name(f"{self.path.name}.{n}")

    def _roll_over(self) -> None:
        # events.jsonl.N-1 -> .N, ..., events.jsonl -> .1; the oldest falls off
        oldest = self._backup(self.backup_count)
        if oldest.exists():
            oldest.unlink()
        for n in range(self.backup_count - 1, 0, -1):
            if self._backup(n).exists():
                self._backup(n).rename(self._backup(n + 1))
        if self.backup_count > 0:
            self.path.rename(self._backup(1))
        else:
            self.path.unlink()

    def emit(self, event: str, **fields: Any) -> dict[str, Any]:
        """Append an event and return the record that was written."""
        self._seq += 1
        record: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "session": self.session_id,
            "seq": self._seq,
        }
        record.update(fields)
        record = {k: v for k, v in record.items() if v is not None}

        line = json.dumps(record, ensure_ascii=False) + "\n"
        if self.path.exists() and self.path.stat().st_size + len(line) > self.max_bytes:
            self._roll_over()
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line)
        return record

    def read(self) -> Iterator[dict[str, Any]]:
        """Iterate over the events in the current file."""
        if not self.path.exists():
            return
        with self.path.open(encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    yield json.loads(line)

    def log_llm_request(self, turn: int, model: str, messages_count: int) -> None:
        self.emit("llm_request", turn=turn, model=model, messages=messages_count)

    def log_llm_response(self, turn: int, content: str, duration_ms: float) -> None:
        """Record the raw reply text exactly as received."""
        self.emit("llm_response", turn=turn, duration_ms=round(duration_ms, 1), content=content)

    def log_step(self, turn: int, step: str) -> None:
        self.emit("step", turn=turn, step=step)

    def log_tool_call(self, turn: int, tool: str, input: str) -> None:
        self.emit("tool_call", turn=turn, tool=tool, input=input)

    def log_tool_result(
        self,
        turn: int,
        tool: str,
        success: bool,
        *,
        duration_ms: float | None = None,
        error: str | None = None,
    ) -> None:
        self.emit(
            "tool_result",
            turn=turn,
            tool=tool,
            success=success,
            duration_ms=round(duration_ms, 1) if duration_ms is not None else None,
            error=None if success else error,
        )

    def log_error(self, turn: int, error: Exception) -> None:
        self.emit("error", turn=turn, kind=type(error).__name__, error=str(error))

    def log_agent_stop(self, reason: str, *, turns: int) -> None:
        self.emit("agent_stop", reason=reason, turns=turns)


_event_log: EventLog | None = None


def get_event_log() -> EventLog:
    """Return the process-wide event log, creating it on first use."""
    global _event_log
    if _event_log is None:
        _event_log = EventLog()
    return _event_log


def configure_event_log(log_dir: str | Path | None = None, **kwargs: Any) -> EventLog:
    """Replace the process-wide event log."""
    global _event_log
    _event_log = EventLog(log_dir=log_dir, **kwargs)
    return _event_log
