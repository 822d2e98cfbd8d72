"""Shared fixtures for thinkact tests."""

import pytest

from thinkact.logging import EventLog, configure_event_log


@pytest.fixture(autouse=True)
def event_log(tmp_path_factory: pytest.TempPathFactory) -> EventLog:
    """Route the global event log to a temporary directory."""
    return configure_event_log(log_dir=tmp_path_factory.mktemp("logs"))
