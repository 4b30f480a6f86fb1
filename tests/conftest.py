"""Pytest configuration and shared fixtures for halfpipe tests."""

import pytest

from halfpipe._config import reset
from halfpipe._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def _fresh_runtime(monkeypatch):
    """Every test starts untraced, without log hooks, whatever the environment says."""
    monkeypatch.delenv('HALFPIPE_TRACE', raising=False)
    monkeypatch.delenv('HALFPIPE_LOG_LEVEL', raising=False)
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from halfpipe import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from halfpipe import Nothing

    return Nothing


@pytest.fixture
def captured_events():
    """Configure logging and collect every log event dict emitted during the test."""
    from halfpipe import configure_logging
    from halfpipe._logging import add_log_hook

    configure_logging('DEBUG', json_output=False)
    events: list[dict] = []
    add_log_hook(events.append)
    return events
