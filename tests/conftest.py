"""Pytest fixtures for eventhub tests."""

import os
import tempfile

import pytest

from eventhub.lib.events import EventHub


class Recorder:
    """Callable handler that remembers every call it receives."""

    def __init__(self, name: str = "recorder", log: list | None = None):
        self.name = name
        self.calls: list[tuple] = []
        # Shared across recorders to check dispatch order
        self.log = log if log is not None else []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        self.log.append(self.name)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def hub():
    """Create a fresh EventHub."""
    return EventHub()


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def make_recorder(call_log):
    """Build recorders that append their name to a shared call log."""

    def _make(name: str) -> Recorder:
        return Recorder(name, call_log)

    return _make


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    fd, path = tempfile.mkstemp(suffix=".ini")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.remove(path)
