"""Shared pytest fixtures for all tests."""

import pytest

from caplog.capture import get_handle
from caplog.handle import Handle
from tests.fixtures.emitter import LogEmitter

pytest_plugins = ["caplog.pytest_plugin"]


@pytest.fixture()
def log_emitter() -> LogEmitter:
    """Fixture factory that returns loggers named below ``tests``."""
    return LogEmitter("tests")


@pytest.fixture()
def handle() -> Handle:
    """A whole-store handle, cleared so the test starts from an empty store."""
    handle = get_handle()
    handle.clear()
    return handle
