"""Pytest fixtures for log capture.

Enable in a ``conftest.py`` with::

    pytest_plugins = ["caplog.pytest_plugin"]
"""

from collections.abc import Iterator

import pytest

from caplog.capture import get_handle
from caplog.config import CaptureSettings
from caplog.handle import Handle


@pytest.fixture(scope="session")
def caplog_settings() -> CaptureSettings:
    """Settings used when the recorder is first installed."""
    return CaptureSettings.from_env()


@pytest.fixture()
def caplog_handle(caplog_settings: CaptureSettings) -> Iterator[Handle]:
    """A handle that only sees entries logged while the test runs.

    The shared store is not cleared, so tests running in parallel threads do
    not lose each other's entries.
    """
    handle = get_handle(caplog_settings).since_now()
    yield handle
    handle.stop_recording()
