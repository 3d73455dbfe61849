from collections.abc import Iterator
from contextlib import contextmanager

from caplog.config import CaptureSettings
from caplog.handle import Handle
from caplog.recorder import install_recorder
from caplog.store import shared_store


def get_handle(settings: CaptureSettings | None = None) -> Handle:
    """Start capturing logs, if not already, and return a handle to them.

    The handle sees everything captured in this process that has not been
    cleared, including entries logged by earlier tests. Use ``capture_logs()``
    or ``Handle.since_now()`` for a view limited to a block of code.

    ``settings`` only apply to the first call in a process. When omitted they
    are read from the environment.
    """
    store = shared_store()
    install_recorder(store, settings)
    return Handle(store)


@contextmanager
def capture_logs(settings: CaptureSettings | None = None) -> Iterator[Handle]:
    """Yield a handle that only sees entries logged inside the block."""
    handle = get_handle(settings).since_now()
    try:
        yield handle
    finally:
        handle.stop_recording()
