"""Process-wide storage for captured log entries."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from caplog.errors import CapturePoisonedError
from caplog.models import LogEntry

logger = logging.getLogger(__name__)


class Store:
    """An ordered, append-only (until cleared) list of captured entries.

    Entries are addressed by absolute sequence positions that keep increasing
    across ``clear()``, so a window opened before a clear never points at
    entries recorded after it by accident.

    All access goes through a single lock. If an exception escapes while the
    lock is held, the store is marked poisoned: every later operation raises
    ``CapturePoisonedError`` until ``clear()`` resets it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[LogEntry] = []
        # Number of entries discarded by clear(), i.e. the position of _entries[0].
        self._offset = 0
        self._poisoned: BaseException | None = None

    @contextmanager
    def _locked(self) -> Iterator[list[LogEntry]]:
        with self._lock:
            if self._poisoned is not None:
                raise CapturePoisonedError(
                    "Log capture store is poisoned by an earlier failure; "
                    "call clear() to reset it."
                ) from self._poisoned
            try:
                yield self._entries
            except BaseException as e:
                self._poisoned = e
                logger.error("Log capture store poisoned: %r", e)
                raise

    def append(self, entry: LogEntry) -> None:
        with self._locked() as entries:
            entries.append(entry)

    def snapshot(
        self, start: int | None = None, stop: int | None = None
    ) -> tuple[LogEntry, ...]:
        """Return the entries between absolute positions ``start`` and ``stop``."""
        with self._locked() as entries:
            lo = 0 if start is None else max(start - self._offset, 0)
            hi = len(entries) if stop is None else max(stop - self._offset, 0)
            return tuple(entries[lo:hi])

    def end(self) -> int:
        """Absolute position one past the most recent entry."""
        with self._locked() as entries:
            return self._offset + len(entries)

    def clear(self) -> None:
        with self._lock:
            if self._poisoned is not None:
                logger.warning("Resetting poisoned log capture store")
            self._offset += len(self._entries)
            self._entries = []
            self._poisoned = None

    @property
    def poisoned(self) -> bool:
        return self._poisoned is not None

    def __len__(self) -> int:
        with self._locked() as entries:
            return len(entries)


_store: Store | None = None
_store_lock = threading.Lock()


def shared_store() -> Store:
    """Return the process-wide store, creating it on first use."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = Store()
    return _store
