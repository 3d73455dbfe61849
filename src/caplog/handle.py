from __future__ import annotations

from collections.abc import Iterator

from caplog.models import Level, LogEntry
from caplog.store import Store


class Handle:
    """Query access to captured log entries.

    A handle is a view onto the shared store, not a copy of it: every handle
    sees the same entries, and ``clear()`` on any of them empties the store for
    all. A handle may be restricted to a window of the store with
    ``since_now()`` and ``stop_recording()``.
    """

    def __init__(
        self, store: Store, start: int | None = None, stop: int | None = None
    ) -> None:
        self._store = store
        self._start = start
        self._stop = stop

    def __repr__(self) -> str:
        return f"<Handle start={self._start} stop={self._stop}>"

    def entries(self) -> list[LogEntry]:
        return list(self._store.snapshot(self._start, self._stop))

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._store.snapshot(self._start, self._stop))

    def messages(self) -> list[str]:
        return [entry.message for entry in self]

    def any_msg_contains(self, substring: str) -> bool:
        return any(substring in entry.message for entry in self)

    def count(self) -> int:
        return len(self._store.snapshot(self._start, self._stop))

    def entries_at_level(self, level: Level | int | str) -> list[LogEntry]:
        """Return visible entries logged at exactly ``level``, oldest first."""
        wanted = Level.parse(level)
        return [entry for entry in self if entry.level == wanted]

    def clear(self) -> None:
        """Remove every entry from the shared store, for all handles."""
        self._store.clear()

    def since_now(self) -> Handle:
        """Return a handle that only sees entries recorded after this call."""
        return Handle(self._store, start=self._store.end())

    def stop_recording(self) -> None:
        """Stop this handle from seeing entries recorded after this call.

        Does nothing on a poisoned store, so the failure that poisoned it is
        not hidden behind a second error during cleanup.
        """
        if self._stop is None and not self._store.poisoned:
            self._stop = self._store.end()

    @property
    def is_recording(self) -> bool:
        return self._stop is None
