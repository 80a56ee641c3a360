"""Process-wide widget identifier allocation.

Each picker instance receives a unique, monotonically increasing id so several
pickers can be told apart inside one larger UI.
"""

from __future__ import annotations

import threading


class IdCounter:
    """Thread-safe monotonically increasing integer source."""

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._last = start

    def next_id(self) -> int:
        """Return the next id; never reuses a value."""
        with self._lock:
            self._last += 1
            return self._last


_COUNTER = IdCounter()


def next_id() -> int:
    """Allocate the next id from the shared process-wide counter."""
    return _COUNTER.next_id()
