"""Thread-safe event log for simulation events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SimEvent:
    """A single simulation event for the API event feed."""

    tick: int
    category: str  # spawn | expire | cull | resize
    message: str
    entity_ids: tuple[int, ...] = ()


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice.

    Oldest events fall off once *maxlen* is reached. Thread-safe via a
    simple lock: the engine thread writes, API handlers read copies.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int = 2000) -> None:
        self._buffer: deque[SimEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def append_many(self, events: list[SimEvent]) -> None:
        with self._lock:
            self._buffer.extend(events)

    def since_tick(self, tick: int) -> list[SimEvent]:
        """Return all events with tick >= *tick*."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def latest(self, count: int = 50) -> list[SimEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
