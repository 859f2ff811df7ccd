"""Event log — bounded record of one watch session.

Keeps the most recent ``BuildEvent`` objects in a ring buffer so a session
can be inspected after the fact: what triggered each rebuild, how long it
took, and what failed.

Thread Safety:
    Every access goes through one ``threading.Lock``.  The coordinator
    appends from the event loop; embedders may read from any thread.

"""

import threading
from collections import deque
from typing import Any

from burrow.observability.events import (
    BuildEvent,
    RebuildCompleted,
    RebuildFailed,
    WatcherFailed,
)


def _event_path(event: BuildEvent) -> str:
    """The path an event is about: the changed file, or the written module."""
    match event:
        case RebuildCompleted(output=output):
            return output
        case RebuildFailed() | WatcherFailed():
            return ""
        case _:
            return event.path


class EventLog:
    """Ring buffer of pipeline events with simple filtering.

    Once ``max_events`` is reached each append drops the oldest event.

    Args:
        max_events: Capacity of the buffer.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 1_000) -> None:
        self._max_events = max_events
        self._events: deque[BuildEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: BuildEvent) -> None:
        with self._lock:
            self._events.append(event)

    def _snapshot(self) -> list[BuildEvent]:
        with self._lock:
            return list(self._events)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        path: str | None = None,
        limit: int = 100,
    ) -> list[BuildEvent]:
        """Matching events, newest first.

        Args:
            event_type: Keep only instances of this class.
            since_ns: Keep only events stamped at or after this time.
            path: Keep only events whose path (or output) contains this text.
            limit: Stop after this many matches.

        """
        matches: list[BuildEvent] = []
        for event in reversed(self._snapshot()):
            if len(matches) == limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if event.timestamp_ns < since_ns:
                continue
            if path is not None and path not in _event_path(event):
                continue
            matches.append(event)
        return matches

    def recent(self, n: int = 20) -> list[BuildEvent]:
        """The last *n* events in the order they happened."""
        return self._snapshot()[-n:]

    def last(self, event_type: type) -> BuildEvent | None:
        """Most recent event of *event_type*, or None."""
        found = self.query(event_type=event_type, limit=1)
        return found[0] if found else None

    def clear(self) -> int:
        """Drop every event; returns how many were dropped."""
        with self._lock:
            dropped = len(self._events)
            self._events.clear()
        return dropped

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Counts per event class plus rebuild totals for the session."""
        events = self._snapshot()
        by_type: dict[str, int] = {}
        for event in events:
            name = type(event).__name__
            by_type[name] = by_type.get(name, 0) + 1

        durations = [e.duration_ms for e in events if isinstance(e, RebuildCompleted)]
        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": by_type,
            "rebuilds": len(durations),
            "failures": by_type.get("RebuildFailed", 0) + by_type.get("WatcherFailed", 0),
            "mean_rebuild_ms": sum(durations) / len(durations) if durations else 0.0,
        }
