"""Rebuild pipeline events.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass

from burrow._types import TriggerKind


@dataclass(frozen=True, slots=True)
class RebuildTriggered:
    """A filesystem event (or the cold start) asked for a rebuild.

    Attributes:
        kind: ``startup`` for the cold-start trigger, else the change kind.
        path: Path that changed (the routes root for ``startup``).
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: TriggerKind
    path: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RebuildCompleted:
    """The route module was regenerated and written.

    Attributes:
        output: Path of the written module.
        route_count: Route objects in the generated array.
        import_count: Import statements in the generated module.
        duration_ms: Scan + generate + write time in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    output: str
    route_count: int
    import_count: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RebuildFailed:
    """A rebuild raised; the previous output was left in place.

    Attributes:
        error: Error message.
        error_type: Exception class name.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    error: str
    error_type: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class WatcherFailed:
    """The filesystem watcher raised and is being restarted.

    Attributes:
        error: Error message.
        error_type: Exception class name.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    error: str
    error_type: str
    timestamp_ns: int


type BuildEvent = RebuildTriggered | RebuildCompleted | RebuildFailed | WatcherFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
