"""Rebuild observability — every trigger, rebuild and failure as an event.

Quick Start:
    >>> from burrow.observability import BuildCollector, EventLog
    >>> log = EventLog()
    >>> collector = BuildCollector(log)
    >>> # WatchCoordinator records events via collector.record_trigger(...)

"""

from burrow.observability.collector import BuildCollector
from burrow.observability.events import (
    BuildEvent,
    RebuildCompleted,
    RebuildFailed,
    RebuildTriggered,
    WatcherFailed,
    now_ns,
)
from burrow.observability.log import EventLog

__all__ = [
    "BuildCollector",
    "BuildEvent",
    "EventLog",
    "RebuildCompleted",
    "RebuildFailed",
    "RebuildTriggered",
    "WatcherFailed",
    "now_ns",
]
