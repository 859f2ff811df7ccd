"""Build collector — records rebuild pipeline events and reports them.

Every trigger, rebuild and failure goes into the EventLog.  With
``verbose`` (the default) a one-line summary is also printed to stderr,
which is what users see while ``burrow watch`` runs.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from burrow.observability.events import (
    RebuildCompleted,
    RebuildFailed,
    RebuildTriggered,
    WatcherFailed,
    now_ns,
)
from burrow.observability.log import EventLog

if TYPE_CHECKING:
    from burrow._types import TriggerKind
    from burrow.build import RebuildResult

PREFIX = "[burrow]"

_TRIGGER_LABELS: dict[TriggerKind, str] = {
    "startup": "Initial build",
    "added": "Added",
    "deleted": "Removed",
}


class BuildCollector:
    """Event collector for the watch/rebuild pipeline.

    Args:
        log: The EventLog to store events in.
        verbose: Print a summary line per event to stderr.

    """

    __slots__ = ("_log", "_verbose")

    def __init__(self, log: EventLog | None = None, *, verbose: bool = True) -> None:
        self._log = log if log is not None else EventLog()
        self._verbose = verbose

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_trigger(self, kind: TriggerKind, path: str) -> None:
        """Record a rebuild trigger (a change event or the cold start)."""
        self._log.append(
            RebuildTriggered(
                kind=kind,
                path=path,
                timestamp_ns=now_ns(),
            )
        )
        self._print(f"{_TRIGGER_LABELS[kind]}: {path}")

    def record_rebuild(self, result: RebuildResult) -> None:
        """Record a successful rebuild."""
        self._log.append(
            RebuildCompleted(
                output=str(result.output),
                route_count=result.route_count,
                import_count=result.import_count,
                duration_ms=result.duration_ms,
                timestamp_ns=now_ns(),
            )
        )
        routes = "route" if result.route_count == 1 else "routes"
        self._print(
            f"Routes generated at: {result.output} "
            f"({result.route_count} {routes}, {result.duration_ms:.0f}ms)"
        )

    def record_rebuild_failure(self, exc: BaseException) -> None:
        """Record a failed rebuild."""
        self._log.append(
            RebuildFailed(
                error=str(exc),
                error_type=type(exc).__name__,
                timestamp_ns=now_ns(),
            )
        )
        self._print(f"Rebuild failed, keeping previous output: {exc}")

    def record_watcher_failure(self, exc: BaseException) -> None:
        """Record a watcher error."""
        self._log.append(
            WatcherFailed(
                error=str(exc),
                error_type=type(exc).__name__,
                timestamp_ns=now_ns(),
            )
        )
        self._print(f"Watcher error: {exc}")

    def _print(self, message: str) -> None:
        if self._verbose:
            print(f"{PREFIX} {message}", file=sys.stderr)
