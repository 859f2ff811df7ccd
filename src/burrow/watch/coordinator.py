"""Watch coordinator — connects the route watcher to rebuilds.

Flow:
    1. Cold start: log a synthetic ``startup`` trigger and rebuild once.
    2. Each ChangeEvent is logged, then (re)arms the debounce timer.
    3. When the timer fires after ``stability_ms`` of quiet, rebuild once.

Rebuilds are synchronous and run inside the timer callback on the event
loop, so two rebuilds never overlap; an event arriving during the window
pushes the rebuild back instead of starting a second one.  A failed
rebuild is reported and the previous output stays.  A watcher error is
reported and the watcher is restarted; it never ends the coordinator.
"""

from __future__ import annotations

import asyncio
from functools import partial
from typing import TYPE_CHECKING

from burrow._errors import BurrowError
from burrow.build import rebuild
from burrow.observability.collector import BuildCollector
from burrow.watch.watcher import RouteWatcher

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from burrow.build import RebuildResult
    from burrow.config import BurrowConfig
    from burrow.watch.watcher import ChangeEvent


class WatchCoordinator:
    """Debounces route changes into full rebuilds.

    Args:
        config: Resolved BurrowConfig.
        rebuild_fn: Performs one rebuild.  Defaults to ``build.rebuild``
            bound to *config*.
        source: Factory for the change stream.  Defaults to a new
            RouteWatcher per (re)start.
        collector: Receives trigger, rebuild and failure events.
        restart_delay: Seconds to wait before restarting a failed watcher.

    """

    def __init__(
        self,
        config: BurrowConfig,
        *,
        rebuild_fn: Callable[[], RebuildResult] | None = None,
        source: Callable[[], AsyncIterator[ChangeEvent]] | None = None,
        collector: BuildCollector | None = None,
        restart_delay: float = 1.0,
    ) -> None:
        self._config = config
        self._rebuild = rebuild_fn or partial(rebuild, config)
        self._source = source
        self._collector = collector if collector is not None else BuildCollector()
        self._restart_delay = restart_delay
        self._timer: asyncio.TimerHandle | None = None
        self._watcher: RouteWatcher | None = None
        self._stopped = False

    @property
    def collector(self) -> BuildCollector:
        return self._collector

    @property
    def pending(self) -> bool:
        """Whether a debounced rebuild is waiting for the window to close."""
        return self._timer is not None

    async def run(self) -> None:
        """Cold-start rebuild, then rebuild on settled changes until stopped.

        Returns when ``stop()`` is called or the change stream ends; a
        rebuild still waiting for its window is run before returning.
        """
        self._collector.record_trigger("startup", str(self._config.root_path))
        self.rebuild_now()

        while not self._stopped:
            try:
                async for event in self._changes():
                    self.notify(event)
                    if self._stopped:
                        break
            except Exception as exc:
                self._collector.record_watcher_failure(exc)
                await asyncio.sleep(self._restart_delay)
                continue
            break

        self.flush()

    def stop(self) -> None:
        """Stop consuming changes; ``run()`` returns after flushing."""
        self._stopped = True
        if self._watcher is not None:
            self._watcher.stop()

    def notify(self, event: ChangeEvent) -> None:
        """Log *event* and restart the debounce window."""
        self._collector.record_trigger(event.kind, str(event.path))
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._config.stability_s, self._fire)

    def flush(self) -> None:
        """Run a pending rebuild immediately."""
        if self._timer is not None:
            self._timer.cancel()
            self._fire()

    def rebuild_now(self) -> RebuildResult | None:
        """Rebuild once.  A BurrowError is reported and None returned."""
        try:
            result = self._rebuild()
        except BurrowError as exc:
            self._collector.record_rebuild_failure(exc)
            return None
        self._collector.record_rebuild(result)
        return result

    def _fire(self) -> None:
        self._timer = None
        self.rebuild_now()

    def _changes(self) -> AsyncIterator[ChangeEvent]:
        if self._source is not None:
            return self._source()
        self._watcher = RouteWatcher(self._config)
        return self._watcher.changes()
