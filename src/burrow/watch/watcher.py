"""Route watcher — filesystem changes that can alter the route tree.

Only creations and deletions matter: editing a route file's contents never
changes the generated module.  Dotfiles, ``node_modules`` and the files burrow
writes itself (module and entry component) are ignored so a rebuild never
triggers another one.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from watchfiles import Change, DefaultFilter, awatch

from burrow.routes.conventions import is_ignored

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from burrow._types import ChangeKind
    from burrow.config import BurrowConfig


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A route-relevant filesystem change.

    Attributes:
        path: Absolute path that was added or deleted.
        kind: Type of filesystem change.

    """

    path: Path
    kind: ChangeKind


_CHANGE_KIND_MAP: dict[Change, ChangeKind] = {
    Change.added: "added",
    Change.deleted: "deleted",
}


def is_watched(path: Path, config: BurrowConfig) -> bool:
    """True if a change at *path* can affect the route tree of *config*."""
    if path in config.generated_paths:
        return False
    try:
        rel = path.relative_to(config.root_path)
    except ValueError:
        return False
    return not any(is_ignored(part) for part in rel.parts)


def event_for(change: Change, path_str: str, config: BurrowConfig) -> ChangeEvent | None:
    """Translate a raw watchfiles change into a ChangeEvent, or None to drop it."""
    kind = _CHANGE_KIND_MAP.get(change)
    if kind is None:
        return None
    path = Path(path_str)
    if not is_watched(path, config):
        return None
    return ChangeEvent(path=path, kind=kind)


class RouteFilter(DefaultFilter):
    """watchfiles filter: drops modifications and ignored paths early."""

    def __init__(self, config: BurrowConfig) -> None:
        super().__init__(ignore_paths=tuple(config.generated_paths))
        self._config = config

    def __call__(self, change: Change, path: str) -> bool:
        if change not in _CHANGE_KIND_MAP:
            return False
        return super().__call__(change, path) and is_watched(Path(path), self._config)


class RouteWatcher:
    """Watches the routes directory with watchfiles.

    ``changes()`` yields ChangeEvents until ``stop()`` is called.  Errors
    raised by watchfiles (for example when the routes directory disappears)
    propagate out of ``changes()``; restarting is the caller's decision.

    """

    def __init__(self, config: BurrowConfig, *, step_ms: int = 50) -> None:
        self._config = config
        self._step_ms = step_ms
        self._stop_event = asyncio.Event()

    def stop(self) -> None:
        """Signal ``changes()`` to finish."""
        self._stop_event.set()

    async def changes(self) -> AsyncIterator[ChangeEvent]:
        """Async iterator over route-relevant changes."""
        # Debouncing is the coordinator's job; watchfiles only batches
        # events that arrive within one step.
        async for raw_changes in awatch(
            self._config.root_path,
            watch_filter=RouteFilter(self._config),
            stop_event=self._stop_event,
            debounce=self._step_ms,
            step=self._step_ms,
        ):
            for change, path_str in sorted(raw_changes, key=lambda c: c[1]):
                event = event_for(change, path_str, self._config)
                if event is not None:
                    yield event
