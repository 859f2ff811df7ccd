"""Filesystem watching and debounced rebuilds."""

from burrow.watch.coordinator import WatchCoordinator
from burrow.watch.watcher import ChangeEvent, RouteWatcher

__all__ = [
    "ChangeEvent",
    "RouteWatcher",
    "WatchCoordinator",
]
