"""Burrow entry points — generate, watch, check.

The three public functions are the primary entry points; the CLI is a
thin layer over them.
"""

import asyncio
import sys
from pathlib import Path

from burrow.banner import print_banner
from burrow.build import RebuildResult, rebuild, scan_options
from burrow.config import BurrowConfig
from burrow.config_loader import load_config
from burrow.entrypoint import validate_routes, write_entrypoint
from burrow.observability import BuildCollector, EventLog
from burrow.routes.builder import build_routes
from burrow.routes.tree import count_routes
from burrow.watch.coordinator import WatchCoordinator


def _write_entrypoint(config: BurrowConfig) -> None:
    """Write the entry component if one is configured."""
    if config.entrypoint_path is not None:
        write_entrypoint(config.entrypoint_path, config.output_path)


def generate(project: str | Path = ".", **kwargs: object) -> RebuildResult:
    """Generate the route module once.

    Args:
        project: Project directory (holds burrow.toml, anchors relative paths).
        **kwargs: Override BurrowConfig fields.

    Raises:
        ConfigError: Invalid configuration.
        ScanError: The routes directory could not be read.
        OutputError: The module could not be written.

    """
    config = load_config(Path(project), **kwargs)
    print_banner(config, mode="generate")

    result = rebuild(config)
    _write_entrypoint(config)
    BuildCollector().record_rebuild(result)
    return result


def watch(project: str | Path = ".", **kwargs: object) -> EventLog:
    """Generate the route module, then regenerate on every settled change.

    Blocks until interrupted.  Returns the event log of the session.

    Args:
        project: Project directory (holds burrow.toml, anchors relative paths).
        **kwargs: Override BurrowConfig fields.

    """
    config = load_config(Path(project), **kwargs)
    print_banner(config, mode="watch")
    _write_entrypoint(config)

    collector = BuildCollector(EventLog())
    coordinator = WatchCoordinator(config, collector=collector)
    try:
        asyncio.run(coordinator.run())
    except KeyboardInterrupt:
        stats = collector.log.stats()
        print(
            f"\n  Stopped after {stats['rebuilds']} rebuilds ({stats['failures']} failed).",
            file=sys.stderr,
        )
    return collector.log


def check(project: str | Path = ".", **kwargs: object) -> int:
    """Scan the routes directory and validate it like the entry component does.

    Returns the number of routes found.

    Raises:
        RouteConfigError: The routes directory yields no routes.
        ScanError: The routes directory could not be read.

    """
    config = load_config(Path(project), **kwargs)
    routes = build_routes(config.root_path, scan_options(config))
    validate_routes(routes)
    return count_routes(routes)
