"""One rebuild: scan the routes directory, generate, write.

Each rebuild re-reads the whole tree; nothing is patched and nothing is
carried over from the previous rebuild.  The module text is fully rendered
before the output file is touched, and the write goes through a temporary
file and ``os.replace``, so a failed rebuild leaves the previous output in
place.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from burrow._errors import OutputError
from burrow.codegen.generator import generate_module
from burrow.routes.builder import ScanOptions, build_routes
from burrow.routes.conventions import Conventions

if TYPE_CHECKING:
    from burrow.config import BurrowConfig


@dataclass(frozen=True, slots=True)
class RebuildResult:
    """Outcome of a successful rebuild.

    Attributes:
        output: Path the module was written to.
        route_count: Route objects in the generated array, nested included.
        import_count: Import statements for route components.
        duration_ms: Wall time of scan + generate + write.

    """

    output: Path
    route_count: int
    import_count: int
    duration_ms: float


def scan_options(config: BurrowConfig) -> ScanOptions:
    """Scan options derived from *config*."""
    return ScanOptions(
        conventions=Conventions(
            layout_filename=config.layout_filename,
            error_filename=config.error_filename,
        ),
        root=config.root_path,
        alias=config.src_alias,
        nest_directories=config.nest_directories,
        exclude=config.generated_paths,
    )


def rebuild(config: BurrowConfig) -> RebuildResult:
    """Regenerate the route module for *config*.

    Raises:
        ScanError: The routes directory could not be read.
        OutputError: The module could not be written.

    """
    t0 = time.perf_counter()
    routes = build_routes(config.root_path, scan_options(config))
    module = generate_module(routes)
    write_output(config.output_path, module.text)
    return RebuildResult(
        output=config.output_path,
        route_count=module.route_count,
        import_count=len(module.imports),
        duration_ms=(time.perf_counter() - t0) * 1000,
    )


def write_output(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories.

    The content lands in a dotfile next to *path* first (ignored by the
    watcher) and is then moved over *path* in one rename.

    Raises:
        OutputError: If the directory or file cannot be written, or
            *content* cannot be encoded as UTF-8.

    """
    tmp = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except (OSError, UnicodeError) as exc:
        msg = f"Cannot write {path}: {exc}"
        raise OutputError(msg) from exc
    finally:
        # gone after a successful replace
        tmp.unlink(missing_ok=True)
    return path
