"""Naming conventions — map filesystem names to route semantics.

    index.tsx        -> index route of the directory
    _layout.tsx      -> layout wrapping the directory's routes
    _error.tsx       -> error boundary of the directory's layout
    [id].tsx         -> dynamic segment ``:id``
    about.tsx        -> literal segment ``about``
    users/           -> directory segment ``users``
    [org]/           -> directory segment ``:org``
    .git, node_modules, notes.md -> ignored

Everything here is pure: no filesystem access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from burrow.config import DEFAULT_ERROR_FILENAME, DEFAULT_LAYOUT_FILENAME

# Recognised route source extensions, highest priority first.
ROUTE_EXTENSIONS: tuple[str, ...] = (".tsx", ".jsx", ".ts", ".js")

# Directory names never traversed or watched (besides dotfiles).
IGNORED_DIRS: frozenset[str] = frozenset({"node_modules"})

INDEX_STEM = "index"


@dataclass(frozen=True, slots=True)
class Conventions:
    """The configurable part of the naming conventions.

    Attributes:
        layout_filename: Layout file name (``_layout.tsx``).  Without a
            recognised extension, any ``_layout.{ext}`` matches and
            ``ROUTE_EXTENSIONS`` order breaks ties.
        error_filename: Error boundary file name, matched the same way.

    """

    layout_filename: str = DEFAULT_LAYOUT_FILENAME
    error_filename: str = DEFAULT_ERROR_FILENAME


@dataclass(frozen=True, slots=True)
class FileRole:
    """What a single file contributes to its directory.

    Attributes:
        kind: ``route`` for a leaf, ``layout``/``error`` for the special files.
        path: URL segment for a route file, None for index routes.
        index: True for ``index.{ext}``.

    """

    kind: Literal["route", "layout", "error"]
    path: str | None = None
    index: bool = False


def split_extension(name: str) -> tuple[str, str | None]:
    """Split *name* into ``(stem, extension)`` for recognised extensions.

    Returns ``(name, None)`` when the extension is not a route extension.

    """
    for ext in ROUTE_EXTENSIONS:
        if name.endswith(ext) and len(name) > len(ext):
            return name[: -len(ext)], ext
    return name, None


def is_ignored(name: str) -> bool:
    """True for dotfiles and dependency directories."""
    return name.startswith(".") or name in IGNORED_DIRS


def segment_for(stem: str) -> str:
    """URL segment for a file stem or directory name (``[id]`` -> ``:id``)."""
    if len(stem) > 2 and stem.startswith("[") and stem.endswith("]"):
        return ":" + stem[1:-1]
    return stem


def classify(name: str, conventions: Conventions) -> FileRole | None:
    """Classify a file name; None means the file is not part of the route tree."""
    stem, ext = split_extension(name)
    if ext is None:
        return None
    if _matches(name, stem, conventions.layout_filename):
        return FileRole(kind="layout")
    if _matches(name, stem, conventions.error_filename):
        return FileRole(kind="error")
    if stem == INDEX_STEM:
        return FileRole(kind="route", index=True)
    return FileRole(kind="route", path=segment_for(stem))


def pick_special(names: list[str], filename: str) -> str | None:
    """Pick the one file among *names* that matches a layout/error *filename*.

    An exact name wins.  For an extension-less *filename* the candidate with
    the highest-priority extension wins, independent of listing order.

    """
    if not filename:
        return None
    candidates: list[tuple[int, str]] = []
    for name in names:
        stem, ext = split_extension(name)
        if ext is not None and _matches(name, stem, filename):
            candidates.append((ROUTE_EXTENSIONS.index(ext), name))
    if not candidates:
        return None
    return min(candidates)[1]


def _matches(name: str, stem: str, filename: str) -> bool:
    if not filename:
        return False
    if split_extension(filename)[1] is not None:
        return name == filename
    return stem == filename
