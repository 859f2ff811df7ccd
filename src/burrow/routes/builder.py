"""Route tree builder — scan a routes directory into RouteNodes.

Walks the routes directory recursively and applies the naming conventions
in ``burrow.routes.conventions``:

    routes/_layout.tsx        -> root node, path "/"
    routes/index.tsx          -> {index: true}
    routes/about.tsx          -> {path: "about"}
    routes/users/[id].tsx     -> {path: "users/:id"}  (no users/_layout)
    routes/admin/_layout.tsx  -> {path: "admin", children: [...]}

A directory with a layout contributes exactly one wrapping node.  A
directory without one contributes its routes flat, re-rooted below the
directory segment, or (``nest_directories``) as one group node.

Entries are visited in name order, so two scans of the same tree always
produce the same result.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from burrow._errors import ScanError
from burrow.routes.conventions import (
    Conventions,
    classify,
    is_ignored,
    pick_special,
    segment_for,
)
from burrow.routes.resolver import resolve_import_path
from burrow.routes.tree import RouteNode


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """Everything a scan needs besides the directory itself.

    Attributes:
        conventions: File naming conventions.
        root: Routes root; import references are resolved against it and
            a layout found directly in it gets the path ``/``.
        alias: Import-reference prefix passed to the resolver.
        nest_directories: Group layout-less directories instead of
            flattening them.
        exclude: Absolute file paths that are never routes (the generated
            module, the entry component).

    """

    conventions: Conventions = field(default_factory=Conventions)
    root: Path | None = None
    alias: str = ""
    nest_directories: bool = False
    exclude: frozenset[Path] = frozenset()


def build_routes(
    directory: Path,
    options: ScanOptions | None = None,
) -> tuple[RouteNode, ...]:
    """Scan *directory* and return its route nodes.

    Returns an empty tuple for an empty directory.

    Raises:
        ScanError: If *directory* or one of its subdirectories cannot be read.

    """
    options = options or ScanOptions()
    directory = Path(os.path.abspath(directory))
    root = Path(os.path.abspath(options.root)) if options.root is not None else directory
    options = replace(options, root=root)
    if not directory.is_dir():
        msg = f"Routes directory not found: {directory}"
        raise ScanError(msg)
    nodes, _wrapped = _scan_directory(directory, options)
    return nodes


def _scan_directory(
    directory: Path,
    options: ScanOptions,
) -> tuple[tuple[RouteNode, ...], bool]:
    """Scan one directory level, recursing into subdirectories.

    Returns the nodes and whether they are the directory's own layout wrapper.

    """
    assert options.root is not None
    entries = _list_entries(directory)
    file_names = [e.name for e in entries if _is_file(e)]

    layout_name = pick_special(file_names, options.conventions.layout_filename)
    error_name = pick_special(file_names, options.conventions.error_filename)

    children: tuple[RouteNode, ...] = ()
    for entry in entries:
        if _is_dir(entry):
            children += _scan_subdirectory(Path(entry.path), options)
        elif _is_file(entry):
            children += _route_for_file(Path(entry.path), options)

    if layout_name is None:
        return children, False

    layout = RouteNode(
        path="/" if directory == options.root else segment_for(directory.name),
        element=_resolve(directory / layout_name, options),
        error_element=(
            _resolve(directory / error_name, options) if error_name is not None else None
        ),
        children=children,
    )
    return (layout,), True


def _scan_subdirectory(directory: Path, options: ScanOptions) -> tuple[RouteNode, ...]:
    """Nodes a subdirectory contributes to its parent's children."""
    nodes, wrapped = _scan_directory(directory, options)
    if wrapped or not nodes:
        return nodes

    segment = segment_for(directory.name)
    if options.nest_directories:
        return (RouteNode(path=segment, children=nodes),)
    return tuple(node.under(segment) for node in nodes)


def _route_for_file(path: Path, options: ScanOptions) -> tuple[RouteNode, ...]:
    role = classify(path.name, options.conventions)
    if role is None or role.kind != "route" or path in options.exclude:
        # unrecognised extension, layout/error file, or a generated file
        return ()
    return (
        RouteNode(
            path=role.path,
            index=role.index,
            element=_resolve(path, options),
        ),
    )


def _resolve(path: Path, options: ScanOptions) -> str:
    assert options.root is not None
    return resolve_import_path(path, options.root, options.alias)


def _list_entries(directory: Path) -> list[os.DirEntry[str]]:
    """Non-ignored entries of *directory*, sorted by name."""
    try:
        with os.scandir(directory) as it:
            entries = [e for e in it if not is_ignored(e.name)]
    except OSError as exc:
        msg = f"Cannot read routes directory {directory}: {exc}"
        raise ScanError(msg) from exc
    for entry in entries:
        _check_name(entry)
    return sorted(entries, key=lambda e: e.name)


def _check_name(entry: os.DirEntry[str]) -> None:
    """Reject names that are not valid UTF-8.

    os.scandir decodes such bytes to lone surrogates, which cannot appear
    in the generated module.
    """
    try:
        entry.name.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = f"File name is not valid UTF-8: {entry.path!r}"
        raise ScanError(msg) from exc


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError as exc:
        msg = f"Cannot stat {entry.path}: {exc}"
        raise ScanError(msg) from exc


def _is_file(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_file()
    except OSError as exc:
        msg = f"Cannot stat {entry.path}: {exc}"
        raise ScanError(msg) from exc
