"""Directory-to-route-tree scanning.

Turns a routes directory laid out by naming convention into an immutable
tree of RouteNodes, ready for code generation.
"""

from burrow.routes.builder import ScanOptions, build_routes
from burrow.routes.conventions import Conventions
from burrow.routes.resolver import resolve_import_path
from burrow.routes.tree import RouteNode

__all__ = [
    "Conventions",
    "RouteNode",
    "ScanOptions",
    "build_routes",
    "resolve_import_path",
]
