"""Route tree — immutable nodes produced by the directory scan.

A node is one of three kinds:

- **leaf**: renders a component, no children (``about.tsx``)
- **layout**: renders a component around its children (``_layout.tsx``)
- **group**: children under a shared path, no component of its own

Nodes are frozen; transformations return new nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burrow._types import ImportRef, NodeKind, RoutePath


@dataclass(frozen=True, slots=True)
class RouteNode:
    """One route in the generated route array.

    Attributes:
        path: URL fragment this node contributes, None for index routes.
        index: True when this is the default child of its parent.
        element: Import reference of the component that renders the route.
        error_element: Import reference of the error boundary, if any.
        children: Nested routes in traversal order.

    """

    path: RoutePath | None = None
    index: bool = False
    element: ImportRef | None = None
    error_element: ImportRef | None = None
    children: tuple[RouteNode, ...] = ()

    @property
    def kind(self) -> NodeKind:
        if self.element is None:
            return "group"
        if self.children:
            return "layout"
        return "leaf"

    @property
    def is_empty(self) -> bool:
        """A node without element and children is never emitted."""
        return self.element is None and not self.children

    def under(self, segment: RoutePath) -> RouteNode:
        """Return this node re-rooted below *segment*.

        Used when a layout-less directory is flattened into its parent:
        ``:id`` under ``users`` becomes ``users/:id`` and the directory's
        index route becomes the plain ``users`` route.
        """
        if self.index:
            return replace(self, path=segment, index=False)
        if self.path is None:
            return replace(self, path=segment)
        return replace(self, path=f"{segment}/{self.path}")


def count_routes(nodes: tuple[RouteNode, ...]) -> int:
    """Total number of nodes in a route tree."""
    return sum(1 + count_routes(node.children) for node in nodes)


def iter_elements(nodes: tuple[RouteNode, ...]) -> list[ImportRef]:
    """Every element/error reference in depth-first order."""
    refs: list[ImportRef] = []
    for node in nodes:
        if node.element is not None:
            refs.append(node.element)
        if node.error_element is not None:
            refs.append(node.error_element)
        refs.extend(iter_elements(node.children))
    return refs
