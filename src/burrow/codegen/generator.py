"""Route module generator — RouteNode tree -> TypeScript module.

Produces::

    // Generated by burrow. Do not edit: changes are overwritten.

    import RouteComp0 from "./routes/_layout";
    import RouteComp1 from "./routes/index";
    import React from "react";
    import { type RouteObject } from "react-router";

    const routes: RouteObject[] = [
      {
        "path": "/",
        "element": React.createElement(RouteComp0),
        "children": [
          {
            "index": true,
            "element": React.createElement(RouteComp1)
          }
        ]
      }
    ];

    export default routes;

Identifiers are allocated depth-first by an ImportTable that lives for one
``generate_module`` call, so output depends only on the tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from burrow.codegen.nodes import (
    ArrayLiteral,
    BooleanLiteral,
    Call,
    Comment,
    ConstDeclaration,
    DefaultImport,
    ExportDefault,
    Identifier,
    Member,
    Module,
    NamedImport,
    ObjectLiteral,
    Property,
    StringLiteral,
    render_module,
)
from burrow.routes.tree import count_routes

if TYPE_CHECKING:
    from burrow._types import ImportRef
    from burrow.routes.tree import RouteNode

HEADER = "Generated by burrow. Do not edit: changes are overwritten."
IDENTIFIER_PREFIX = "RouteComp"
ROUTES_NAME = "routes"

_CREATE_ELEMENT = Member(Identifier("React"), "createElement")


@dataclass(slots=True)
class ImportTable:
    """Allocates one identifier per distinct import reference.

    ``RouteComp0, RouteComp1, ...`` in first-use order.  A reference seen
    twice reuses its identifier.
    """

    prefix: str = IDENTIFIER_PREFIX
    _names: dict[ImportRef, str] = field(default_factory=dict)

    def identifier_for(self, ref: ImportRef) -> str:
        name = self._names.get(ref)
        if name is None:
            name = f"{self.prefix}{len(self._names)}"
            self._names[ref] = name
        return name

    @property
    def entries(self) -> tuple[tuple[str, ImportRef], ...]:
        """``(identifier, reference)`` pairs in allocation order."""
        return tuple((name, ref) for ref, name in self._names.items())

    def declarations(self) -> tuple[DefaultImport, ...]:
        return tuple(DefaultImport(name, ref) for name, ref in self.entries)

    def __len__(self) -> int:
        return len(self._names)


@dataclass(frozen=True, slots=True)
class GeneratedModule:
    """A rendered route module.

    Attributes:
        text: Module source.
        imports: ``(identifier, reference)`` pairs, one per import statement.
        route_count: Number of route objects in the array, nested included.

    """

    text: str
    imports: tuple[tuple[str, ImportRef], ...]
    route_count: int


def generate_module(routes: tuple[RouteNode, ...]) -> GeneratedModule:
    """Render *routes* as a self-contained route module.

    An empty tree still renders a valid module exporting ``[]``; rejecting
    it is the entry component's job at load time.

    """
    module, table = build_module(routes)
    return GeneratedModule(
        text=render_module(module),
        imports=table.entries,
        route_count=count_routes(routes),
    )


def build_module(routes: tuple[RouteNode, ...]) -> tuple[Module, ImportTable]:
    """Build the module syntax tree for *routes*."""
    table = ImportTable()
    array = ArrayLiteral(tuple(_route_object(node, table) for node in routes))
    body = (
        Comment(HEADER),
        *table.declarations(),
        DefaultImport("React", "react"),
        NamedImport(("RouteObject",), "react-router", type_only=frozenset({"RouteObject"})),
        ConstDeclaration(ROUTES_NAME, array, annotation="RouteObject[]"),
        ExportDefault(Identifier(ROUTES_NAME)),
    )
    return Module(body), table


def _route_object(node: RouteNode, table: ImportTable) -> ObjectLiteral:
    # Property order is part of the output contract.
    properties: list[Property] = []
    if node.index:
        properties.append(Property("index", BooleanLiteral(True)))
    if node.path is not None:
        properties.append(Property("path", StringLiteral(node.path)))
    if node.element is not None:
        properties.append(Property("element", _element(node.element, table)))
    if node.error_element is not None:
        properties.append(Property("errorElement", _element(node.error_element, table)))
    if node.children:
        children = tuple(_route_object(child, table) for child in node.children)
        properties.append(Property("children", ArrayLiteral(children)))
    return ObjectLiteral(tuple(properties))


def _element(ref: ImportRef, table: ImportTable) -> Call:
    return Call(_CREATE_ELEMENT, (Identifier(table.identifier_for(ref)),))
