"""Tests for burrow.codegen — module syntax tree, rendering and generation."""

from __future__ import annotations

import re
from pathlib import Path

from burrow.codegen.generator import (
    HEADER,
    ImportTable,
    build_module,
    generate_module,
)
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
    render_expression,
    render_module,
    render_statement,
)
from burrow.routes.builder import build_routes
from burrow.routes.tree import RouteNode, iter_elements
from tests.conftest import make_tree

EXAMPLE = (
    RouteNode(
        path="/",
        element="./routes/_layout",
        children=(
            RouteNode(path="about", element="./routes/about"),
            RouteNode(index=True, element="./routes/index"),
            RouteNode(path="users/:id", element="./routes/users/[id]"),
        ),
    ),
)

EXPECTED_EXAMPLE = """\
// Generated by burrow. Do not edit: changes are overwritten.

import RouteComp0 from "./routes/_layout";
import RouteComp1 from "./routes/about";
import RouteComp2 from "./routes/index";
import RouteComp3 from "./routes/users/[id]";
import React from "react";
import { type RouteObject } from "react-router";

const routes: RouteObject[] = [
  {
    "path": "/",
    "element": React.createElement(RouteComp0),
    "children": [
      {
        "path": "about",
        "element": React.createElement(RouteComp1)
      },
      {
        "index": true,
        "element": React.createElement(RouteComp2)
      },
      {
        "path": "users/:id",
        "element": React.createElement(RouteComp3)
      }
    ]
  }
];

export default routes;
"""

_IMPORT_RE = re.compile(r'^import (RouteComp\d+) from "([^"]+)";$', re.MULTILINE)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRenderExpression:
    """render_expression() — literals, calls and nesting."""

    def test_identifier(self) -> None:
        assert render_expression(Identifier("routes")) == "routes"

    def test_string_is_json_quoted(self) -> None:
        assert render_expression(StringLiteral('a"b')) == '"a\\"b"'

    def test_booleans(self) -> None:
        assert render_expression(BooleanLiteral(True)) == "true"
        assert render_expression(BooleanLiteral(False)) == "false"

    def test_member_call(self) -> None:
        call = Call(Member(Identifier("React"), "createElement"), (Identifier("X"),))
        assert render_expression(call) == "React.createElement(X)"

    def test_empty_literals(self) -> None:
        assert render_expression(ArrayLiteral()) == "[]"
        assert render_expression(ObjectLiteral()) == "{}"

    def test_nested_indentation(self) -> None:
        expr = ArrayLiteral((ObjectLiteral((Property("path", StringLiteral("a")),)),))
        assert render_expression(expr) == '[\n  {\n    "path": "a"\n  }\n]'


class TestRenderStatement:
    def test_default_import(self) -> None:
        assert render_statement(DefaultImport("React", "react")) == 'import React from "react";'

    def test_named_import_with_type_modifier(self) -> None:
        statement = NamedImport(("RouteObject", "redirect"), "react-router", frozenset({"RouteObject"}))
        assert render_statement(statement) == (
            'import { type RouteObject, redirect } from "react-router";'
        )

    def test_const_with_annotation(self) -> None:
        statement = ConstDeclaration("routes", ArrayLiteral(), annotation="RouteObject[]")
        assert render_statement(statement) == "const routes: RouteObject[] = [];"

    def test_comment(self) -> None:
        assert render_statement(Comment("one\ntwo")) == "// one\n// two"

    def test_export_default(self) -> None:
        assert render_statement(ExportDefault(Identifier("routes"))) == "export default routes;"


class TestRenderModule:
    def test_imports_grouped_other_statements_separated(self) -> None:
        module = Module((
            DefaultImport("A", "a"),
            DefaultImport("B", "b"),
            ConstDeclaration("x", ArrayLiteral()),
            ExportDefault(Identifier("x")),
        ))
        assert render_module(module) == (
            'import A from "a";\nimport B from "b";\n\nconst x = [];\n\nexport default x;\n'
        )


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestImportTable:
    def test_sequential_identifiers(self) -> None:
        table = ImportTable()
        assert table.identifier_for("./a") == "RouteComp0"
        assert table.identifier_for("./b") == "RouteComp1"

    def test_repeated_reference_reuses_identifier(self) -> None:
        table = ImportTable()
        table.identifier_for("./a")
        assert table.identifier_for("./a") == "RouteComp0"
        assert len(table) == 1

    def test_tables_are_independent(self) -> None:
        ImportTable().identifier_for("./a")
        assert ImportTable().identifier_for("./b") == "RouteComp0"


class TestGenerateModule:
    """generate_module() — route tree to module text."""

    def test_example_app(self) -> None:
        assert generate_module(EXAMPLE).text == EXPECTED_EXAMPLE

    def test_metadata(self) -> None:
        module = generate_module(EXAMPLE)
        assert module.route_count == 4
        assert module.imports[0] == ("RouteComp0", "./routes/_layout")
        assert len(module.imports) == 4

    def test_empty_tree_is_valid_module(self) -> None:
        text = generate_module(()).text
        assert "const routes: RouteObject[] = [];" in text
        assert "export default routes;" in text
        assert "RouteComp" not in text

    def test_header_first(self) -> None:
        assert generate_module(EXAMPLE).text.startswith(f"// {HEADER}\n")

    def test_counter_resets_per_call(self) -> None:
        assert generate_module(EXAMPLE).text == generate_module(EXAMPLE).text

    def test_index_false_and_missing_path_omitted(self) -> None:
        text = generate_module((RouteNode(index=True, element="./i"),)).text
        assert '"path"' not in text
        assert "false" not in text

    def test_group_node_has_no_element(self) -> None:
        tree = (RouteNode(path="users", children=(RouteNode(path=":id", element="./u"),)),)
        module, table = build_module(tree)
        (obj,) = module.body[-2].value.items  # type: ignore[union-attr]
        assert [p.key for p in obj.properties] == ["path", "children"]
        assert len(table) == 1

    def test_property_order(self) -> None:
        tree = (
            RouteNode(
                path="/",
                element="./l",
                error_element="./e",
                children=(RouteNode(index=True, element="./i"),),
            ),
        )
        module, _ = build_module(tree)
        (obj,) = module.body[-2].value.items  # type: ignore[union-attr]
        assert [p.key for p in obj.properties] == ["path", "element", "errorElement", "children"]

    def test_error_element_is_a_live_element(self) -> None:
        tree = (RouteNode(path="/", element="./l", error_element="./e"),)
        text = generate_module(tree).text
        assert '"errorElement": React.createElement(RouteComp1)' in text


class TestImportRoundTrip:
    """Every element reference has exactly one import with a matching identifier."""

    def test_one_import_per_reference(self, tmp_path: Path) -> None:
        routes = make_tree(
            tmp_path / "src" / "routes",
            "_layout.tsx",
            "_error.tsx",
            "index.tsx",
            "about.tsx",
            "users/_layout.tsx",
            "users/[id].tsx",
            "admin/settings.tsx",
        )
        tree = build_routes(routes)
        module = generate_module(tree)

        imports = dict((ref, name) for name, ref in _IMPORT_RE.findall(module.text))
        refs = iter_elements(tree)
        assert set(imports) == set(refs)
        assert len(_IMPORT_RE.findall(module.text)) == len(set(refs))

        # identifiers appear in the array in the same depth-first order
        used = re.findall(r"React\.createElement\((RouteComp\d+)\)", module.text)
        assert used == [imports[ref] for ref in refs]

    def test_byte_identical_across_rebuilds(self, tmp_path: Path) -> None:
        routes = make_tree(tmp_path / "routes", "_layout.tsx", "a.tsx", "b/[c].tsx")
        first = generate_module(build_routes(routes)).text
        second = generate_module(build_routes(routes)).text
        assert first == second
