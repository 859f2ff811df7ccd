"""Module syntax tree — the subset of TypeScript burrow emits.

The generated route module is built as data (imports, a typed const
declaration, a default export) and rendered to text in one pass.  Element
constructors such as ``React.createElement(RouteComp0)`` are real call
expressions in the tree, so no placeholder substitution is ever needed.

Rendering is deterministic: the same tree always renders to the same bytes.
Strings are JSON-quoted, which is valid TypeScript string syntax.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

_INDENT = "  "


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True, slots=True)
class Member:
    """Property access: ``object.name``."""

    object: Expr
    name: str


@dataclass(frozen=True, slots=True)
class Call:
    callee: Expr
    args: tuple[Expr, ...] = ()


@dataclass(frozen=True, slots=True)
class Property:
    """Object literal entry.  Keys are always rendered quoted."""

    key: str
    value: Expr


@dataclass(frozen=True, slots=True)
class ObjectLiteral:
    properties: tuple[Property, ...] = ()


@dataclass(frozen=True, slots=True)
class ArrayLiteral:
    items: tuple[Expr, ...] = ()


type Expr = (
    Identifier
    | StringLiteral
    | BooleanLiteral
    | Member
    | Call
    | ObjectLiteral
    | ArrayLiteral
)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Comment:
    text: str


@dataclass(frozen=True, slots=True)
class DefaultImport:
    """``import name from "source";``"""

    name: str
    source: str


@dataclass(frozen=True, slots=True)
class NamedImport:
    """``import { a, type B } from "source";``

    Attributes:
        names: Imported names in order.
        source: Module specifier.
        type_only: Names that are imported with the ``type`` modifier.

    """

    names: tuple[str, ...]
    source: str
    type_only: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class ConstDeclaration:
    """``const name: annotation = value;``"""

    name: str
    value: Expr
    annotation: str | None = None


@dataclass(frozen=True, slots=True)
class ExportDefault:
    value: Expr


type Statement = Comment | DefaultImport | NamedImport | ConstDeclaration | ExportDefault


@dataclass(frozen=True, slots=True)
class Module:
    body: tuple[Statement, ...] = ()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_module(module: Module) -> str:
    """Render *module* as source text ending in a single newline.

    Consecutive imports are kept together; every other pair of statements
    is separated by a blank line.
    """
    lines: list[str] = []
    previous: Statement | None = None
    for statement in module.body:
        if previous is not None and not (_is_import(previous) and _is_import(statement)):
            lines.append("")
        lines.append(render_statement(statement))
        previous = statement
    return "\n".join(lines) + "\n"


def render_statement(statement: Statement) -> str:
    match statement:
        case Comment(text=text):
            return "\n".join(f"// {line}".rstrip() for line in text.splitlines())
        case DefaultImport(name=name, source=source):
            return f"import {name} from {_quote(source)};"
        case NamedImport(names=names, source=source, type_only=type_only):
            specifiers = ", ".join(
                f"type {name}" if name in type_only else name for name in names
            )
            return f"import {{ {specifiers} }} from {_quote(source)};"
        case ConstDeclaration(name=name, value=value, annotation=annotation):
            target = f"{name}: {annotation}" if annotation else name
            return f"const {target} = {render_expression(value)};"
        case ExportDefault(value=value):
            return f"export default {render_expression(value)};"
    msg = f"Cannot render statement {statement!r}"
    raise TypeError(msg)


def render_expression(expr: Expr, level: int = 0) -> str:
    """Render an expression; nested literals are indented from *level*."""
    match expr:
        case Identifier(name=name):
            return name
        case StringLiteral(value=value):
            return _quote(value)
        case BooleanLiteral(value=value):
            return "true" if value else "false"
        case Member(object=obj, name=name):
            return f"{render_expression(obj, level)}.{name}"
        case Call(callee=callee, args=args):
            rendered = ", ".join(render_expression(a, level) for a in args)
            return f"{render_expression(callee, level)}({rendered})"
        case ObjectLiteral(properties=properties):
            if not properties:
                return "{}"
            inner = _INDENT * (level + 1)
            entries = ",\n".join(
                f"{inner}{_quote(p.key)}: {render_expression(p.value, level + 1)}"
                for p in properties
            )
            return "{\n" + entries + "\n" + _INDENT * level + "}"
        case ArrayLiteral(items=items):
            if not items:
                return "[]"
            inner = _INDENT * (level + 1)
            entries = ",\n".join(
                f"{inner}{render_expression(item, level + 1)}" for item in items
            )
            return "[\n" + entries + "\n" + _INDENT * level + "]"
    msg = f"Cannot render expression {expr!r}"
    raise TypeError(msg)


def _is_import(statement: Statement) -> bool:
    return isinstance(statement, (DefaultImport, NamedImport))


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)
