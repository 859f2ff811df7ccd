"""Consumer entrypoint — the component that loads the generated routes.

The generated module only exports a route array.  The entry component
imports it, refuses to start when the array is empty, and builds an
in-memory router from it.  ``validate_routes`` applies the same rule on
the Python side (``burrow check``).
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from pathlib import Path, PurePath

from burrow._errors import RouteConfigError
from burrow.build import write_output
from burrow.routes.conventions import split_extension

ENTRYPOINT_TEMPLATE = """\
// Generated by burrow. Do not edit: changes are overwritten.
import React from "react";
import {{ createMemoryRouter, RouterProvider }} from "react-router";
import routes from {routes_import};

export default function FileRouter(): React.ReactElement {{
  if (!Array.isArray(routes) || routes.length === 0) {{
    throw new Error("burrow: generated routes are not an array or are empty.");
  }}
  const router = createMemoryRouter(routes);
  return <RouterProvider router={{router}} />;
}}
"""


def validate_routes(routes: object) -> Sequence[object]:
    """Return *routes* if it is a non-empty sequence of routes.

    Raises:
        RouteConfigError: If *routes* is not a sequence or is empty.

    """
    if isinstance(routes, (str, bytes)) or not isinstance(routes, Sequence):
        msg = f"Routes must be a sequence, got {type(routes).__name__}"
        raise RouteConfigError(msg)
    if len(routes) == 0:
        msg = "No routes found: the routes directory produced an empty route list"
        raise RouteConfigError(msg)
    return routes


def routes_import_for(entrypoint: Path, output: Path) -> str:
    """Import specifier of the generated module as seen from *entrypoint*."""
    rel = PurePath(os.path.relpath(output, entrypoint.parent)).as_posix()
    no_ext, _ = split_extension(rel)
    if not no_ext.startswith("."):
        no_ext = "./" + no_ext
    return no_ext


def render_entrypoint(routes_import: str) -> str:
    """Source of the entry component importing routes from *routes_import*."""
    return ENTRYPOINT_TEMPLATE.format(routes_import=json.dumps(routes_import))


def write_entrypoint(entrypoint: Path, output: Path) -> Path:
    """Write the entry component for the module at *output*."""
    return write_output(entrypoint, render_entrypoint(routes_import_for(entrypoint, output)))
