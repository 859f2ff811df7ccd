"""Startup banner — what burrow is about to do, on stderr.

Shows the routes directory, import style, layout file name, output file
and, in watch mode, the debounce window.  Colour is decided per call:
off when ``NO_COLOR`` is set, ``TERM=dumb``, or stderr is not a terminal.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burrow._types import BurrowMode
    from burrow.config import BurrowConfig

_ANSI = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
}

_MODE_COLORS: dict[str, str] = {
    "generate": "yellow",
    "watch": "green",
    "check": "cyan",
}


def _use_color() -> bool:
    if os.environ.get("NO_COLOR") or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


def _palette(enabled: bool) -> dict[str, str]:
    return {name: code if enabled else "" for name, code in _ANSI.items()}


def print_banner(config: BurrowConfig, mode: BurrowMode) -> None:
    """Print the burrow startup banner to stderr.

    Args:
        config: Resolved BurrowConfig.
        mode: One of ``"generate"``, ``"watch"``, ``"check"``.

    """
    from burrow import __version__

    c = _palette(_use_color())
    badge = f"{c[_MODE_COLORS.get(mode, 'dim')]}[{mode}]{c['reset']}"

    rows: list[tuple[str, object]] = [
        ("routes", config.root_path),
        ("alias", config.src_alias or "(relative imports)"),
        ("layout", config.layout_filename),
    ]
    if config.entrypoint_path is not None:
        rows.append(("entrypoint", config.entrypoint_path))
    rows.append(("output", config.output_path))

    lines = [
        "",
        f"  {c['bold']}burrow{c['reset']} {c['dim']}v{__version__}{c['reset']}  {badge}",
        f"  {c['dim']}{'─' * 43}{c['reset']}",
    ]
    for i, (label, value) in enumerate(rows):
        branch = "└─" if i == len(rows) - 1 else "├─"
        lines.append(f"  {c['dim']}{branch}{c['reset']} {label}: {c['dim']}{value}{c['reset']}")

    if mode == "watch":
        lines += [
            "",
            f"  {c['dim']}Watching for changes (settles after {config.stability_ms}ms)...{c['reset']}",
        ]

    print("\n".join([*lines, ""]), file=sys.stderr)
