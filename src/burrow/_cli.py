"""Burrow CLI — burrow generate / burrow watch / burrow check.

Entry point for the ``burrow`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys

from burrow._errors import BurrowError


def _add_common(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command.  Unset options fall back to the config file."""
    parser.add_argument("project", nargs="?", default=".", help="Project directory")
    parser.add_argument("--root", default=None, help="Routes directory to scan")


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", default=None, help="Generated module path")
    parser.add_argument(
        "--alias", dest="src_alias", default=None, help="Import prefix, e.g. '@/'",
    )
    parser.add_argument(
        "--layout", dest="layout_filename", default=None, help="Layout file name",
    )
    parser.add_argument(
        "--entrypoint", default=None, help="Also write the entry component here",
    )
    parser.add_argument(
        "--nest-directories",
        dest="nest_directories",
        action="store_true",
        default=None,
        help="Group layout-less directories instead of flattening them",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the burrow CLI."""
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Generate React Router routes from a routes/ directory.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # burrow generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the route module once",
    )
    _add_common(generate_parser)
    _add_output_options(generate_parser)

    # burrow watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Generate, then regenerate whenever routes are added or removed",
    )
    _add_common(watch_parser)
    _add_output_options(watch_parser)
    watch_parser.add_argument(
        "--stability-ms",
        dest="stability_ms",
        type=int,
        default=None,
        help="Quiet period before a rebuild (default 500)",
    )

    # burrow check
    check_parser = subparsers.add_parser(
        "check",
        help="Fail if the routes directory yields no routes",
    )
    _add_common(check_parser)

    return parser


def _get_version() -> str:
    """Get the package version."""
    from burrow import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from burrow.app import check, generate, watch

    options = {k: v for k, v in vars(args).items() if k not in ("command", "project")}
    try:
        if args.command == "generate":
            generate(args.project, **options)
        elif args.command == "watch":
            watch(args.project, **options)
        elif args.command == "check":
            count = check(args.project, **options)
            print(f"  {count} route{'s' if count != 1 else ''} found", file=sys.stderr)
    except BurrowError as exc:
        print(f"burrow: error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
