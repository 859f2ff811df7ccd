"""Shared test fixtures for burrow."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from burrow.config import BurrowConfig


def make_tree(root: Path, *files: str) -> Path:
    """Create empty files (and their parent directories) below *root*.

    Names ending in ``/`` create an empty directory instead.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name in files:
        path = root / name
        if name.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("export default function Route() { return null; }\n")
    return root


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory with a small example app under src/routes."""
    make_tree(
        tmp_path / "src" / "routes",
        "_layout.tsx",
        "index.tsx",
        "about.tsx",
        "users/[id].tsx",
    )
    return tmp_path


@pytest.fixture
def config(project: Path) -> BurrowConfig:
    """A BurrowConfig for the example project."""
    return BurrowConfig(project=project)


def make_undecodable(directory: Path, raw_name: bytes = b"caf\xe9.tsx") -> None:
    """Create a file whose name is not valid UTF-8 (Linux only).

    Skips the calling test where the platform or filesystem refuses such names.
    """
    if sys.platform != "linux":
        pytest.skip("arbitrary byte file names need Linux")
    try:
        with open(os.path.join(os.fsencode(directory), raw_name), "wb"):
            pass
    except OSError as exc:
        pytest.skip(f"filesystem rejects non-UTF-8 names: {exc}")
