"""Tests for burrow.build — one full rebuild and the atomic write."""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from burrow._errors import OutputError, ScanError
from burrow.build import rebuild, scan_options, write_output
from burrow.config import BurrowConfig
from tests.conftest import make_undecodable


class TestWriteOutput:
    """write_output() — parent creation and replace-on-write."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "routes.tsx"
        write_output(target, "content")
        assert target.read_text() == "content"

    def test_overwrites_unconditionally(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.tsx"
        target.write_text("old")
        write_output(target, "new")
        assert target.read_text() == "new"

    def test_leaves_no_temp_file(self, tmp_path: Path) -> None:
        write_output(tmp_path / "routes.tsx", "x")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["routes.tsx"]

    def test_failed_replace_keeps_previous_output(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.tsx"
        target.write_text("previous")
        with (
            patch("burrow.build.os.replace", side_effect=OSError("disk full")),
            pytest.raises(OutputError, match="disk full"),
        ):
            write_output(target, "new")
        assert target.read_text() == "previous"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["routes.tsx"]

    def test_unencodable_content_keeps_previous_output(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.tsx"
        target.write_text("previous")
        with pytest.raises(OutputError, match="Cannot write"):
            write_output(target, 'import A from "./caf\udce9";')
        assert target.read_text() == "previous"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["routes.tsx"]

    def test_unexpected_error_still_removes_temp_file(self, tmp_path: Path) -> None:
        target = tmp_path / "routes.tsx"
        with (
            patch("burrow.build.os.replace", side_effect=KeyboardInterrupt),
            pytest.raises(KeyboardInterrupt),
        ):
            write_output(target, "x")
        assert list(tmp_path.iterdir()) == []


class TestRebuild:
    """rebuild() — scan, generate and write for a config."""

    def test_writes_module(self, config: BurrowConfig) -> None:
        result = rebuild(config)
        assert result.output == config.output_path
        text = config.output_path.read_text()
        assert 'import RouteComp0 from "./routes/_layout";' in text
        assert '"path": "users/:id"' in text

    def test_result_counts(self, config: BurrowConfig) -> None:
        result = rebuild(config)
        assert result.route_count == 4
        assert result.import_count == 4
        assert result.duration_ms >= 0

    def test_alias_from_config(self, project: Path) -> None:
        config = BurrowConfig(project=project, src_alias="@/")
        rebuild(config)
        assert 'from "@/routes/about";' in config.output_path.read_text()

    def test_idempotent_output(self, config: BurrowConfig) -> None:
        rebuild(config)
        first = config.output_path.read_bytes()
        rebuild(config)
        assert config.output_path.read_bytes() == first

    def test_empty_routes_directory_still_generates(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "routes").mkdir(parents=True)
        config = BurrowConfig(project=tmp_path)
        result = rebuild(config)
        assert result.route_count == 0
        assert "const routes: RouteObject[] = [];" in config.output_path.read_text()

    def test_scan_failure_preserves_previous_output(self, config: BurrowConfig) -> None:
        rebuild(config)
        previous = config.output_path.read_text()
        shutil.rmtree(config.root_path)
        with pytest.raises(ScanError):
            rebuild(config)
        assert config.output_path.read_text() == previous

    def test_reflects_new_files(self, config: BurrowConfig) -> None:
        rebuild(config)
        (config.root_path / "contact.tsx").write_text("")
        rebuild(config)
        assert '"path": "contact"' in config.output_path.read_text()

    def test_output_inside_routes_is_not_a_route(self, project: Path) -> None:
        config = BurrowConfig(project=project, output=Path("src/routes/routes.gen.ts"))
        rebuild(config)
        result = rebuild(config)
        assert result.route_count == 4
        assert "routes.gen" not in config.output_path.read_text()


class TestScanOptions:
    def test_from_config(self, project: Path) -> None:
        config = BurrowConfig(
            project=project,
            src_alias="~/",
            layout_filename="layout.tsx",
            error_filename="",
            nest_directories=True,
        )
        options = scan_options(config)
        assert options.root == config.root_path
        assert options.alias == "~/"
        assert options.conventions.layout_filename == "layout.tsx"
        assert options.conventions.error_filename == ""
        assert options.nest_directories is True

    def test_generated_files_are_excluded(self, project: Path) -> None:
        config = BurrowConfig(project=project, entrypoint=Path("src/routes/FileRouter.tsx"))
        assert scan_options(config).exclude == config.generated_paths
        (config.root_path / "FileRouter.tsx").write_text("")
        assert "FileRouter" not in rebuild(config).output.read_text()


class TestUndecodableNames:
    """A file name that is not UTF-8 fails the scan, not the write."""

    def test_rebuild_raises_scan_error(self, config: BurrowConfig) -> None:
        rebuild(config)
        previous = config.output_path.read_text()
        make_undecodable(config.root_path)
        with pytest.raises(ScanError, match="not valid UTF-8"):
            rebuild(config)
        assert config.output_path.read_text() == previous
        assert sorted(p.name for p in config.output_path.parent.iterdir()) == ["routes.tsx"]
