"""Tests for burrow.routes.resolver — import references for route files."""

from pathlib import Path

from burrow.routes.resolver import resolve_import_path

ROOT = Path("/app/src/routes")


class TestResolveImportPath:
    """resolve_import_path() — relative to the routes root's parent."""

    def test_relative_reference(self) -> None:
        assert resolve_import_path(ROOT / "about.tsx", ROOT) == "./routes/about"

    def test_nested_dynamic(self) -> None:
        assert resolve_import_path(ROOT / "users" / "[id].tsx", ROOT) == "./routes/users/[id]"

    def test_alias(self) -> None:
        assert resolve_import_path(ROOT / "about.tsx", ROOT, "@/") == "@/routes/about"

    def test_alias_strips_leading_src(self) -> None:
        root = Path("/app/src")
        assert resolve_import_path(root / "routes" / "about.tsx", root, "@/") == "@/routes/about"

    def test_alias_keeps_inner_src(self) -> None:
        path = ROOT / "src" / "page.tsx"
        assert resolve_import_path(path, ROOT, "~/") == "~/routes/src/page"

    def test_strips_each_route_extension(self) -> None:
        for ext in (".tsx", ".jsx", ".ts", ".js"):
            assert resolve_import_path(ROOT / f"page{ext}", ROOT) == "./routes/page"

    def test_forward_slashes(self) -> None:
        result = resolve_import_path(ROOT / "a" / "b" / "c.tsx", ROOT)
        assert "\\" not in result
        assert result == "./routes/a/b/c"
