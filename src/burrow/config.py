"""Burrow configuration.

BurrowConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from burrow._errors import ConfigError

DEFAULT_LAYOUT_FILENAME = "_layout.tsx"
DEFAULT_ERROR_FILENAME = "_error.tsx"


@dataclass(frozen=True, slots=True)
class BurrowConfig:
    """Configuration for route generation.

    Attributes:
        project: Project directory that relative paths are anchored to.
            Always resolved to an absolute path on construction.
        root: Routes directory to scan and watch.
        output: File the generated route module is written to.
        src_alias: Import-reference prefix (e.g. ``@/``).  Empty means
            references are emitted as relative paths.
        layout_filename: File name recognised as a layout wrapper.
        error_filename: File name recognised as a layout's error boundary.
        stability_ms: Quiet period after the last filesystem event before
            a rebuild is triggered.
        nest_directories: Emit a group node for each layout-less
            subdirectory instead of flattening it into its parent.
        entrypoint: Optional path for the generated entry component.

    """

    project: Path = field(default_factory=Path.cwd)
    root: Path = field(default_factory=lambda: Path("src/routes"))
    output: Path = field(default_factory=lambda: Path("src/generated/routes.tsx"))
    src_alias: str = ""
    layout_filename: str = DEFAULT_LAYOUT_FILENAME
    error_filename: str = DEFAULT_ERROR_FILENAME
    stability_ms: int = 500
    nest_directories: bool = False
    entrypoint: Path | None = None

    def __post_init__(self) -> None:
        # watchfiles reports absolute paths; keep everything absolute so
        # they can be compared with Path.relative_to().
        if not self.project.is_absolute():
            object.__setattr__(self, "project", self.project.resolve())
        if not self.layout_filename:
            msg = "layout_filename must not be empty"
            raise ConfigError(msg)
        if self.stability_ms < 0:
            msg = f"stability_ms must be >= 0, got {self.stability_ms}"
            raise ConfigError(msg)

    @property
    def root_path(self) -> Path:
        """Absolute path to the routes directory."""
        return self._anchor(self.root)

    @property
    def output_path(self) -> Path:
        """Absolute path to the generated module."""
        return self._anchor(self.output)

    @property
    def entrypoint_path(self) -> Path | None:
        """Absolute path to the entry component, if one is configured."""
        if self.entrypoint is None:
            return None
        return self._anchor(self.entrypoint)

    @property
    def generated_paths(self) -> frozenset[Path]:
        """Files burrow writes; never routes and never watch triggers."""
        paths = {self.output_path}
        if self.entrypoint_path is not None:
            paths.add(self.entrypoint_path)
        return frozenset(paths)

    @property
    def stability_s(self) -> float:
        """Debounce window in seconds."""
        return self.stability_ms / 1000

    def _anchor(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.project / path
