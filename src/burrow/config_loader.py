"""Load BurrowConfig from burrow.toml / burrow.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from burrow._errors import ConfigError
from burrow.config import BurrowConfig

# Accepted file keys -> BurrowConfig field.  camelCase spellings match the
# options of the JavaScript bundler plugins that use the same conventions.
_KEYS: dict[str, str] = {
    "root": "root",
    "output": "output",
    "src_alias": "src_alias",
    "srcAlias": "src_alias",
    "layout_filename": "layout_filename",
    "layoutFilename": "layout_filename",
    "error_filename": "error_filename",
    "errorFilename": "error_filename",
    "stability_ms": "stability_ms",
    "stabilityMs": "stability_ms",
    "nest_directories": "nest_directories",
    "nestDirectories": "nest_directories",
    "entrypoint": "entrypoint",
}

_PATH_FIELDS = frozenset({"root", "output", "entrypoint"})


def load_config(project: Path, **overrides: object) -> BurrowConfig:
    """Load BurrowConfig for *project*, optionally merging a config file.

    Looks for burrow.toml, burrow.yaml, burrow.yml, then a ``[tool.burrow]``
    table in pyproject.toml.  Overrides whose value is None are ignored so
    unset CLI flags never mask file values.

    Raises:
        ConfigError: If a config file cannot be parsed or has unknown keys.

    """
    file_config = _read_burrow_config(project)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    return BurrowConfig(project=project, **_coerce(merged))


def _read_burrow_config(project: Path) -> dict[str, object]:
    """Read burrow config from toml/yaml if present. Returns empty dict otherwise."""
    toml_path = project / "burrow.toml"
    if toml_path.is_file():
        return _normalize(_section(_parse_toml(toml_path), "burrow"), toml_path)
    for name in ("burrow.yaml", "burrow.yml"):
        path = project / name
        if path.is_file():
            return _normalize(_section(_parse_yaml(path), "burrow"), path)
    pyproject = project / "pyproject.toml"
    if pyproject.is_file():
        tool = _parse_toml(pyproject).get("tool")
        if isinstance(tool, dict) and isinstance(tool.get("burrow"), dict):
            return _normalize(tool["burrow"], pyproject)
    return {}


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path}: expected a mapping at the top level, got {type(data).__name__}"
        raise ConfigError(msg)
    return data


def _section(data: dict[str, object], name: str) -> dict[str, object]:
    """Return the ``[name]`` table if the file has one, else the whole file."""
    table = data.get(name)
    if isinstance(table, dict):
        return table
    return data


def _normalize(data: dict[str, object], source: Path) -> dict[str, object]:
    """Map file keys onto BurrowConfig field names."""
    result: dict[str, object] = {}
    for key, value in data.items():
        field_name = _KEYS.get(key)
        if field_name is None:
            msg = f"{source}: unknown option {key!r}"
            raise ConfigError(msg)
        result[field_name] = value
    return result


def _coerce(values: dict[str, object]) -> dict[str, object]:
    """Convert raw option values to the types BurrowConfig expects."""
    result = dict(values)
    for name in _PATH_FIELDS & result.keys():
        if not isinstance(result[name], Path):
            result[name] = Path(str(result[name]))
    if "stability_ms" in result:
        try:
            result["stability_ms"] = int(result["stability_ms"])  # type: ignore[call-overload]
        except (TypeError, ValueError) as exc:
            msg = f"stability_ms must be an integer, got {result['stability_ms']!r}"
            raise ConfigError(msg) from exc
    for name in ("src_alias", "layout_filename", "error_filename"):
        if name in result:
            result[name] = str(result[name])
    if "nest_directories" in result:
        result["nest_directories"] = bool(result["nest_directories"])
    return result
