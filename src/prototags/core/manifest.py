"""
Project configuration for prototags.

Settings are read from ``prototags.toml`` (a ``[prototags]`` table) or from
``pyproject.toml`` (a ``[tool.prototags]`` table). Command-line options
override anything set here.

Example prototags.toml:

    [prototags]
    kinds = "+r"
    extensions = [".proto"]
    exclude = ["third_party/*"]
    format = "ctags"
    sort = true
    output = "tags"
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import make_config_error
from .fileset import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "prototags.toml"
PYPROJECT_FILENAME = "pyproject.toml"

OUTPUT_FORMATS = ("ctags", "json", "table")


@dataclass
class ProtoTagsConfig:
    """Scan and output settings."""

    kinds: str = ""  # ctags style flags; "" means kind defaults
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = field(default_factory=list)
    format: str = "ctags"
    sort: bool = True
    output: Path | None = None  # None writes to stdout
    source: Path | None = None  # file the settings came from


def _expect(value: Any, expected: type, key: str, path: Path) -> Any:
    if not isinstance(value, expected):
        raise make_config_error(
            f"'{key}' must be of type {expected.__name__}, got {type(value).__name__}", path
        )
    return value


def _expect_str_list(value: Any, key: str, path: Path) -> list[str]:
    _expect(value, list, key, path)
    if not all(isinstance(item, str) for item in value):
        raise make_config_error(f"'{key}' must be a list of strings", path)
    return list(value)


def parse_config(data: dict[str, Any], path: Path) -> ProtoTagsConfig:
    """
    Build a config from an already-decoded settings table.

    Raises:
        ConfigError: If a known key has the wrong type or value
    """
    config = ProtoTagsConfig(source=path)

    for key in data:
        if key not in ("kinds", "extensions", "exclude", "format", "sort", "output"):
            logger.debug("Ignoring unknown config key %r in %s", key, path)

    if "kinds" in data:
        config.kinds = _expect(data["kinds"], str, "kinds", path)
    if "extensions" in data:
        config.extensions = _expect_str_list(data["extensions"], "extensions", path)
    if "exclude" in data:
        config.exclude = _expect_str_list(data["exclude"], "exclude", path)
    if "format" in data:
        fmt = _expect(data["format"], str, "format", path)
        if fmt not in OUTPUT_FORMATS:
            raise make_config_error(
                f"Unknown format {fmt!r} (expected one of: {', '.join(OUTPUT_FORMATS)})", path
            )
        config.format = fmt
    if "sort" in data:
        config.sort = _expect(data["sort"], bool, "sort", path)
    if "output" in data:
        config.output = Path(_expect(data["output"], str, "output", path))

    return config


def load_config(path: Path) -> ProtoTagsConfig:
    """
    Load settings from a prototags.toml or pyproject.toml file.

    Raises:
        ConfigError: If the file cannot be read or is invalid
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise make_config_error(f"Cannot read config: {e.strerror or e}", path)
    except tomllib.TOMLDecodeError as e:
        raise make_config_error(f"Invalid TOML: {e}", path)

    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("prototags", {})
    else:
        table = data.get("prototags", {})

    if not isinstance(table, dict):
        raise make_config_error("prototags settings must be a table", path)

    return parse_config(table, path)


def find_config(directory: Path) -> Path | None:
    """
    Locate a config file in ``directory``.

    ``prototags.toml`` wins; ``pyproject.toml`` is used only when it has a
    ``[tool.prototags]`` table.
    """
    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file():
        try:
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError):
            logger.debug("Ignoring unreadable %s", pyproject)
            return None
        if "prototags" in data.get("tool", {}):
            return pyproject

    return None


def resolve_config(explicit: Path | None = None, directory: Path | None = None) -> ProtoTagsConfig:
    """
    Load the explicit config file, or the one found in ``directory``.

    Falls back to defaults when there is none.
    """
    if explicit is not None:
        return load_config(explicit)

    found = find_config(directory or Path.cwd())
    if found is None:
        return ProtoTagsConfig()
    logger.debug("Using config from %s", found)
    return load_config(found)
