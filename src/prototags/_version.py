"""Version lookup for prototags."""

import tomllib
from importlib import metadata
from pathlib import Path

DIST_NAME = "prototags"
UNKNOWN_VERSION = "0.0.0"

# src/prototags/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _pyproject_version(pyproject: Path) -> str | None:
    if not pyproject.is_file():
        return None
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return None
    project = data.get("project", {})
    if project.get("name") != DIST_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    """
    Installed distribution version, else the one in a source checkout's
    pyproject.toml, else ``UNKNOWN_VERSION``.
    """
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        pass
    return _pyproject_version(_PYPROJECT) or UNKNOWN_VERSION
