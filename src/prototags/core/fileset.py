from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path

from .errors import SourceReadError, make_source_error

DEFAULT_EXTENSIONS = (".proto",)


@dataclass
class FileSet:
    """Schema files found under the given paths, and the paths that were missing."""

    files: list[Path] = field(default_factory=list)
    missing: list[SourceReadError] = field(default_factory=list)


def _is_excluded(path: Path, root: Path, exclude: Sequence[str]) -> bool:
    try:
        rel = path.relative_to(root).as_posix()
    except ValueError:
        rel = path.as_posix()
    return any(fnmatch(rel, pattern) or fnmatch(path.name, pattern) for pattern in exclude)


def collect_proto_files(
    paths: Iterable[Path],
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    exclude: Sequence[str] = (),
) -> FileSet:
    """
    Expand files and directories into the schema files to scan.

    Files named explicitly are kept whatever their suffix; directories are
    searched recursively for files with one of ``extensions``. A path that
    does not exist is recorded in ``FileSet.missing`` and the remaining
    paths are still expanded.
    """
    suffixes = {ext if ext.startswith(".") else f".{ext}" for ext in extensions}
    found: set[Path] = set()
    missing: list[SourceReadError] = []
    for base in paths:
        if not base.exists():
            missing.append(make_source_error("No such file or directory", base))
        elif base.is_dir():
            for p in base.rglob("*"):
                if p.is_file() and p.suffix in suffixes and not _is_excluded(p, base, exclude):
                    found.add(p)
        elif not _is_excluded(base, base.parent, exclude):
            found.add(base)
    return FileSet(files=sorted(found), missing=missing)

