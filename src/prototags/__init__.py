"""
prototags - tag generator for Protocol Buffers schema files.

Scans .proto files for packages, messages, fields, enums, enum constants,
services and RPC methods and writes them as ctags compatible tags.
"""

from __future__ import annotations

from ._version import get_version
from .core import EntityKind, KindSelection, Tag, scan_file, scan_paths, scan_text
from .core.errors import ConfigError, KindSelectionError, ProtoTagsError, SourceReadError

__version__ = get_version()

__all__ = [
    "__version__",
    "EntityKind",
    "KindSelection",
    "Tag",
    "scan_text",
    "scan_file",
    "scan_paths",
    "ProtoTagsError",
    "SourceReadError",
    "KindSelectionError",
    "ConfigError",
]
