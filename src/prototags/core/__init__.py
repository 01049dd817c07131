"""Core prototags functionality: character source, lexer, parser, kinds, output."""

from .errors import (
    ConfigError,
    ErrorContext,
    KindSelectionError,
    ProtoTagsError,
    SourceReadError,
)
from .kinds import KIND_DEFINITIONS, EntityKind, KindDefinition, KindSelection
from .parser import ProtobufScanner, StatementParser
from .scanner import ScanResult, scan_file, scan_paths, scan_text
from .sink import CallbackSink, ListSink, TagSink
from .tags import Tag

__all__ = [
    "ProtoTagsError",
    "SourceReadError",
    "KindSelectionError",
    "ConfigError",
    "ErrorContext",
    "EntityKind",
    "KindDefinition",
    "KindSelection",
    "KIND_DEFINITIONS",
    "ProtobufScanner",
    "StatementParser",
    "ScanResult",
    "scan_text",
    "scan_file",
    "scan_paths",
    "TagSink",
    "ListSink",
    "CallbackSink",
    "Tag",
]
