"""
Error types for prototags scanning, configuration and kind selection.

The scanner itself never raises for malformed schema text; these errors
cover the layer around it (reading inputs, loading configuration and
interpreting user supplied options).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ProtoTagsError(Exception):
    """Base exception for all prototags errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class SourceReadError(ProtoTagsError):
    """
    Raised when an input cannot be turned into source text.

    Examples:
    - Path does not exist
    - Permission denied
    - Bytes are not valid in the requested encoding
    """

    pass


class KindSelectionError(ProtoTagsError):
    """Raised when a kind selection string names an unknown kind letter."""

    pass


class ConfigError(ProtoTagsError):
    """
    Raised when a configuration file cannot be used.

    Examples:
    - Invalid TOML
    - Wrong value type for a known key
    - Unknown output format
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location attached to an error.

    Attributes:
        file: Path to the file the error refers to
        line: Line number (1-indexed), if known
        column: Column number (1-indexed), if known
    """

    file: Path
    line: int | None = None
    column: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable location.

        Returns:
            String like "schema.proto:10:5", "schema.proto:10" or "schema.proto"
        """
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return location


def make_source_error(
    message: str,
    file: Path,
    line: int | None = None,
    column: int | None = None,
) -> SourceReadError:
    """
    Helper to create a SourceReadError with context.

    Args:
        message: Error description
        file: Path of the offending input
        line: Optional line number
        column: Optional column number

    Returns:
        SourceReadError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column)
    return SourceReadError(message, context)


def make_config_error(message: str, file: Path | None = None) -> ConfigError:
    """
    Helper to create a ConfigError with optional file context.

    Args:
        message: Error description
        file: Optional configuration file path

    Returns:
        ConfigError with context if a file was given
    """
    if file is not None:
        return ConfigError(message, ErrorContext(file=file))
    return ConfigError(message)
