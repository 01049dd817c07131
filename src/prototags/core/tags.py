"""
Tag entries produced by the scanner.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .kinds import EntityKind, get_definition


class Tag(BaseModel):
    """
    A named entity found in a schema file.

    Examples:
        - package foo;            Tag(name="foo", kind=PACKAGE, line=1)
        - optional int32 x = 1;   Tag(name="x", kind=FIELD, line=...)
    """

    name: str
    kind: EntityKind
    line: int = Field(default=0, ge=0)  # 0 when the location is unknown
    file: Path | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Tag names are non-empty runs of ASCII letters, digits and underscores."""
        if not v or not all(c == "_" or (c.isascii() and c.isalnum()) for c in v):
            raise ValueError(f"Invalid tag name {v!r}")
        return v

    @property
    def letter(self) -> str:
        return get_definition(self.kind).letter

    @property
    def kind_name(self) -> str:
        return get_definition(self.kind).name

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for JSON output."""
        return {
            "name": self.name,
            "kind": self.kind_name,
            "letter": self.letter,
            "line": self.line,
            "file": self.file.as_posix() if self.file is not None else None,
        }
