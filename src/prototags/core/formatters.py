"""
Output formats for scanned tags.

- ctags: an extended-format ``tags`` file usable by vi/emacs style tools
- json: a list of tag objects
- table: a rich table for terminals
"""

import json
from collections.abc import Sequence
from enum import Enum

from rich.console import Console
from rich.table import Table

from .._version import get_version
from .kinds import KIND_DEFINITIONS, KindSelection
from .tags import Tag

PROGRAM_NAME = "prototags"


class OutputFormat(str, Enum):
    """Supported output formats."""

    CTAGS = "ctags"
    JSON = "json"
    TABLE = "table"


def _file_field(tag: Tag) -> str:
    return tag.file.as_posix() if tag.file is not None else "-"


def _sort_key(tag: Tag) -> tuple[str, str, int]:
    return (tag.name, _file_field(tag), tag.line)


def format_ctags_line(tag: Tag) -> str:
    """One ``name<TAB>file<TAB>line;"<TAB>letter`` entry."""
    return f'{tag.name}\t{_file_field(tag)}\t{tag.line};"\t{tag.letter}'


def format_ctags(tags: Sequence[Tag], sort: bool = True) -> str:
    """
    Render tags as a ctags file, pseudo-tag header included.

    Args:
        tags: Tags in emission order
        sort: Sort entries by name (then file and line); otherwise keep
            emission order

    Returns:
        File contents ending with a newline
    """
    header = [
        "!_TAG_FILE_FORMAT\t2\t/extended format; --format=1 will not append ;\" to lines/",
        f"!_TAG_FILE_SORTED\t{1 if sort else 0}\t/0=unsorted, 1=sorted, 2=foldcase/",
        f"!_TAG_PROGRAM_NAME\t{PROGRAM_NAME}\t//",
        f"!_TAG_PROGRAM_VERSION\t{get_version()}\t//",
    ]
    ordered = sorted(tags, key=_sort_key) if sort else list(tags)
    lines = header + [format_ctags_line(tag) for tag in ordered]
    return "\n".join(lines) + "\n"


def format_json(tags: Sequence[Tag]) -> str:
    """Render tags as an indented JSON list."""
    return json.dumps([tag.to_dict() for tag in tags], indent=2) + "\n"


def build_table(tags: Sequence[Tag]) -> Table:
    table = Table(title=f"{len(tags)} tags")
    table.add_column("Name", style="bold")
    table.add_column("Kind", style="cyan")
    table.add_column("File")
    table.add_column("Line", justify="right")
    for tag in tags:
        table.add_row(tag.name, tag.kind_name, _file_field(tag), str(tag.line))
    return table


def render_table(tags: Sequence[Tag], console: Console) -> None:
    """Print tags as a rich table."""
    console.print(build_table(tags))


def format_kinds(selection: KindSelection | None = None) -> str:
    """
    List the kind table the way ``ctags --list-kinds`` does.

    Kinds not enabled in ``selection`` are marked ``[off]``.
    """
    if selection is None:
        selection = KindSelection.default()
    lines = []
    for definition in KIND_DEFINITIONS:
        line = f"{definition.letter}  {definition.description}"
        if not selection.is_enabled(definition.kind):
            line += " [off]"
        lines.append(line)
    return "\n".join(lines) + "\n"
