"""
Scan and kind listing commands.
"""

from pathlib import Path

import typer
from rich.console import Console

from prototags.cli.utils import configure_logging, fail
from prototags.core.errors import ConfigError, KindSelectionError
from prototags.core.fileset import collect_proto_files
from prototags.core.formatters import (
    OutputFormat,
    format_ctags,
    format_json,
    format_kinds,
    render_table,
)
from prototags.core.kinds import KindSelection
from prototags.core.manifest import resolve_config
from prototags.core.scanner import scan_paths
from prototags.core.tags import Tag

# typer's own exit code for usage errors
USAGE_ERROR = 2


def _write_output(tags: list[Tag], fmt: OutputFormat, sort: bool, output: Path | None) -> None:
    if fmt == OutputFormat.TABLE:
        if output is None:
            render_table(tags, Console())
        else:
            with output.open("w", encoding="utf-8") as fh:
                render_table(tags, Console(file=fh, width=120))
        return

    if fmt == OutputFormat.JSON:
        text = format_json(tags)
    else:
        text = format_ctags(tags, sort=sort)

    if output is None:
        typer.echo(text, nl=False)
    else:
        output.write_text(text, encoding="utf-8")


def scan_command(
    paths: list[Path] = typer.Argument(..., help=".proto files or directories to scan"),
    kinds: str | None = typer.Option(
        None, "--kinds", "-k", help="Kinds to emit, ctags style (e.g. '+r', '-f', 'pmg')"
    ),
    output_format: OutputFormat | None = typer.Option(
        None, "--format", "-f", help="Output format (default: ctags)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout"
    ),
    unsorted: bool = typer.Option(
        False, "--unsorted", help="Keep ctags entries in document order instead of sorting"
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="prototags.toml or pyproject.toml to read settings from"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """
    Scan .proto files and write their tags.

    Settings from prototags.toml (or [tool.prototags] in pyproject.toml) in
    the current directory apply unless overridden here. Missing or
    unreadable inputs are reported after the tags of the other files are
    written, and the exit code is 1.
    """
    if verbose:
        configure_logging(True)

    try:
        settings = resolve_config(config)
        selection = KindSelection.from_flags(kinds if kinds is not None else settings.kinds)
    except (ConfigError, KindSelectionError) as e:
        raise fail(e, code=USAGE_ERROR)

    fmt = output_format or OutputFormat(settings.format)
    do_sort = settings.sort and not unsorted
    destination = output or settings.output

    fileset = collect_proto_files(paths, extensions=settings.extensions, exclude=settings.exclude)
    result = scan_paths(fileset.files, kinds=selection)
    result.errors[:0] = fileset.missing
    _write_output(result.tags, fmt, do_sort, destination)

    if not result.ok:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)


def kinds_command(
    kinds: str | None = typer.Option(
        None, "--kinds", "-k", help="Show the effect of a kinds selection"
    ),
) -> None:
    """List the tag kinds; disabled kinds are marked [off]."""
    try:
        selection = KindSelection.from_flags(kinds) if kinds else KindSelection.default()
    except KindSelectionError as e:
        raise fail(e, code=USAGE_ERROR)
    typer.echo(format_kinds(selection), nl=False)
