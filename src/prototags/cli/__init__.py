"""
prototags CLI package.

- scan.py: scan and kinds commands
- utils.py: shared utilities (version, logging, error exits)
"""

import typer

from prototags.cli.scan import kinds_command, scan_command
from prototags.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="prototags - generate ctags style tags for Protocol Buffers schema files",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """prototags CLI main callback for global options.

    ``--verbose`` is also accepted after ``scan``.
    """
    configure_logging(verbose)


app.command(name="scan")(scan_command)
app.command(name="kinds")(kinds_command)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


__all__ = ["app", "main"]
