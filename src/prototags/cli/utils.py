"""
prototags CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform

import typer

from prototags._version import get_version
from prototags.core.errors import ProtoTagsError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"prototags version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()}"
            f" on {platform.system()} {platform.machine()}"
        )
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist, so set the level directly
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


def fail(error: ProtoTagsError | str, code: int = 1) -> typer.Exit:
    """Print an error to stderr and return the Exit to raise."""
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(code=code)
