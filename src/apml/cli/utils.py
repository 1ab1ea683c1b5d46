"""
APML CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform

import typer


def get_version() -> str:
    """Get the APML package version."""
    from apml import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        from apml.stacks import list_backends

        typer.echo(f"APML {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        typer.echo(f"Stacks: {', '.join(list_backends())}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library log records to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
