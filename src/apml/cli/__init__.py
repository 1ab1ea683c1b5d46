"""
APML CLI Package.

- project.py: compile, validate, inspect, build and stacks commands
- utils.py: Shared utilities
"""

import typer

from apml.cli.project import (
    build_command,
    compile_command,
    inspect_command,
    stacks_command,
    validate_command,
)
from apml.cli.utils import configure_logging, get_version, version_callback

app = typer.Typer(
    help="""APML – application description compiler

Commands:
  • compile: one .apml file -> generated code
  • validate, inspect: check and explore a source file
  • build: every source listed in apml.toml
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """APML CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="compile")(compile_command)
app.command(name="validate")(validate_command)
app.command(name="inspect")(inspect_command)
app.command(name="build")(build_command)
app.command(name="stacks")(stacks_command)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()

__all__ = ["app", "main", "get_version", "version_callback"]
