"""Root callback for the commitmsg CLI."""

import typer

from commitmsg import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitmsg {__version__}")
        raise typer.Exit()


def main_command(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """commitmsg: parse and inspect git commit messages."""
