"""CLI entry point for commitmsg.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitmsg.cli.config import config_app
from commitmsg.cli.main import main_command
from commitmsg.cli.show import (
    body_command,
    check_empty_command,
    show_command,
    subject_command,
)

# Main application
app = typer.Typer(
    name="commitmsg",
    help="commitmsg: parse and inspect git commit messages",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("show")(show_command)
app.command("subject")(subject_command)
app.command("body")(body_command)
app.command("check-empty")(check_empty_command)

app.callback()(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "show_command",
    "subject_command",
    "body_command",
    "check_empty_command",
]
