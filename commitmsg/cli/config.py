"""CLI commands for global configuration management."""

import typer

from commitmsg import global_config
from commitmsg.cli.utils import exit_with_error
from commitmsg.git import get_comment_char as get_git_comment_char

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitmsg configuration in ~/.commitmsg/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration and the effective comment character."""
    try:
        config = global_config.load_global_config()
        effective = global_config.resolve_comment_char()
    except global_config.GlobalConfigError as e:
        exit_with_error(e)

    typer.echo("Current commitmsg configuration (~/.commitmsg/config.yaml):")
    typer.echo()
    typer.echo(f"  Comment Character: {config.get('comment_char', 'not set')}")

    git_char = get_git_comment_char()
    if git_char:
        typer.echo(f"  Git core.commentChar: {git_char}")

    typer.echo()
    typer.echo(f"Effective comment character: {effective}")


@config_app.command("set-comment-char")
def config_set_comment_char(
    char: str = typer.Argument(..., help="Single character that starts comment lines"),
) -> None:
    """Set the default comment character."""
    try:
        global_config.set_comment_char(char)
    except global_config.GlobalConfigError as e:
        exit_with_error(e)

    typer.echo(f"Comment character set to: {char}")
