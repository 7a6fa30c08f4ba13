"""CLI commands for inspecting a commit message."""

from pathlib import Path
from typing import Optional

import typer

from commitmsg.cli.utils import MESSAGE_LOAD_ERRORS, exit_with_error, load_message
from commitmsg.message import MessageSummary

_PATH_ARGUMENT = typer.Argument(
    None,
    help="Commit message file (default: .git/COMMIT_EDITMSG of the current repo)",
)
_COMMENT_CHAR_OPTION = typer.Option(
    None,
    "--comment-char",
    "-c",
    help="Comment character (default: git core.commentChar, then config, then '#')",
)
_NO_COMMENTS_OPTION = typer.Option(
    False,
    "--no-comments",
    help="Treat every line as content",
)


def show_command(
    path: Optional[Path] = _PATH_ARGUMENT,
    rev: Optional[str] = typer.Option(
        None,
        "--rev",
        "-r",
        help="Read the message stored in this commit instead of a file",
    ),
    comment_char: Optional[str] = _COMMENT_CHAR_OPTION,
    no_comments: bool = _NO_COMMENTS_OPTION,
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the summary as JSON",
    ),
) -> None:
    """Show the subject, body and line counts of a commit message."""
    try:
        message = load_message(path, rev, comment_char, no_comments)
    except MESSAGE_LOAD_ERRORS as e:
        exit_with_error(e)

    summary = MessageSummary.from_message(message)

    if as_json:
        typer.echo(summary.model_dump_json(indent=2))
        return

    if summary.is_empty:
        typer.echo("Commit message is empty.")
        return

    typer.echo(f"Subject: {summary.subject}")
    typer.echo(
        f"Lines: {summary.line_count} "
        f"({summary.content_line_count} content, "
        f"{summary.line_count - summary.content_line_count} comment)"
    )
    if summary.body_lines:
        typer.echo()
        typer.echo("Body:")
        for line in summary.body_lines:
            typer.echo(f"  {line}")


def subject_command(
    path: Optional[Path] = _PATH_ARGUMENT,
    comment_char: Optional[str] = _COMMENT_CHAR_OPTION,
    no_comments: bool = _NO_COMMENTS_OPTION,
) -> None:
    """Print the subject line of a commit message."""
    try:
        message = load_message(path, None, comment_char, no_comments)
        typer.echo(message.subject)
    except MESSAGE_LOAD_ERRORS as e:
        exit_with_error(e)


def body_command(
    path: Optional[Path] = _PATH_ARGUMENT,
    comment_char: Optional[str] = _COMMENT_CHAR_OPTION,
    no_comments: bool = _NO_COMMENTS_OPTION,
) -> None:
    """Print the body of a commit message (third content line onward)."""
    try:
        message = load_message(path, None, comment_char, no_comments)
    except MESSAGE_LOAD_ERRORS as e:
        exit_with_error(e)

    if message.body:
        typer.echo(message.body)


def check_empty_command(
    path: Optional[Path] = _PATH_ARGUMENT,
    comment_char: Optional[str] = _COMMENT_CHAR_OPTION,
    no_comments: bool = _NO_COMMENTS_OPTION,
) -> None:
    """Exit with status 1 if the message has no content besides comments.

    Meant for commit-msg hooks: `commitmsg check-empty "$1"`.
    """
    try:
        message = load_message(path, None, comment_char, no_comments)
    except MESSAGE_LOAD_ERRORS as e:
        exit_with_error(e)

    if message.is_empty():
        typer.echo("Aborting commit due to empty commit message.", err=True)
        raise typer.Exit(1)
