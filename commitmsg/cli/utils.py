"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import NoReturn, Optional

import typer

from commitmsg.git import GitError, get_commit_message, get_commit_msg_file
from commitmsg.global_config import GlobalConfigError, resolve_comment_char
from commitmsg.message import CommitMessage, CommitMessageError, create_from_file

# Errors raised while locating, reading or decoding a message
MESSAGE_LOAD_ERRORS = (
    CommitMessageError,
    GitError,
    GlobalConfigError,
    OSError,
    UnicodeDecodeError,
)


def load_message(
    path: Optional[Path] = None,
    rev: Optional[str] = None,
    comment_char: Optional[str] = None,
    no_comments: bool = False,
) -> CommitMessage:
    """Load the commit message a command operates on.

    Args:
        path: Message file. Defaults to the repository's COMMIT_EDITMSG.
        rev: Load the message stored in this commit instead of a file.
        comment_char: Explicit comment character for file messages.
        no_comments: Keep comment lines as content.

    Returns:
        The parsed commit message.
    """
    if rev is not None:
        if path is not None:
            raise typer.BadParameter("Pass either a message file or --rev, not both.")
        return get_commit_message(rev)

    comment_character = resolve_comment_char(comment_char, no_comments)
    if path is None:
        path = get_commit_msg_file()
    return create_from_file(path, comment_character)


def exit_with_error(error: Exception) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)
