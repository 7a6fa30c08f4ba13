"""Commit message exception classes.

Contains all exception classes for commit message parsing:
- CommitMessageError: Base exception for commit message errors
- EmptyMessageError: Raised when the subject of an empty message is requested
- MessageFileNotFoundError: Raised when a commit message file does not exist
- InvalidCommentCharacterError: Raised when the comment character is not a single character
"""


class CommitMessageError(Exception):
    """Base exception for commit message errors."""

    pass


class EmptyMessageError(CommitMessageError):
    """Raised when the message has no content lines to take a subject from."""

    pass


class MessageFileNotFoundError(CommitMessageError, FileNotFoundError):
    """Raised when the commit message file does not exist."""

    pass


class InvalidCommentCharacterError(CommitMessageError, ValueError):
    """Raised when the comment character is not a single character."""

    pass
