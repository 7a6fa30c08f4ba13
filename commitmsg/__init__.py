"""Commit message parsing library and CLI tool."""

from importlib.metadata import version, PackageNotFoundError

from commitmsg.message import (
    CommitMessage,
    CommitMessageError,
    EmptyMessageError,
    MessageFileNotFoundError,
    create_from_file,
)

try:
    __version__ = version("commitmsg")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

__all__ = [
    "CommitMessage",
    "CommitMessageError",
    "EmptyMessageError",
    "MessageFileNotFoundError",
    "create_from_file",
    "__version__",
]
