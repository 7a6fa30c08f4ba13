"""Commit message parsing package for commitmsg.

This package provides the parsed commit message value object with:
- exceptions: CommitMessageError, EmptyMessageError, MessageFileNotFoundError,
              InvalidCommentCharacterError
- parsing: split_lines, is_comment_line, filter_content_lines, LINE_SEPARATOR
- models: CommitMessage
- files: FileSource, LocalFileSource, create_from_file
- summary: MessageSummary
"""

# Exceptions
from commitmsg.message.exceptions import (
    CommitMessageError,
    EmptyMessageError,
    MessageFileNotFoundError,
    InvalidCommentCharacterError,
)

# Parsing helpers
from commitmsg.message.parsing import (
    LINE_SEPARATOR,
    split_lines,
    is_comment_line,
    filter_content_lines,
)

# Value object
from commitmsg.message.models import CommitMessage

# File factory
from commitmsg.message.files import (
    FileSource,
    LocalFileSource,
    create_from_file,
)

# Output model
from commitmsg.message.summary import MessageSummary


__all__ = [
    # Exceptions
    "CommitMessageError",
    "EmptyMessageError",
    "MessageFileNotFoundError",
    "InvalidCommentCharacterError",
    # Parsing
    "LINE_SEPARATOR",
    "split_lines",
    "is_comment_line",
    "filter_content_lines",
    # Models
    "CommitMessage",
    # Files
    "FileSource",
    "LocalFileSource",
    "create_from_file",
    # Summary
    "MessageSummary",
]
