"""Commit message value object.

Contains:
- CommitMessage: Immutable, parsed view of a raw commit message
"""

from dataclasses import dataclass, field
from typing import Optional, Union
from pathlib import Path

from commitmsg.message.exceptions import EmptyMessageError, InvalidCommentCharacterError
from commitmsg.message.parsing import LINE_SEPARATOR, filter_content_lines, split_lines


@dataclass(frozen=True)
class CommitMessage:
    """A parsed commit message.

    The raw text is split into lines and filtered once, at construction.
    Every accessor returns a value computed then.

    Attributes:
        raw_content: The message exactly as supplied, comments included.
        comment_character: Character marking comment lines. None when the
            message cannot contain comments (e.g. a message stored in the
            repository); usually "#" for text coming from a commit-msg hook.
        raw_lines: All lines, comments included.
        raw_line_count: Number of raw lines.
        content_lines: Lines that are not comments.
        content_line_count: Number of content lines.
        content: Content lines joined with LINE_SEPARATOR.
    """

    raw_content: str
    comment_character: Optional[str] = None

    raw_lines: tuple[str, ...] = field(init=False, repr=False, compare=False)
    raw_line_count: int = field(init=False, repr=False, compare=False)
    content_lines: tuple[str, ...] = field(init=False, repr=False, compare=False)
    content_line_count: int = field(init=False, repr=False, compare=False)
    content: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.comment_character is not None and (
            not isinstance(self.comment_character, str) or len(self.comment_character) != 1
        ):
            raise InvalidCommentCharacterError(
                f"Comment character must be a single character, got {self.comment_character!r}"
            )

        raw_lines = tuple(split_lines(self.raw_content))
        content_lines = tuple(filter_content_lines(raw_lines, self.comment_character))

        # Frozen dataclass: derived fields are set once, here.
        object.__setattr__(self, "raw_lines", raw_lines)
        object.__setattr__(self, "raw_line_count", len(raw_lines))
        object.__setattr__(self, "content_lines", content_lines)
        object.__setattr__(self, "content_line_count", len(content_lines))
        object.__setattr__(self, "content", LINE_SEPARATOR.join(content_lines))

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        comment_character: Optional[str] = "#",
    ) -> "CommitMessage":
        """Create a CommitMessage from a file on disk.

        See commitmsg.message.files.create_from_file.
        """
        from commitmsg.message.files import create_from_file

        return create_from_file(path, comment_character)

    def is_empty(self) -> bool:
        """Check if the message has no content once comments are removed."""
        return self.content == ""

    @property
    def lines(self) -> tuple[str, ...]:
        """All lines, comments included."""
        return self.raw_lines

    @property
    def line_count(self) -> int:
        """Number of lines, comments included."""
        return self.raw_line_count

    def get_line(self, index: int) -> str:
        """Get a raw line by index.

        Args:
            index: Zero-based line index.

        Returns:
            The line, or an empty string if there is no line at that index.
            Negative indexes never count from the end.
        """
        if 0 <= index < self.raw_line_count:
            return self.raw_lines[index]
        return ""

    @property
    def subject(self) -> str:
        """The first content line.

        Raises:
            EmptyMessageError: If the message has no content lines.
        """
        if not self.content_lines:
            raise EmptyMessageError("Commit message has no subject: it contains no content lines")
        return self.content_lines[0]

    @property
    def body_lines(self) -> tuple[str, ...]:
        """Content lines from the third onward.

        The subject and the line after it (normally blank) are skipped.
        """
        if self.content_line_count < 3:
            return ()
        return self.content_lines[2:]

    @property
    def body(self) -> str:
        """Body lines joined with LINE_SEPARATOR."""
        return LINE_SEPARATOR.join(self.body_lines)
