"""Line splitting and comment filtering for commit messages.

Contains:
- LINE_SEPARATOR: Separator used to join content and body lines
- split_lines: Split raw text on \\r\\n, \\r or \\n
- is_comment_line: Check whether a single line is a comment
- filter_content_lines: Drop comment lines, keeping order
"""

import re
from typing import Iterable, Optional

LINE_SEPARATOR = "\n"

# \r\n is listed first so a Windows line ending is one terminator, not two.
_LINE_TERMINATOR_RE = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> list[str]:
    """Split raw message text into lines.

    Args:
        content: The raw message text.

    Returns:
        The lines without terminators. Empty text has no lines; a trailing
        terminator produces a trailing empty line.
    """
    if not content:
        return []
    return _LINE_TERMINATOR_RE.split(content)


def is_comment_line(line: str, comment_character: Optional[str]) -> bool:
    """Check if a line is a comment.

    An empty line is never a comment, and nothing is a comment when no
    comment character is configured.
    """
    if comment_character is None or not line:
        return False
    return line[0] == comment_character


def filter_content_lines(
    raw_lines: Iterable[str],
    comment_character: Optional[str] = None,
) -> list[str]:
    """Return the lines that are not comments, in their original order.

    Args:
        raw_lines: All lines of the message.
        comment_character: The comment character, or None for none.

    Returns:
        The content lines. Comment lines are dropped whole.
    """
    return [line for line in raw_lines if not is_comment_line(line, comment_character)]
