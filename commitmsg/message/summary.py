"""Serialisable summary of a parsed commit message.

Contains Pydantic models for message output:
- MessageSummary: Subject, body and line counts of a CommitMessage
"""

from typing import Optional

from pydantic import BaseModel

from commitmsg.message.models import CommitMessage


class MessageSummary(BaseModel):
    """Summary of a commit message, as printed by `commitmsg show --json`."""

    subject: Optional[str] = None  # None when the message is empty
    body: str = ""
    body_lines: list[str] = []
    line_count: int = 0  # Raw lines, comments included
    content_line_count: int = 0
    comment_character: Optional[str] = None
    is_empty: bool = True

    @classmethod
    def from_message(cls, message: CommitMessage) -> "MessageSummary":
        """Build a summary from a parsed message."""
        empty = message.is_empty()
        return cls(
            subject=None if empty else message.subject,
            body=message.body,
            body_lines=list(message.body_lines),
            line_count=message.line_count,
            content_line_count=message.content_line_count,
            comment_character=message.comment_character,
            is_empty=empty,
        )
