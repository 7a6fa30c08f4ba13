"""Reading commit messages from files.

Contains:
- FileSource: Protocol for the file access the factory needs
- LocalFileSource: FileSource backed by the local file system
- create_from_file: Build a CommitMessage from a message file
"""

from pathlib import Path
from typing import Optional, Protocol, Union

from commitmsg.message.exceptions import MessageFileNotFoundError
from commitmsg.message.models import CommitMessage

PathLike = Union[str, Path]


class FileSource(Protocol):
    """File access used by create_from_file."""

    def exists(self, path: PathLike) -> bool:
        ...

    def read_all(self, path: PathLike) -> str:
        ...


class LocalFileSource:
    """Read message files from the local file system."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def read_all(self, path: PathLike) -> str:
        """Read the whole file as UTF-8.

        Newlines are not translated, so the text matches the file verbatim.

        Raises:
            OSError: If the file cannot be read.
        """
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()


def create_from_file(
    path: PathLike,
    comment_character: Optional[str] = "#",
    files: Optional[FileSource] = None,
) -> CommitMessage:
    """Create a CommitMessage from a message file.

    Args:
        path: Path to the message file (e.g. .git/COMMIT_EDITMSG).
        comment_character: Comment character, "#" by default since files
            handed to commit-msg hooks may still contain comments.
        files: File access to use. Defaults to the local file system.

    Returns:
        The parsed commit message.

    Raises:
        MessageFileNotFoundError: If no file exists at path. Nothing is read.
        OSError: If the file exists but cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8 (e.g. written
            under a latin-1 i18n.commitEncoding).
    """
    files = files or LocalFileSource()

    if not files.exists(path):
        raise MessageFileNotFoundError(f"Commit message file not found: {path}")

    return CommitMessage(files.read_all(path), comment_character)
