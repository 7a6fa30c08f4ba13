"""Commit message sources in a git repository.

Contains:
- get_comment_char: Read core.commentChar from git config
- get_commit_msg_file: Locate COMMIT_EDITMSG for the current repository
- get_commit_message: Load the message stored in a commit
"""

from pathlib import Path
from typing import Optional

from commitmsg.git.exceptions import GitError
from commitmsg.git.runner import _read_git_output, _run_git_command, get_repo_root
from commitmsg.message import CommitMessage


def get_comment_char() -> Optional[str]:
    """Get the comment character configured in git.

    Returns:
        The value of core.commentChar, or None if it is unset, "auto",
        or longer than one character.
    """
    try:
        value = _run_git_command(["config", "--get", "core.commentChar"])
    except GitError:
        # `git config --get` exits non-zero when the key is unset
        return None

    if len(value) != 1:
        return None
    return value


def get_commit_msg_file() -> Path:
    """Get the path of COMMIT_EDITMSG for the current repository.

    Returns:
        Absolute path to the commit message file. It may not exist yet.

    Raises:
        GitError: If not in a git repository.
    """
    repo_root = get_repo_root()
    git_path = Path(_run_git_command(["rev-parse", "--git-path", "COMMIT_EDITMSG"]))
    if git_path.is_absolute():
        return git_path
    return repo_root / git_path


def get_commit_message(rev: str = "HEAD") -> CommitMessage:
    """Load the message stored in a commit.

    Stored messages have no comments, so no comment character is set.

    Args:
        rev: Any revision git understands.

    Returns:
        The parsed commit message.

    Raises:
        GitError: If the revision cannot be resolved.
    """
    raw = _read_git_output(["log", "-1", "--format=%B", rev, "--"])
    # git log appends a newline after the message body
    if raw.endswith("\n"):
        raw = raw[:-1]
    return CommitMessage(raw)
