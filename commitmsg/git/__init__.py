"""Git access module for commitmsg.

This package provides the repository side of commit messages with:
- exceptions: GitError
- runner: _run_git_command, _read_git_output, get_repo_root
- message: get_comment_char, get_commit_msg_file, get_commit_message
"""

# Exceptions
from commitmsg.git.exceptions import GitError

# Runner utilities
from commitmsg.git.runner import (
    _read_git_output,
    _run_git_command,
    get_repo_root,
)

# Message sources
from commitmsg.git.message import (
    get_comment_char,
    get_commit_msg_file,
    get_commit_message,
)


__all__ = [
    # Exceptions
    "GitError",
    # Runner
    "_run_git_command",
    "_read_git_output",
    "get_repo_root",
    # Message sources
    "get_comment_char",
    "get_commit_msg_file",
    "get_commit_message",
]
