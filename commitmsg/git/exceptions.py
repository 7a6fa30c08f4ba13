"""Git-related exception classes.

Contains:
- GitError: Raised when a git command fails or git is unavailable
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass
