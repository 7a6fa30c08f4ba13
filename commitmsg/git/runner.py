"""Run git and read its output.

Contains:
- _run_git: Run git and return the completed process
- _run_git_command: Run git and return its trimmed output (config values, paths)
- _read_git_output: Run git and return its output untouched (message text)
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from commitmsg.git.exceptions import GitError


def _run_git(args: list[str]) -> subprocess.CompletedProcess:
    """Run git with the given arguments, decoding output as UTF-8.

    Raises:
        GitError: If git exits non-zero or cannot be started.
    """
    try:
        return subprocess.run(
            ["git", *args],
            capture_output=True,
            encoding="utf-8",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"git {' '.join(args)} exited with status {e.returncode}: {stderr}")
    except FileNotFoundError:
        raise GitError("git executable not found; install git or add it to PATH.")


def _run_git_command(args: list[str]) -> str:
    """Run git and return stdout without surrounding whitespace."""
    return _run_git(args).stdout.strip()


def _read_git_output(args: list[str]) -> str:
    """Run git and return stdout exactly as written.

    Used for commit message text, where leading and trailing lines matter.
    """
    return _run_git(args).stdout


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Raises:
        GitError: If the working directory is not inside a work tree.
    """
    try:
        return Path(_run_git_command(["rev-parse", "--show-toplevel"]))
    except GitError:
        raise GitError("Not inside a git work tree; run from a repository or pass a message file.")
