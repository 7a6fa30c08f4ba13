"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def isolated_config(mocker, temp_dir):
    """Point the global config at a temp dir and ignore git's core.commentChar."""
    config_dir = temp_dir / ".commitmsg"
    mocker.patch("commitmsg.global_config._CONFIG_DIR", config_dir)
    mocker.patch("commitmsg.global_config.get_git_comment_char", return_value=None)
    return config_dir


@pytest.fixture
def sample_hook_message():
    """Commit message as git hands it to a commit-msg hook."""
    return """Add parser for commit messages

Split raw text into lines and drop comment lines.
Expose subject and body accessors.
# Please enter the commit message for your changes. Lines starting
# with '#' will be ignored, and an empty message aborts the commit.
#
# On branch main
# Changes to be committed:
#\tnew file:   commitmsg/message/models.py
#
"""
