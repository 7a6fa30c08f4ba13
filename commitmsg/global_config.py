"""Global configuration management for commitmsg.

Handles user-level configuration stored in ~/.commitmsg/:
- config.yaml: Comment character and other preferences
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from commitmsg.git import get_comment_char as get_git_comment_char

DEFAULT_COMMENT_CHAR = "#"


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".commitmsg"


def get_global_config_dir() -> Path:
    """Get the global commitmsg configuration directory.

    Returns:
        Path to ~/.commitmsg/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commitmsg/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitmsg/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.commitmsg/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.commitmsg/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _validate_comment_char(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise GlobalConfigError(f"comment_char must be a single character, got {value!r}")
    return value


def get_comment_char() -> Optional[str]:
    """Get the comment character from global config.

    Returns:
        The configured character, or None if not set.
    """
    config = load_global_config()
    value = config.get("comment_char")
    if value is None:
        return None
    return _validate_comment_char(value)


def set_comment_char(char: str) -> None:
    """Set the comment character in global config.

    Args:
        char: A single character (e.g. "#", ";").
    """
    _validate_comment_char(char)
    config = load_global_config()
    config["comment_char"] = char
    save_global_config(config)


def resolve_comment_char(
    override: Optional[str] = None,
    no_comments: bool = False,
) -> Optional[str]:
    """Work out which comment character to parse a message file with.

    Precedence: no_comments > override > git core.commentChar >
    global config > DEFAULT_COMMENT_CHAR.

    Args:
        override: Character given explicitly (e.g. on the command line).
        no_comments: Treat every line as content.

    Returns:
        The comment character, or None when comments are disabled.
    """
    if no_comments:
        return None
    if override is not None:
        return override

    git_char = get_git_comment_char()
    if git_char:
        return git_char

    return get_comment_char() or DEFAULT_COMMENT_CHAR
