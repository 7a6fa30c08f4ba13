"""Tests for commitmsg.global_config module."""

from pathlib import Path

import pytest
import yaml

from commitmsg.global_config import (
    DEFAULT_COMMENT_CHAR,
    GlobalConfigError,
    ensure_global_config_dir,
    get_comment_char,
    get_config_file_path,
    get_global_config_dir,
    load_global_config,
    resolve_comment_char,
    save_global_config,
    set_comment_char,
)


class TestGlobalConfigDir:
    """Tests for global config directory functions."""

    def test_get_global_config_dir_returns_path(self):
        """Test that get_global_config_dir returns a Path."""
        result = get_global_config_dir()
        assert isinstance(result, Path)
        assert ".commitmsg" in str(result)

    def test_ensure_global_config_dir_creates_directory(self, isolated_config):
        """Test that ensure_global_config_dir creates the directory."""
        result = ensure_global_config_dir()

        assert isolated_config.exists()
        assert result == isolated_config

    def test_get_config_file_path_returns_yaml(self, isolated_config):
        """Test that config file path ends with config.yaml."""
        result = get_config_file_path()

        assert result == isolated_config / "config.yaml"


class TestLoadSaveGlobalConfig:
    """Tests for loading and saving global config."""

    def test_load_returns_empty_if_missing(self, isolated_config):
        """Test that load returns empty dict if file doesn't exist."""
        assert load_global_config() == {}

    def test_save_and_load(self, isolated_config):
        """Test saving then loading config."""
        save_global_config({"comment_char": ";"})

        assert load_global_config() == {"comment_char": ";"}
        with open(isolated_config / "config.yaml") as f:
            assert yaml.safe_load(f) == {"comment_char": ";"}

    def test_load_empty_file(self, isolated_config):
        """Test that an empty file loads as an empty dict."""
        isolated_config.mkdir()
        (isolated_config / "config.yaml").write_text("")

        assert load_global_config() == {}

    def test_load_invalid_yaml_raises(self, isolated_config):
        """Test that malformed YAML raises GlobalConfigError."""
        isolated_config.mkdir()
        (isolated_config / "config.yaml").write_text("comment_char: [unclosed")

        with pytest.raises(GlobalConfigError):
            load_global_config()

    def test_load_non_mapping_raises(self, isolated_config):
        """Test that a YAML list is rejected."""
        isolated_config.mkdir()
        (isolated_config / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(GlobalConfigError):
            load_global_config()


class TestCommentCharConfig:
    """Tests for the comment_char setting."""

    def test_not_set(self, isolated_config):
        """Test that an unset comment character is None."""
        assert get_comment_char() is None

    def test_set_and_get(self, isolated_config):
        """Test setting then reading the comment character."""
        set_comment_char(";")

        assert get_comment_char() == ";"

    def test_set_keeps_other_keys(self, isolated_config):
        """Test that setting the character keeps unrelated keys."""
        save_global_config({"other": 1})

        set_comment_char("%")

        assert load_global_config() == {"other": 1, "comment_char": "%"}

    @pytest.mark.parametrize("value", ["", "//"])
    def test_set_rejects_invalid(self, isolated_config, value):
        """Test that only single characters can be set."""
        with pytest.raises(GlobalConfigError):
            set_comment_char(value)

    def test_invalid_stored_value_raises(self, isolated_config):
        """Test that a hand-edited invalid value is reported."""
        save_global_config({"comment_char": 42})

        with pytest.raises(GlobalConfigError):
            get_comment_char()


class TestResolveCommentChar:
    """Tests for resolve_comment_char function."""

    def test_default(self, isolated_config):
        """Test the fallback when nothing is configured."""
        assert resolve_comment_char() == DEFAULT_COMMENT_CHAR == "#"

    def test_no_comments_wins(self, isolated_config):
        """Test that no_comments disables comments even with an override."""
        assert resolve_comment_char(";", no_comments=True) is None

    def test_override_wins(self, isolated_config, mocker):
        """Test that an explicit override beats git and global config."""
        mocker.patch("commitmsg.global_config.get_git_comment_char", return_value="%")
        set_comment_char("!")

        assert resolve_comment_char(";") == ";"

    def test_git_beats_global_config(self, isolated_config, mocker):
        """Test that git core.commentChar beats the global config."""
        mocker.patch("commitmsg.global_config.get_git_comment_char", return_value="%")
        set_comment_char("!")

        assert resolve_comment_char() == "%"

    def test_global_config_beats_default(self, isolated_config):
        """Test that the global config beats the built-in default."""
        set_comment_char("!")

        assert resolve_comment_char() == "!"
