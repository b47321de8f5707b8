"""統合Config クラスのテスト"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from enzyme_markup.config import Config, load_config


class TestConfig:
    """Configクラスのテスト"""

    def test_config_has_default_values(self) -> None:
        """Configがデフォルト値を持つこと"""
        config = Config()
        assert config.log_level == "INFO"
        assert config.emoji_search_limit == 10
        assert config.mention_option_limit == 20


class TestLoadConfig:
    """load_config関数のテスト"""

    def test_load_config_from_env_and_yaml(self, tmp_path: Path) -> None:
        """環境変数とYAMLファイルから設定を読み込むこと"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("emoji_search_limit: 3\nmention_option_limit: 4\n")

        with patch.dict(os.environ, {"ENZYME_MARKUP_LOG_LEVEL": "DEBUG"}, clear=False):
            config = load_config(config_file)

        assert config.log_level == "DEBUG"
        assert config.emoji_search_limit == 3
        assert config.mention_option_limit == 4

    def test_load_config_without_yaml(self) -> None:
        """YAMLファイルを指定しなければデフォルト値になること"""
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()

        assert config.emoji_search_limit == 10
        assert config.mention_option_limit == 20

    def test_load_config_with_empty_yaml_fails(self, tmp_path: Path) -> None:
        """YAMLファイルが空の場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError, match="Config file is empty"):
            load_config(config_file)

    def test_load_config_fails_when_env_invalid(self, tmp_path: Path) -> None:
        """環境変数が不正な場合にエラーになること"""
        with (
            patch.dict(os.environ, {"ENZYME_MARKUP_LOG_LEVEL": "LOUD"}, clear=True),
            pytest.raises(ValueError, match="Invalid environment variable"),
        ):
            load_config()
