"""設定管理モジュール"""

from enzyme_markup.config.app import AppConfig, load_app_config
from enzyme_markup.config.config import Config, load_config
from enzyme_markup.config.env import EnvConfig, load_env_config

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "load_app_config",
    "load_config",
    "load_env_config",
]
