"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from enzyme_markup.config.app import AppConfig, load_app_config
from enzyme_markup.config.env import load_env_config


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    log_level: str = Field(default="INFO", description="ログレベル")

    # config.yaml由来
    emoji_search_limit: int = Field(default=10, ge=1, description="絵文字検索で返す最大件数")
    mention_option_limit: int = Field(default=20, ge=1, description="メンション候補の最大件数")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path | None = None) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス（Noneならアプリケーション設定はデフォルト値）

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 環境変数またはYAMLファイルの内容が不正な場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path) if config_path is not None else AppConfig()

    return Config(
        log_level=env_config.log_level,
        emoji_search_limit=app_config.emoji_search_limit,
        mention_option_limit=app_config.mention_option_limit,
    )
