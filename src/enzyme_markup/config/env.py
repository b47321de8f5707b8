"""環境変数設定"""

import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

LOG_LEVEL_ENV = "ENZYME_MARKUP_LOG_LEVEL"


class EnvConfig(BaseModel):
    """環境変数設定"""

    log_level: str = Field(default="INFO", description="ログレベル (DEBUG, INFO, WARNING, ERROR)")

    model_config = {"extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level


def load_env_config() -> EnvConfig:
    """環境変数からEnvConfigを読み込む

    Returns:
        EnvConfig: 環境変数設定

    Raises:
        ValueError: 環境変数の値が不正な場合
    """
    values: dict[str, str] = {}
    if LOG_LEVEL_ENV in os.environ:
        values["log_level"] = os.environ[LOG_LEVEL_ENV]

    try:
        return EnvConfig(**values)
    except ValidationError as e:
        msg = f"Invalid environment variable: {e}"
        raise ValueError(msg) from e
