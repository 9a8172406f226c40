"""アプリケーション設定。

環境変数（ITEMREPO_ プレフィックス）と .env から読み込む。
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """itemrepo の設定。"""

    model_config = SettingsConfigDict(
        env_prefix="ITEMREPO_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    store_backend: Literal["memory", "sqlite"] = Field(
        default="sqlite",
        description="注入するItemStore実装。",
    )
    db_path: Path = Field(
        default=Path("data/items.db"),
        description="SQLite実装のデータベースファイル。",
    )
    grpc_address: str = Field(
        default="[::]:50051",
        min_length=1,
        description="gRPCサーバーの待ち受けアドレス。",
    )
    grpc_max_workers: int = Field(
        default=10,
        ge=1,
        le=64,
        description="gRPCサーバーのワーカースレッド数。",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="ルートロガーのレベル。",
    )


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンを返す。"""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """設定のログレベルでルートロガーを構成する。"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
