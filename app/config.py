"""
全局配置模块：通过 pydantic-settings 读取 .env 环境变量
"""

import re
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用全局配置，从 .env 文件加载"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── 静态资源 ──
    STATIC_DIR: str = "static"  # 前端静态资源目录，挂载到 /static
    INDEX_FILE: str = "index.html"  # GET / 返回的首页文件

    # ── CORS ──
    CORS_ALLOW_ORIGIN_REGEX: str = r"https?://localhost(:\d+)?"  # 默认只放行本机前端（任意端口）
    CORS_ALLOW_CREDENTIALS: bool = True

    # ── 应用 ──
    ENV: str = "development"  # development | production
    APP_NAME: str = "todo-service"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    @field_validator("CORS_ALLOW_ORIGIN_REGEX")
    @classmethod
    def _check_origin_regex(cls, v: str) -> str:
        """启动时校验正则，写错了直接拒绝启动"""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"CORS_ALLOW_ORIGIN_REGEX 不是合法正则: {e}") from e
        return v


@lru_cache
def get_settings() -> Settings:
    """单例获取配置（带缓存）"""
    return Settings()
