"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ATTRACTIONS_API_BASE_URL: str = Field(
        default="https://touristeproject.onrender.com/api/public"
    )
    ATTRACTIONS_API_TIMEOUT_SECONDS: float = Field(default=15.0)
    MAX_REPLY_ITEMS: int = Field(default=10)

    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)

    WEBHOOK_LOG_LEVEL: str = Field(default="info")
    WEBHOOK_LOG_DIR: Path | None = Field(default=None)


settings = Settings()
config = settings  # Alias matching the ``config`` import used by routes


__all__ = ["Settings", "settings", "config"]
