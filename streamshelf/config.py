"""Application configuration models."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="StreamShelf", alias="APP_NAME")

    database_url: str = Field(
        default="sqlite+aiosqlite:///./streamshelf.db", alias="DATABASE_URL"
    )
    storage_backend: Literal["database", "memory"] = Field(
        default="database", alias="STORAGE_BACKEND"
    )
    catalog_path: Path | None = Field(default=None, alias="CATALOG_PATH")

    search_delay_seconds: float = Field(
        default=0.3, alias="SEARCH_DELAY", ge=0, le=5
    )
    search_history_limit: int = Field(
        default=20, alias="SEARCH_HISTORY_LIMIT", ge=1, le=200
    )
    recent_search_limit: int = Field(
        default=5, alias="RECENT_SEARCH_LIMIT", ge=1
    )

    search_history_key: str = Field(
        default="search_history", alias="SEARCH_HISTORY_KEY", min_length=1
    )
    my_list_key: str = Field(
        default="my_list_items", alias="MY_LIST_KEY", min_length=1
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("catalog_path", mode="before")
    @classmethod
    def _blank_catalog_path(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        """Accept level names case-insensitively."""

        level = str(value or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def _check_history_limits(self) -> "Settings":
        if self.recent_search_limit > self.search_history_limit:
            raise ValueError(
                "RECENT_SEARCH_LIMIT must not exceed SEARCH_HISTORY_LIMIT"
            )
        return self

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
