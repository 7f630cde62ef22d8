"""Lightweight configuration for the Age of Wars tools."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ageofwars.domain.rules_config import DEFAULT_BATTLE_SIZE, MAX_BATTLE_SIZE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="AGEOFWARS_", env_file=".env", env_file_encoding="utf-8"
    )

    battle_size: int = Field(
        default=DEFAULT_BATTLE_SIZE,
        description="Number of platoons each army must field in a battle",
        ge=1,
        le=MAX_BATTLE_SIZE,
    )
    log_level: LogLevel = Field(default="WARNING", description="Root log level for the CLI")
    host: str = Field(default="127.0.0.1", description="Interface the API server binds to")
    port: int = Field(
        default=8000, description="TCP port the API server listens on", ge=1, le=65535
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
