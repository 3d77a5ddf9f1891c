"""
Configuration settings for moedeck.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOEDECK_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Moedict (phonetic lookup)
    # ========================================
    moedict_base_url: str = Field(
        default="https://www.moedict.tw",
        description="Base URL of the Moedict dictionary API",
    )
    moedict_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout for a single character lookup",
    )
    reading_cache_max_size: int | None = Field(
        default=None,
        ge=1,
        description="Maximum cached characters (None = unbounded)",
    )

    # ========================================
    # Scheduling
    # ========================================
    default_algorithm: Literal["simple", "sm2", "fsrs"] = Field(
        default="simple",
        description="Spaced repetition algorithm used when none is requested",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
