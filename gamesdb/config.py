"""
Configuration management for the games catalog tools.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Catalog pipeline settings."""

    model_config = SettingsConfigDict(
        env_prefix="GAMESDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Near-duplicate scan
    progress_interval: int = Field(default=1000, ge=1)  # subjects between progress lines
    scan_workers: int = Field(default=1, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        """Accept lowercase level names from the environment."""
        return str(v).upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
