"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Output
    output_dir: str = Field(default=".", alias="OUTPUT_DIR")

    # Calendar
    timezone: str = Field(default="Asia/Jerusalem", alias="TIMEZONE")

    # Ephemeris data
    retrograde_table_path: str = Field(default="", alias="RETROGRADE_TABLE_PATH")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
