"""
Parser Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
Every field has a default, so the parser works without any environment set up.

Environment variables use the YTPARSE_ prefix, e.g. YTPARSE_DUMPS_DIR=/tmp/dumps.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parser settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="YTPARSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Service
    # -------------------------------------------------------------------------
    base_url: str = Field(
        default="https://www.youtube.com/",
        description="Origin that relative URLs from the service are resolved against",
    )

    # -------------------------------------------------------------------------
    # Failure diagnostics
    # -------------------------------------------------------------------------
    dumps_dir: Path = Field(
        default=Path("dumps"),
        description="Directory receiving one JSON dump per failed fragment",
    )
    issues_url: str | None = Field(
        default=None,
        description="Where users should post failure dumps",
    )

    # -------------------------------------------------------------------------
    # Normalization behaviour
    # -------------------------------------------------------------------------
    isolate_nested_failures: bool = Field(
        default=False,
        description=(
            "Fault-isolate every shelf child on its own. When False a broken "
            "child aborts the whole shelf."
        ),
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
