"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the jsonshape engine.

    Values are read from ``JSONSHAPE_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="JSONSHAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Validation engine
    multiple_of_epsilon: float = Field(1e-9, gt=0)
    pattern_cache_size: int = Field(512, ge=1)

    # Schema text loading
    max_document_size: int = 5_000_000  # characters
    max_node_count: int = 50_000
    max_depth: int = 64


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply ``log_level`` to the root logger (for scripts embedding jsonshape)."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logging.getLogger("jsonshape").setLevel(settings.log_level.upper())
