"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kvcache_core.constants import DEFAULT_REDIS_URL, DEFAULT_TTL_SECONDS, LOG_LEVELS


class Settings(BaseSettings):
    """Central configuration for kv-cache-accessor."""

    model_config = SettingsConfigDict(env_prefix="KVC_", env_file=".env")

    # --- Store ---
    redis_url: str = Field(
        default=DEFAULT_REDIS_URL,
        description="Redis connection URL (host, port, credentials and db)",
    )
    default_ttl_seconds: int = Field(
        default=DEFAULT_TTL_SECONDS,
        gt=0,
        description="Expiry used by the CLI when --ttl is not given",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise the level name and reject unknown ones."""
        level = value.upper()
        if level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level
