"""
Application settings.

Loaded from environment variables (prefix ``PARK_WILDLIFE_``) or a local
``.env`` file. Use :func:`get_settings` rather than instantiating directly
so the whole process shares one settings object.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed process configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PARK_WILDLIFE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "park-wildlife"
    app_env: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Species repository behaviour
    use_api: bool = True
    enable_cache: bool = True
    fallback_to_local: bool = True
    timeout_ms: int = Field(default=10_000, gt=0)

    # Cache windows (minutes). The two tiers expire independently.
    repository_cache_ttl_minutes: float = Field(default=15, gt=0)
    client_cache_ttl_minutes: float = Field(default=30, gt=0)

    # Per-request socket timeout for the provider (seconds)
    http_timeout: float = Field(default=30, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
