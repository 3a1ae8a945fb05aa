"""Client configuration using pydantic-settings.

Environment variables are the sole source of truth. Use `get_settings()` so the
instance is shared; tests build `Settings(...)` directly.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ACTIONABLE_POINTS_BASE_URL: str = Field(
        "http://localhost:3000",
        description="Base URL the /api/actionable-points path is resolved against",
    )
    HTTP_TIMEOUT: Optional[float] = Field(
        None, gt=0, description="Request timeout in seconds; httpx default when unset"
    )
    LOG_LEVEL: str = Field("INFO", description="Minimum log level")

    model_config = SettingsConfigDict(env_file=None, case_sensitive=False, extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
