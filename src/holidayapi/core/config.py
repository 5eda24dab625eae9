"""Library configuration.

- Centralizes environment variables (pydantic-settings) for the HTTP layer.
- `HolidayAPI.from_settings` reads the key and version from here.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central configuration for the client.

    Every field can be overridden with a `HOLIDAYAPI_`-prefixed environment
    variable or a `.env` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOLIDAYAPI_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    key: str | None = Field(
        default=None,
        description="API key (UUID format) used by `HolidayAPI.from_settings`.",
    )
    version: int = Field(
        default=1,
        description="API version used by `HolidayAPI.from_settings`.",
    )
    host: str = Field(
        default="holidayapi.com",
        min_length=1,
        description="Host the versioned base URL is built on.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="holidayapi-python/0.1 (+https://holidayapi.com)",
        min_length=1,
        description="User-Agent sent with every request.",
    )
