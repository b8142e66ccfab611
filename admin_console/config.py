# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Console settings. Every variable is prefixed with CONSOLE_."""

    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_base_url: Optional[str] = Field(
        default=None,
        description="Upstream REST API. In-memory data sources are used when unset.",
    )
    api_token: Optional[str] = Field(default=None, description="Bearer token for the upstream API")
    request_timeout: float = Field(default=30.0, gt=0)

    notification_duration_ms: int = Field(default=5000, gt=0)
    max_visible_notifications: int = Field(default=5, ge=0)

    actor_profile_header: str = Field(
        default="X-Actor-Profile",
        description="Header set by the identity provider with the actor's profile rank",
    )
    fallback_route: str = Field(
        default="/dashboard", description="Where actors are sent when a screen is not available"
    )
    session_ttl: int = Field(
        default=8 * 60 * 60,
        gt=0,
        description="Seconds of inactivity after which a console session is closed",
    )
    allowed_origins: str = Field(default="http://localhost:5173")

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v.upper()

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
