"""Runtime configuration for the identity API."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Environment-aware settings for the identity API service."""

    host: str = Field(default="0.0.0.0", description="Interface the development server binds to.")
    port: int = Field(default=8000, description="Port the development server listens on.")
    resolve_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Upper bound in seconds for a whole metadata cascade.",
    )
    log_level: str = Field(default="INFO", description="Root logging level for the service.")

    model_config = SettingsConfigDict(
        env_prefix="WAYPOINT_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
