"""Tunable configuration for the metadata resolver."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):
    """Environment-aware settings for catalog lookups and title matching."""

    acceptance_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Minimum similarity for a catalog candidate to be accepted.",
    )
    same_work_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Similarity at which two titles are treated as the same work.",
    )
    exact_match_score: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Score at which candidate scanning stops early.",
    )
    candidate_limit: int = Field(
        default=10, ge=1, le=50, description="Number of candidates requested per catalog search."
    )
    request_timeout: float = Field(
        default=20.0, gt=0, description="Per-request HTTP timeout in seconds."
    )
    user_agent: str = Field(
        default="waypoint-identity/0.1.0",
        description="User-Agent header sent to external catalogs.",
    )
    anilist_url: str = Field(default="https://graphql.anilist.co")
    jikan_url: str = Field(default="https://api.jikan.moe/v4")
    mangadex_url: str = Field(default="https://api.mangadex.org")
    mangadex_covers_url: str = Field(default="https://uploads.mangadex.org/covers")
    openlibrary_url: str = Field(default="https://openlibrary.org")
    openlibrary_covers_url: str = Field(default="https://covers.openlibrary.org/b")

    model_config = SettingsConfigDict(
        env_prefix="WAYPOINT_RESOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
