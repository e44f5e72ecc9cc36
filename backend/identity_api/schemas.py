"""Pydantic models exposed by the identity API."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ..resolver.models import (
    CandidateMetadata,
    CatalogName,
    Chapter,
    Episode,
    MediaCategory,
    ProgressMark,
)


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")


class PageSignalsModel(BaseModel):
    """Raw signals scraped from a page."""

    url: str = Field(..., description="Address of the page.")
    title: str = Field(..., description="Displayed page title.")
    body_text: str = Field(default="", description="Optional visible page text.")


class ProgressModel(BaseModel):
    """Chapter or episode position; at most one field is set."""

    chapter: int | float | None = Field(default=None)
    episode: int | None = Field(default=None)

    @classmethod
    def from_mark(cls, mark: ProgressMark) -> "ProgressModel":
        if isinstance(mark, Chapter):
            return cls(chapter=mark.number)
        if isinstance(mark, Episode):
            return cls(episode=mark.number)
        return cls()


class IdentifyResponse(BaseModel):
    """Classification, clean title and progress for a page."""

    category: MediaCategory
    title: str
    progress: ProgressModel
    progress_label: str = Field(description="Short display label such as 'Ch. 12'.")
    domain: str = Field(description="Page hostname without a leading www.")
    scores: dict[MediaCategory, int] = Field(
        default_factory=dict, description="Raw classifier score per category."
    )


class ProgressRequest(BaseModel):
    """Progress extraction request; omit category for the simple extractor."""

    url: str
    title: str = Field(default="")
    category: MediaCategory | None = Field(default=None)


class ProgressResponse(BaseModel):
    progress: ProgressModel
    progress_label: str


class SimilarityResponse(BaseModel):
    score: float = Field(ge=0.0, le=1.0)
    same_work: bool
    threshold: float


class CandidateMetadataModel(BaseModel):
    """Canonical metadata recovered from an external catalog."""

    id: str
    title: str
    thumbnail_url: str
    source: CatalogName

    @classmethod
    def from_candidate(cls, candidate: CandidateMetadata) -> "CandidateMetadataModel":
        return cls(
            id=candidate.id,
            title=candidate.title,
            thumbnail_url=candidate.thumbnail_url,
            source=candidate.source,
        )


class MetadataSearchResponse(BaseModel):
    """Result of a catalog cascade; ``match`` is null when nothing matched."""

    match: CandidateMetadataModel | None = Field(default=None)
    thumbnail_url: str = Field(
        description="Matched cover art, or a placeholder image when unavailable."
    )


class ThumbnailRequest(BaseModel):
    url: str


class ThumbnailResponse(BaseModel):
    url: str | None = Field(default=None, description="The URL when reachable, else null.")
