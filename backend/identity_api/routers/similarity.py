"""Title similarity endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ...resolver.settings import ResolverSettings
from ...resolver.similarity import is_same_work, similarity
from ..dependencies import get_resolver_settings
from ..schemas import SimilarityResponse

router = APIRouter(tags=["similarity"])


@router.get("/similarity", response_model=SimilarityResponse)
def title_similarity(
    a: str = Query(..., description="First title."),
    b: str = Query(..., description="Second title."),
    threshold: float | None = Query(
        default=None,
        ge=0.0,
        le=1.0,
        description="Same-work threshold; defaults to the configured value.",
    ),
    settings: ResolverSettings = Depends(get_resolver_settings),
) -> SimilarityResponse:
    """Score two titles and report whether they name the same work."""

    effective = settings.same_work_threshold if threshold is None else threshold
    return SimilarityResponse(
        score=similarity(a, b),
        same_work=is_same_work(a, b, effective),
        threshold=effective,
    )
