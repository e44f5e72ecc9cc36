"""Catalog metadata endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ...resolver.metadata import thumbnail_with_fallback
from ...resolver.models import CatalogName, MediaCategory
from ..dependencies import get_identity_service
from ..schemas import (
    CandidateMetadataModel,
    MetadataSearchResponse,
    ThumbnailRequest,
    ThumbnailResponse,
)
from ..services import IdentityService

router = APIRouter(prefix="/metadata", tags=["metadata"])


@router.get("/search", response_model=MetadataSearchResponse)
async def search_metadata(
    title: str = Query(..., min_length=1, description="Work title to look up."),
    category: MediaCategory = Query(..., description="Media category selecting the catalog cascade."),
    service: IdentityService = Depends(get_identity_service),
) -> MetadataSearchResponse:
    """Run the catalog cascade; a miss is a normal, null ``match``."""

    candidate = await service.search(title, category)
    if candidate is None:
        return MetadataSearchResponse(match=None, thumbnail_url=thumbnail_with_fallback(None))
    return MetadataSearchResponse(
        match=CandidateMetadataModel.from_candidate(candidate),
        thumbnail_url=thumbnail_with_fallback(candidate.thumbnail_url),
    )


@router.post("/thumbnail", response_model=ThumbnailResponse)
async def check_thumbnail(
    request: ThumbnailRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ThumbnailResponse:
    """Report whether a cover image URL is reachable."""

    return ThumbnailResponse(url=await service.validate_thumbnail(request.url))


@router.get("/{source}/{record_id:path}", response_model=CandidateMetadataModel)
async def get_metadata(
    source: CatalogName,
    record_id: str,
    category: MediaCategory = Query(
        default=MediaCategory.MANGA, description="Category used by catalogs serving several types."
    ),
    service: IdentityService = Depends(get_identity_service),
) -> CandidateMetadataModel:
    """Fetch a known record directly from one catalog."""

    candidate = await service.get_by_id(record_id, source, category)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Metadata record not found")
    return CandidateMetadataModel.from_candidate(candidate)
