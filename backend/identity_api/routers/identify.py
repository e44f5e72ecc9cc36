"""Page identification endpoints: category, clean title and progress."""
from __future__ import annotations

from fastapi import APIRouter

from ...resolver.classifier import get_domain, pick_category, score_categories
from ...resolver.models import format_progress
from ...resolver.progress import extract_progress, extract_progress_simple
from ...resolver.titles import extract_title
from ..schemas import (
    IdentifyResponse,
    PageSignalsModel,
    ProgressModel,
    ProgressRequest,
    ProgressResponse,
)

router = APIRouter(prefix="/identify", tags=["identify"])


@router.post("", response_model=IdentifyResponse)
def identify_page(signals: PageSignalsModel) -> IdentifyResponse:
    """Classify a page and extract its clean title and progress."""

    scores = score_categories(signals.url, signals.title, signals.body_text)
    category = pick_category(scores)
    mark = extract_progress(signals.url, signals.title, category)
    return IdentifyResponse(
        category=category,
        title=extract_title(signals.title, signals.url),
        progress=ProgressModel.from_mark(mark),
        progress_label=format_progress(mark),
        domain=get_domain(signals.url),
        scores=scores,
    )


@router.post("/progress", response_model=ProgressResponse)
def identify_progress(request: ProgressRequest) -> ProgressResponse:
    """Extract progress; without a category the simple extractor is used."""

    if request.category is None:
        mark = extract_progress_simple(request.url, request.title)
    else:
        mark = extract_progress(request.url, request.title, request.category)
    return ProgressResponse(progress=ProgressModel.from_mark(mark), progress_label=format_progress(mark))
