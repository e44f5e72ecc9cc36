"""
Content identity resolution engine for Waypoint.

This package classifies pages into media categories, extracts reading or
watching progress, cleans display titles and cross-references them against
external catalogs for canonical metadata.
"""

from .classifier import classify, get_domain, score_categories
from .metadata import (
    PLACEHOLDER_THUMBNAIL,
    MetadataResolver,
    resolve_by_id,
    resolve_metadata,
    thumbnail_with_fallback,
    validate_thumbnail,
)
from .models import (
    CandidateMetadata,
    CatalogName,
    Chapter,
    Episode,
    MediaCategory,
    PageSignals,
    ProgressMark,
    format_progress,
    progress_to_dict,
)
from .normalizer import clean, clean_simple, normalize_for_match
from .progress import extract_progress, extract_progress_simple
from .similarity import is_same_work, similarity
from .titles import extract_title, extract_title_from_url

__all__ = [
    "PLACEHOLDER_THUMBNAIL",
    "CandidateMetadata",
    "CatalogName",
    "Chapter",
    "Episode",
    "MediaCategory",
    "MetadataResolver",
    "PageSignals",
    "ProgressMark",
    "classify",
    "clean",
    "clean_simple",
    "extract_progress",
    "extract_progress_simple",
    "extract_title",
    "extract_title_from_url",
    "format_progress",
    "get_domain",
    "is_same_work",
    "normalize_for_match",
    "progress_to_dict",
    "resolve_by_id",
    "resolve_metadata",
    "score_categories",
    "similarity",
    "thumbnail_with_fallback",
    "validate_thumbnail",
]
