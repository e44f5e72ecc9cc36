"""
Canonical work-title extraction from page titles and URLs.
"""
from __future__ import annotations

import re
from typing import List, Pattern
from urllib.parse import unquote, urlparse

from .normalizer import collapse_whitespace

UNTITLED = "Untitled"
MIN_TITLE_LENGTH = 3

TITLE_SUFFIX_PATTERNS: List[Pattern[str]] = [
    # short "- Site Name" trailers only, so real subtitles survive
    re.compile(r" [-–—|:] .{0,30}$"),
    re.compile(r" :: .+$"),
    re.compile(r"\s*\([^)]{0,20}\)$"),
    re.compile(r"\s*【[^】]+】$"),
    re.compile(r" - Read .+$", re.IGNORECASE),
    re.compile(r" Chapter \d+.*$", re.IGNORECASE),
    re.compile(r" Episode \d+.*$", re.IGNORECASE),
    re.compile(r" Ch\.\s*\d+.*$", re.IGNORECASE),
    re.compile(r" Ep\.\s*\d+.*$", re.IGNORECASE),
    re.compile(r" #\d+.*$"),
    re.compile(r"\s*-\s*Chapter\s*\d+", re.IGNORECASE),
    re.compile(r"\s*-\s*Episode\s*\d+", re.IGNORECASE),
]

TITLE_PREFIX_PATTERNS: List[Pattern[str]] = [
    re.compile(r"^Read\s+", re.IGNORECASE),
    re.compile(r"^Watch\s+", re.IGNORECASE),
    re.compile(r"^Stream\s+", re.IGNORECASE),
    re.compile(r"^Chapter\s*\d+\s*[-–:]\s*", re.IGNORECASE),
    re.compile(r"^Episode\s*\d+\s*[-–:]\s*", re.IGNORECASE),
]

GENERIC_TITLE_RE = re.compile(r"^(home|index|page|read|watch|chapter|episode)$", re.IGNORECASE)

URL_SKIP_SEGMENTS = frozenset(
    {
        "manga", "comic", "anime", "novel", "read", "watch",
        "chapter", "episode", "series", "title",
    }
)

_NUMERIC_SEGMENT_RE = re.compile(r"^\d+$")
_PAGE_EXTENSION_RE = re.compile(r"\.(html?|php|aspx?)$", re.IGNORECASE)
_WORD_START_RE = re.compile(r"\b\w")


def extract_title_from_url(url: str) -> str:
    """Turn the first meaningful URL path slug into a readable title.

    Returns an empty string when the URL has no usable segment.
    """

    try:
        parsed = urlparse(url or "")
    except ValueError:
        return ""
    if not parsed.netloc:
        return ""

    for part in (segment for segment in parsed.path.split("/") if segment):
        part = unquote(part)
        if _NUMERIC_SEGMENT_RE.match(part) or part.lower() in URL_SKIP_SEGMENTS:
            continue
        slug = _PAGE_EXTENSION_RE.sub("", part.replace("-", " ").replace("_", " "))
        slug = _WORD_START_RE.sub(lambda match: match.group(0).upper(), slug)
        slug = collapse_whitespace(slug)
        if len(slug) >= MIN_TITLE_LENGTH:
            return slug
    return ""


def extract_title(page_title: str, url: str) -> str:
    """Derive the work title from a page title, falling back to the URL."""

    title = collapse_whitespace(page_title or "")
    for pattern in TITLE_SUFFIX_PATTERNS:
        title = pattern.sub("", title)
    for pattern in TITLE_PREFIX_PATTERNS:
        title = pattern.sub("", title)
    title = collapse_whitespace(title)

    if len(title) < MIN_TITLE_LENGTH or GENERIC_TITLE_RE.match(title):
        url_title = extract_title_from_url(url)
        if len(url_title) > len(title):
            title = url_title

    return title or UNTITLED
