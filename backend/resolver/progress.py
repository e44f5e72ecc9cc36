"""
Chapter/episode extraction from page URLs and titles.
"""
from __future__ import annotations

import math
import re
from typing import List, Optional, Pattern

from .models import Chapter, Episode, MediaCategory, ProgressMark

MAX_PROGRESS = 10000
MAX_PATH_PROGRESS = 5000

EPISODE_PATTERNS: List[Pattern[str]] = [
    re.compile(r"episode[_\-\s]*(\d+)", re.IGNORECASE),
    re.compile(r"ep[_\-\s]*(\d+)", re.IGNORECASE),
    re.compile(r"e(\d+)(?!\d)", re.IGNORECASE),
    # S01E05, episode in the second group
    re.compile(r"\bs(\d+)e(\d+)", re.IGNORECASE),
    re.compile(r"【(\d+)】"),
    re.compile(r"第(\d+)話"),
    re.compile(r"episode[^\d]*(\d+)", re.IGNORECASE),
]

CHAPTER_PATTERNS: List[Pattern[str]] = [
    re.compile(r"chapter[_\-\s]*(\d+(?:\.\d+)?)", re.IGNORECASE),
    re.compile(r"ch[_\-.\s]*(\d+(?:\.\d+)?)", re.IGNORECASE),
    re.compile(r"chap[_\-.\s]*(\d+(?:\.\d+)?)", re.IGNORECASE),
    re.compile(r"c(\d+)(?!\d)", re.IGNORECASE),
    re.compile(r"(?:^|/|-)(\d+(?:\.\d+)?)(?:/|$|-|\.html)"),
    re.compile(r"第(\d+)章"),
    re.compile(r"第(\d+)话"),
    re.compile(r"[\[(](\d+)[\])]"),
    re.compile(r"\s(\d+)(?:\s|$)"),
]

PATH_NUMBER_RE = re.compile(r"/(\d+)(?:/|$|\?)")

SIMPLE_PATTERNS: List[Pattern[str]] = [
    re.compile(r"chapter[_-]?(\d+)", re.IGNORECASE),
    re.compile(r"ch[_-]?(\d+)", re.IGNORECASE),
    re.compile(r"episode[_-]?(\d+)", re.IGNORECASE),
    re.compile(r"ep[_-]?(\d+)", re.IGNORECASE),
    re.compile(r"/(\d+)/?$"),
    re.compile(r"chapter\s*(\d+)", re.IGNORECASE),
    re.compile(r"ch\.?\s*(\d+)", re.IGNORECASE),
    re.compile(r"episode\s*(\d+)", re.IGNORECASE),
    re.compile(r"ep\.?\s*(\d+)", re.IGNORECASE),
]


def _number_from_match(match: "re.Match[str]") -> Optional[float]:
    raw = match.group(2) if match.lastindex and match.lastindex >= 2 else match.group(1)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or not 0 < value < MAX_PROGRESS:
        return None
    return value


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        # digit runs past the interpreter's int conversion limit
        return None


def _make_mark(value: float, is_anime: bool) -> ProgressMark:
    if is_anime:
        return Episode(int(math.floor(value)))
    return Chapter(int(value) if value.is_integer() else value)


def _first_match(text: str, patterns: List[Pattern[str]]) -> Optional[float]:
    for pattern in patterns:
        match = pattern.search(text)
        if not match:
            continue
        value = _number_from_match(match)
        if value is not None:
            return value
    return None


def extract_progress(url: str, title: str, category: MediaCategory) -> ProgressMark:
    """Find the chapter (or episode, for anime) a page points at.

    The URL is tried before the title because it is usually more reliable;
    a bare numeric path segment below 5000 is the last resort.
    """

    is_anime = category == MediaCategory.ANIME
    patterns = EPISODE_PATTERNS if is_anime else CHAPTER_PATTERNS

    for text in ((url or "").lower(), (title or "").lower()):
        value = _first_match(text, patterns)
        if value is not None:
            return _make_mark(value, is_anime)

    path_match = PATH_NUMBER_RE.search(url or "")
    if path_match:
        number = _parse_int(path_match.group(1))
        if number is not None and 0 < number < MAX_PATH_PROGRESS:
            return Episode(number) if is_anime else Chapter(number)

    return None


def extract_progress_simple(url: str, title: str) -> ProgressMark:
    """Category-agnostic extraction used when no page body is available.

    A match from a pattern whose source mentions ``ep`` is an episode,
    anything else a chapter.
    """

    for pattern in SIMPLE_PATTERNS:
        for text in (url or "", title or ""):
            match = pattern.search(text)
            if not match:
                continue
            number = _parse_int(match.group(1))
            if number is None or not 0 < number < MAX_PROGRESS:
                continue
            if "ep" in pattern.pattern.lower():
                return Episode(number)
            return Chapter(number)
    return None
