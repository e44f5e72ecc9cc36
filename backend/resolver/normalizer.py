"""
Title normalization.

``clean`` produces a display title from a noisy page title, while
``normalize_for_match`` produces a lowercase, punctuation-free key that is
only ever used for comparisons.
"""
from __future__ import annotations

import re
from typing import List, Pattern

_TRAILER_KEYWORDS = r"(?:chapter|episode|volume|vol\.?|ch\.?|ep\.?|#)"

SUFFIX_PATTERNS: List[Pattern[str]] = [
    # "Title | Site Name"
    re.compile(r"\s+\|\s+.*$"),
    # "Title :: Site Name"
    re.compile(r"\s+::\s+.*$"),
    # "Title Chapter 12 ...", "Title - Ep. 4", "Title Vol 2"
    re.compile(
        r"(?<=\S)\s*[-–—:]?\s+" + _TRAILER_KEYWORDS + r"\s*\d+(?:\.\d+)?\b.*$",
        re.IGNORECASE,
    ),
    # "Title - Site Name" with a short trailer only
    re.compile(r"\s+[-–—]\s+.{1,30}$"),
    # "Title [Site]", "Title (Manga)", "Title 【Raw】"
    re.compile(r"\s*[\[(【][^\[\]()【】]{1,30}[\])】]$"),
    re.compile(r"\s+in\s+english(?:\s+online)?(?:\s+free)?$", re.IGNORECASE),
    re.compile(r"\s+online(?:\s+free)?$", re.IGNORECASE),
]

PREFIX_PATTERNS: List[Pattern[str]] = [
    re.compile(r"^(?:read|watch|stream)\s+", re.IGNORECASE),
    re.compile(r"^(?:chapter|episode)\s*\d+(?:\.\d+)?\s*[-–:]\s*", re.IGNORECASE),
]

MINOR_WORDS = frozenset(
    {
        "a", "an", "and", "as", "at", "but", "by", "for", "in",
        "nor", "of", "on", "or", "the", "to", "vs", "with",
    }
)

_WHITESPACE_RE = re.compile(r"\s+")
_PUNCTUATION_RE = re.compile(r"[^\w\s]|_")

_SIMPLE_SUFFIX_PATTERNS: List[Pattern[str]] = [
    re.compile(r" [-–—|] .+$"),
    re.compile(r" :: .+$"),
    re.compile(r"\s*\(.+\)$"),
]


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _strip_once(text: str) -> str:
    for pattern in SUFFIX_PATTERNS:
        text = pattern.sub("", text)
    for pattern in PREFIX_PATTERNS:
        text = pattern.sub("", text)
    return collapse_whitespace(text)


def title_case(text: str) -> str:
    """Title-case ``text`` keeping minor words lower unless they lead."""

    words = text.split(" ")
    cased: List[str] = []
    for index, word in enumerate(words):
        lowered = word.lower()
        if index > 0 and lowered in MINOR_WORDS:
            cased.append(lowered)
        else:
            cased.append(lowered[:1].title() + lowered[1:])
    return " ".join(cased)


def clean(title: str) -> str:
    """Strip site cruft from a page title for display.

    Pattern removal repeats until the text stops changing, so the result is
    stable under a second call. Text that is uniformly upper or lower case is
    re-cased to title case. May return an empty string; callers then fall
    back to a URL-derived title.
    """

    if not title:
        return ""

    text = collapse_whitespace(title)
    while True:
        stripped = _strip_once(text)
        if stripped == text:
            break
        text = stripped

    if text.isupper() or text.islower():
        text = title_case(text)
    return text


def normalize_for_match(title: str) -> str:
    """Lowercase, punctuation-free comparison key. Never display this."""

    text = clean(title).lower()
    text = _PUNCTUATION_RE.sub("", text)
    return collapse_whitespace(text)


def clean_simple(title: str) -> str:
    """Lightweight site-suffix strip for contexts without a URL."""

    text = title or ""
    for pattern in _SIMPLE_SUFFIX_PATTERNS:
        text = pattern.sub("", text)
    return text.strip() or "Untitled"
