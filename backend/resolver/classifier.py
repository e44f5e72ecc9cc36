"""
Weighted keyword/domain classifier for page signals.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional
from urllib.parse import urlparse

from .lexicons import CATEGORY_PRIORITY, DEFAULT_CATEGORY, LEXICONS
from .models import Lexicon, MediaCategory, PageSignals

LONG_KEYWORD_LENGTH = 4
LONG_KEYWORD_POINTS = 2
SHORT_KEYWORD_POINTS = 1
SITE_MATCH_POINTS = 50


def get_domain(url: str) -> str:
    """Return the lowercase hostname without a leading ``www.``."""

    try:
        hostname = urlparse(url).hostname or ""
    except ValueError:
        return ""
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname


def _keyword_score(text: str, lexicon: Lexicon) -> int:
    score = 0
    for keyword in lexicon.keywords:
        if keyword in text:
            score += LONG_KEYWORD_POINTS if len(keyword) > LONG_KEYWORD_LENGTH else SHORT_KEYWORD_POINTS
    return score


def _matches_site(domain: str, url_lower: str, lexicon: Lexicon) -> bool:
    return any(site in domain or site in url_lower for site in lexicon.sites)


def score_categories(
    url: str,
    title: str,
    body_text: str = "",
    lexicons: Optional[Mapping[MediaCategory, Lexicon]] = None,
) -> Dict[MediaCategory, int]:
    """Return the raw score of every category, in priority order."""

    tables = lexicons if lexicons is not None else LEXICONS
    url_lower = (url or "").lower()
    domain = get_domain(url or "")
    text = f"{url_lower} {(title or '').lower()} {(body_text or '').lower()}"

    scores: Dict[MediaCategory, int] = {}
    for category in CATEGORY_PRIORITY:
        lexicon = tables[category]
        score = _keyword_score(text, lexicon)
        if _matches_site(domain, url_lower, lexicon):
            score += SITE_MATCH_POINTS
        scores[category] = score
    return scores


def pick_category(scores: Mapping[MediaCategory, int]) -> MediaCategory:
    """Highest score wins; ``manga`` when nothing scores."""

    best = DEFAULT_CATEGORY
    best_score = 0
    # strict comparison keeps the earlier category on ties
    for category in CATEGORY_PRIORITY:
        if scores.get(category, 0) > best_score:
            best = category
            best_score = scores[category]
    return best


def classify(url: str, title: str, body_text: str = "") -> MediaCategory:
    """Pick the best-scoring category for a page."""

    return pick_category(score_categories(url, title, body_text))


def classify_signals(signals: PageSignals) -> MediaCategory:
    return classify(signals.url, signals.title, signals.body_text)
