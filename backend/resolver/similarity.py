"""
Free-text title similarity used to match page titles against catalog titles.
"""
from __future__ import annotations

from typing import Set

from .normalizer import normalize_for_match

DEFAULT_SAME_WORK_THRESHOLD = 0.6
MIN_TOKEN_LENGTH = 3


def _tokens(text: str) -> Set[str]:
    return {token for token in text.split() if len(token) >= MIN_TOKEN_LENGTH}


def similarity(a: str, b: str) -> float:
    """Score two titles in ``[0, 1]``.

    Checks run cheapest and most confident first: exact match of the
    normalized forms, then substring containment (scored by length ratio),
    then Jaccard overlap of tokens longer than two characters.
    """

    left = normalize_for_match(a)
    right = normalize_for_match(b)

    if left == right:
        return 1.0
    if not left or not right:
        return 0.0

    shorter, longer = sorted((left, right), key=len)
    if shorter in longer:
        return len(shorter) / len(longer)

    left_tokens = _tokens(left)
    right_tokens = _tokens(right)
    union = left_tokens | right_tokens
    if not union:
        return 0.0
    return len(left_tokens & right_tokens) / len(union)


def is_same_work(a: str, b: str, threshold: float = DEFAULT_SAME_WORK_THRESHOLD) -> bool:
    return similarity(a, b) >= threshold
