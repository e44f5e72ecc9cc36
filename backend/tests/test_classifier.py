"""Tests for the weighted keyword/domain classifier."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.resolver.classifier import (  # noqa: E402
    classify,
    classify_signals,
    get_domain,
    pick_category,
    score_categories,
)
from backend.resolver.lexicons import LEXICONS  # noqa: E402
from backend.resolver.models import Lexicon, MediaCategory, PageSignals  # noqa: E402


def test_domain_match_dominates_missing_keywords() -> None:
    assert classify("https://mangadex.org/title/x", "Some Title") == MediaCategory.MANGA


@pytest.mark.parametrize(
    ("url", "title", "expected"),
    [
        (
            "https://www.crunchyroll.com/watch/GY123/some-show",
            "Some Show",
            MediaCategory.ANIME,
        ),
        (
            "https://asuracomic.net/series/solo-leveling",
            "Solo Leveling",
            MediaCategory.WEBCOMIC,
        ),
        (
            "https://www.royalroad.com/fiction/12345/mother-of-learning",
            "Mother of Learning | Royal Road",
            MediaCategory.NOVEL,
        ),
    ],
)
def test_known_sites_classify_to_their_category(url: str, title: str, expected: MediaCategory) -> None:
    assert classify(url, title) == expected


def test_keywords_classify_pages_on_unknown_sites() -> None:
    category = classify(
        "https://example.org/read",
        "Some Light Novel Chapter 3",
        "web novel translated",
    )

    assert category == MediaCategory.NOVEL


def test_no_signal_defaults_to_manga() -> None:
    assert classify("", "") == MediaCategory.MANGA
    assert classify("", "Qwerty") == MediaCategory.MANGA


@pytest.mark.parametrize(
    ("url", "title", "body"),
    [
        ("", "", ""),
        ("not a url", "???", ""),
        ("http://[::1", "broken ipv6 host", ""),
        ("ftp://files.example/archive", "進撃の巨人 第1話", "アニメ"),
        ("https://example.com/" + "9" * 5000, "x" * 1000, "y" * 1000),
    ],
)
def test_classify_always_returns_a_category(url: str, title: str, body: str) -> None:
    assert classify(url, title, body) in set(MediaCategory)


def test_classify_is_deterministic() -> None:
    args = ("https://tapas.io/series/abc", "Some Comic Episode 4", "scroll down for more")

    assert classify(*args) == classify(*args)


def test_long_keywords_weigh_double_and_sites_add_fifty() -> None:
    empty = Lexicon(keywords=(), sites=())
    tables = {category: empty for category in MediaCategory}
    tables[MediaCategory.ANIME] = Lexicon(keywords=("abcd", "abcde", "zzzz"), sites=("site.test",))

    scores = score_categories("https://www.site.test/x", "abcde", lexicons=tables)

    # "abcd" (short) 1 + "abcde" (long) 2 + site 50
    assert scores[MediaCategory.ANIME] == 53
    assert scores[MediaCategory.MANGA] == 0


def test_site_bonus_is_flat_per_category() -> None:
    empty = Lexicon(keywords=(), sites=())
    tables = {category: empty for category in MediaCategory}
    tables[MediaCategory.NOVEL] = Lexicon(keywords=(), sites=("books.test", "books.test/novels"))

    scores = score_categories("https://books.test/novels/1", "", lexicons=tables)

    assert scores[MediaCategory.NOVEL] == 50


def test_ties_resolve_by_category_priority() -> None:
    scores = {
        MediaCategory.ANIME: 0,
        MediaCategory.MANGA: 0,
        MediaCategory.WEBCOMIC: 7,
        MediaCategory.NOVEL: 7,
    }

    assert pick_category(scores) == MediaCategory.WEBCOMIC
    assert pick_category({category: 0 for category in MediaCategory}) == MediaCategory.MANGA


def test_score_table_covers_every_category() -> None:
    scores = score_categories("https://mangadex.org/title/x", "Some Title")

    assert set(scores) == set(MediaCategory)
    assert scores[MediaCategory.MANGA] >= 50


def test_lexicons_are_read_only() -> None:
    with pytest.raises(TypeError):
        LEXICONS[MediaCategory.ANIME] = Lexicon(keywords=(), sites=())  # type: ignore[index]


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.mangadex.org/title/x", "mangadex.org"),
        ("https://Reader.Example.com/a", "reader.example.com"),
        ("not a url", ""),
        ("http://[::1", ""),
    ],
)
def test_get_domain(url: str, expected: str) -> None:
    assert get_domain(url) == expected


def test_classify_signals_matches_classify() -> None:
    signals = PageSignals(
        url="https://www.crunchyroll.com/watch/gy123/frieren",
        title="Frieren",
        body_text="episode 10 subbed",
    )

    assert classify_signals(signals) == MediaCategory.ANIME
    assert classify_signals(signals) == classify(signals.url, signals.title, signals.body_text)
