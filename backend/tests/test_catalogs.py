"""Tests for the external catalog adapters against mocked HTTP transports."""
from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.resolver.catalogs import (  # noqa: E402
    AniListCatalog,
    CatalogAdapter,
    JikanCatalog,
    MangaDexCatalog,
    OpenLibraryCatalog,
    build_adapters,
)
from backend.resolver.models import CandidateMetadata, CatalogName, MediaCategory  # noqa: E402
from backend.resolver.settings import ResolverSettings  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]


def _run(
    adapter_type: type[CatalogAdapter],
    handler: Handler,
    action: str,
    *args: Any,
) -> Optional[CandidateMetadata]:
    async def _go() -> Optional[CandidateMetadata]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            adapter = adapter_type(client, ResolverSettings())
            return await getattr(adapter, action)(*args)

    return asyncio.run(_go())


FRIEREN_MEDIA = {
    "id": 154587,
    "title": {
        "romaji": "Sousou no Frieren",
        "english": "Frieren: Beyond Journey's End",
        "native": "葬送のフリーレン",
    },
    "synonyms": ["Frieren"],
    "coverImage": {"large": "https://img.test/frieren-large.jpg", "medium": "https://img.test/frieren.jpg"},
}


def test_anilist_search_posts_graphql_and_maps_best_match() -> None:
    seen: list[dict[str, Any]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"data": {"Page": {"media": [FRIEREN_MEDIA]}}})

    result = _run(AniListCatalog, handler, "search", "Frieren: Beyond Journey's End", MediaCategory.ANIME)

    assert result == CandidateMetadata(
        id="154587",
        title="Frieren: Beyond Journey's End",
        thumbnail_url="https://img.test/frieren-large.jpg",
        source=CatalogName.ANILIST,
    )
    assert seen[0]["variables"] == {
        "search": "Frieren: Beyond Journey's End",
        "type": "ANIME",
        "perPage": 10,
    }


def test_anilist_searches_manga_type_for_non_anime_categories() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content)["variables"]["type"])
        return httpx.Response(200, json={"data": {"Page": {"media": []}}})

    assert _run(AniListCatalog, handler, "search", "Solo Leveling", MediaCategory.WEBCOMIC) is None
    assert seen == ["MANGA"]


def test_anilist_allows_missing_cover() -> None:
    media = {**FRIEREN_MEDIA, "coverImage": None}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"Page": {"media": [media]}}})

    result = _run(AniListCatalog, handler, "search", "Frieren", MediaCategory.ANIME)

    assert result is not None
    assert result.title == "Frieren"
    assert result.thumbnail_url == ""


def test_anilist_graphql_errors_resolve_to_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"errors": [{"message": "rate limited"}], "data": None})

    assert _run(AniListCatalog, handler, "search", "Frieren", MediaCategory.ANIME) is None


def test_anilist_get_by_id_fetches_media() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content)["variables"] == {"id": 154587}
        return httpx.Response(200, json={"data": {"Media": FRIEREN_MEDIA}})

    result = _run(AniListCatalog, handler, "get_by_id", "154587", MediaCategory.ANIME)

    assert result is not None
    assert result.title == "Frieren: Beyond Journey's End"


def test_anilist_get_by_id_rejects_non_numeric_ids_without_a_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not be called
        raise AssertionError("no request expected")

    assert _run(AniListCatalog, handler, "get_by_id", "frieren", MediaCategory.ANIME) is None


def test_jikan_search_picks_highest_scoring_record() -> None:
    records = [
        {
            "mal_id": 1,
            "title": "Berserk of Gluttony",
            "images": {"jpg": {"image_url": "https://cdn.test/gluttony.jpg"}},
        },
        {
            "mal_id": 2,
            "title": "Berserk",
            "title_english": "Berserk",
            "images": {"jpg": {"large_image_url": "https://cdn.test/berserk.jpg"}},
        },
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v4/manga"
        assert request.url.params["q"] == "Berserk"
        assert request.url.params["limit"] == "10"
        return httpx.Response(200, json={"data": records})

    result = _run(JikanCatalog, handler, "search", "Berserk", MediaCategory.MANGA)

    assert result == CandidateMetadata(
        id="2",
        title="Berserk",
        thumbnail_url="https://cdn.test/berserk.jpg",
        source=CatalogName.MAL,
    )


def test_jikan_record_without_image_is_rejected() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": [{"mal_id": 2, "title": "Berserk"}]})

    assert _run(JikanCatalog, handler, "search", "Berserk", MediaCategory.MANGA) is None


def test_jikan_get_by_id_uses_anime_path() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v4/anime/52991"
        return httpx.Response(
            200,
            json={
                "data": {
                    "mal_id": 52991,
                    "title": "Sousou no Frieren",
                    "images": {"webp": {"image_url": "https://cdn.test/frieren.webp"}},
                }
            },
        )

    result = _run(JikanCatalog, handler, "get_by_id", "52991", MediaCategory.ANIME)

    assert result is not None
    assert result.id == "52991"
    assert result.thumbnail_url == "https://cdn.test/frieren.webp"


def test_mangadex_search_builds_cover_url() -> None:
    record = {
        "id": "abc-123",
        "attributes": {
            "title": {"en": "Solo Leveling"},
            "altTitles": [{"ko": "나 혼자만 레벨업"}],
        },
        "relationships": [
            {"type": "author", "id": "author-1"},
            {"type": "cover_art", "attributes": {"fileName": "cover.png"}},
        ],
    }

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/manga"
        assert request.url.params["includes[]"] == "cover_art"
        return httpx.Response(200, json={"data": [record]})

    result = _run(MangaDexCatalog, handler, "search", "Solo Leveling", MediaCategory.WEBCOMIC)

    assert result == CandidateMetadata(
        id="abc-123",
        title="Solo Leveling",
        thumbnail_url="https://uploads.mangadex.org/covers/abc-123/cover.png.512.jpg",
        source=CatalogName.MANGADEX,
    )


def test_mangadex_matches_alternate_titles() -> None:
    record = {
        "id": "def-456",
        "attributes": {
            "title": {"ja-ro": "Ore dake Level Up na Ken"},
            "altTitles": [{"en": "Solo Leveling"}],
        },
        "relationships": [{"type": "cover_art", "attributes": {"fileName": "c.jpg"}}],
    }

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": [record]})

    result = _run(MangaDexCatalog, handler, "search", "Solo Leveling", MediaCategory.WEBCOMIC)

    assert result is not None
    assert result.title == "Solo Leveling"


def test_openlibrary_search_maps_cover_id() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/search.json"
        assert request.url.params["title"] == "The Hobbit"
        return httpx.Response(
            200, json={"docs": [{"key": "/works/OL1W", "title": "The Hobbit", "cover_i": 12345}]}
        )

    result = _run(OpenLibraryCatalog, handler, "search", "The Hobbit", MediaCategory.NOVEL)

    assert result == CandidateMetadata(
        id="/works/OL1W",
        title="The Hobbit",
        thumbnail_url="https://covers.openlibrary.org/b/id/12345-M.jpg",
        source=CatalogName.OPENLIBRARY,
    )


def test_openlibrary_falls_back_to_isbn_cover() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"docs": [{"key": "/works/OL2W", "title": "Dune", "isbn": ["9780441013593"]}]}
        )

    result = _run(OpenLibraryCatalog, handler, "search", "Dune", MediaCategory.NOVEL)

    assert result is not None
    assert result.thumbnail_url == "https://covers.openlibrary.org/b/isbn/9780441013593-M.jpg"


def test_openlibrary_get_by_id_reads_work_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/works/OL1W.json"
        return httpx.Response(200, json={"title": "The Hobbit", "covers": [555]})

    result = _run(OpenLibraryCatalog, handler, "get_by_id", "works/OL1W", MediaCategory.NOVEL)

    assert result == CandidateMetadata(
        id="/works/OL1W",
        title="The Hobbit",
        thumbnail_url="https://covers.openlibrary.org/b/id/555-M.jpg",
        source=CatalogName.OPENLIBRARY,
    )


def _server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, json={"detail": "boom"})


def _connection_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _invalid_json(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"<html>maintenance</html>")


def _wrong_shape(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=["unexpected", "list"])


@pytest.mark.parametrize(
    "adapter_type", [AniListCatalog, JikanCatalog, MangaDexCatalog, OpenLibraryCatalog]
)
@pytest.mark.parametrize(
    "handler", [_server_error, _connection_refused, _invalid_json, _wrong_shape]
)
def test_catalog_failures_resolve_to_none(adapter_type: type[CatalogAdapter], handler: Handler) -> None:
    assert _run(adapter_type, handler, "search", "Frieren", MediaCategory.MANGA) is None
    assert _run(adapter_type, handler, "get_by_id", "1", MediaCategory.MANGA) is None


def test_below_threshold_candidate_is_rejected_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    media = {
        "id": 1,
        "title": {"english": "Completely Different Work"},
        "coverImage": {"large": "https://img.test/other.jpg"},
    }

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"Page": {"media": [media]}}})

    with caplog.at_level(logging.WARNING, logger="backend.resolver.catalogs.base"):
        result = _run(AniListCatalog, handler, "search", "Frieren", MediaCategory.ANIME)

    assert result is None
    assert "no good match" in caplog.text


def test_build_adapters_covers_every_catalog() -> None:
    async def _go() -> dict[CatalogName, CatalogAdapter]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(_server_error)) as client:
            return build_adapters(client)

    adapters = asyncio.run(_go())

    assert set(adapters) == set(CatalogName)
    assert all(adapter.name == name for name, adapter in adapters.items())


def _jikan_records(*titles: str) -> list[dict[str, Any]]:
    return [
        {
            "mal_id": index,
            "title": title,
            "images": {"jpg": {"image_url": f"https://cdn.test/{index}.jpg"}},
        }
        for index, title in enumerate(titles, start=1)
    ]


def test_scan_stops_at_first_near_exact_candidate() -> None:
    """A candidate at or above 0.95 ends the scan even if a later one scores higher."""

    # 44 of 46 normalized characters, roughly 0.957
    records = _jikan_records(
        "Legend of the Galactic Heroes Die Neue These 2",
        "Legend of the Galactic Heroes Die Neue These",
    )

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": records})

    result = _run(
        JikanCatalog, handler, "search", "Legend of the Galactic Heroes Die Neue These", MediaCategory.ANIME
    )

    assert result is not None
    assert result.id == "1"
    assert result.title == "Legend of the Galactic Heroes Die Neue These 2"


@pytest.mark.parametrize(
    ("query", "candidate", "accepted"),
    [
        # "berserk" inside "berserk xy": 7/10, exactly the acceptance threshold
        ("Berserk", "Berserk XY", True),
        # "one piece" inside "one piece abc": 9/13, just below it
        ("One Piece", "One Piece Abc", False),
    ],
)
def test_acceptance_threshold_is_inclusive(query: str, candidate: str, accepted: bool) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": _jikan_records(candidate)})

    result = _run(JikanCatalog, handler, "search", query, MediaCategory.MANGA)

    assert (result is not None) is accepted
