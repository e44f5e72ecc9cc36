"""
Cascading metadata resolution across external catalogs.

Each category has a primary catalog and ordered fallbacks. Lookups run one
after another; the first catalog producing a match above the acceptance
threshold wins. A miss in every catalog resolves to ``None``.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from types import MappingProxyType
from typing import AsyncIterator, Mapping, Optional, Protocol
from urllib.parse import quote

import httpx

from .catalogs import build_adapters
from .models import CandidateMetadata, CatalogLookup, CatalogName, MediaCategory, SearchStrategy
from .normalizer import normalize_for_match
from .settings import ResolverSettings

logger = logging.getLogger(__name__)

_PLACEHOLDER_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="140" viewBox="0 0 100 140">'
    '<rect width="100" height="140" fill="#3f3f46"/>'
    '<path d="M35 55 L50 75 L65 55 M35 85 L65 85" stroke="#71717a" stroke-width="3" '
    'fill="none" stroke-linecap="round" stroke-linejoin="round"/>'
    "</svg>"
)
PLACEHOLDER_THUMBNAIL = "data:image/svg+xml," + quote(_PLACEHOLDER_SVG)

SEARCH_STRATEGIES: Mapping[MediaCategory, SearchStrategy] = MappingProxyType(
    {
        MediaCategory.ANIME: SearchStrategy(
            primary=CatalogLookup(CatalogName.ANILIST),
            fallbacks=(CatalogLookup(CatalogName.MAL),),
        ),
        MediaCategory.MANGA: SearchStrategy(
            primary=CatalogLookup(CatalogName.ANILIST),
            fallbacks=(CatalogLookup(CatalogName.MAL), CatalogLookup(CatalogName.MANGADEX)),
        ),
        MediaCategory.WEBCOMIC: SearchStrategy(
            primary=CatalogLookup(CatalogName.MANGADEX),
            fallbacks=(CatalogLookup(CatalogName.ANILIST, MediaCategory.MANGA),),
        ),
        # no usable fallback for novels yet
        MediaCategory.NOVEL: SearchStrategy(primary=CatalogLookup(CatalogName.OPENLIBRARY)),
    }
)


class CatalogSearch(Protocol):
    name: CatalogName

    async def search(self, title: str, category: MediaCategory) -> Optional[CandidateMetadata]:
        ...

    async def get_by_id(self, record_id: str, category: MediaCategory) -> Optional[CandidateMetadata]:
        ...


class MetadataResolver:
    """Runs the per-category catalog cascade over a set of adapters."""

    def __init__(
        self,
        adapters: Mapping[CatalogName, CatalogSearch],
        strategies: Mapping[MediaCategory, SearchStrategy] = SEARCH_STRATEGIES,
    ) -> None:
        self._adapters = adapters
        self._strategies = strategies

    async def resolve(self, title: str, category: MediaCategory) -> Optional[CandidateMetadata]:
        query = normalize_for_match(title)
        if not query:
            logger.debug("Skipping metadata lookup for empty title %r", title)
            return None

        strategy = self._strategies[category]
        for step in strategy.steps():
            adapter = self._adapters.get(step.catalog)
            if adapter is None:
                logger.debug("No adapter configured for %s", step.catalog.value)
                continue
            logger.debug("Searching %s for %r", step.catalog.value, query)
            result = await adapter.search(query, step.category or category)
            if result is not None:
                return result

        logger.info("No catalog matched %r (%s)", title, category.value)
        return None

    async def resolve_by_id(
        self, record_id: str, source: CatalogName, category: MediaCategory
    ) -> Optional[CandidateMetadata]:
        adapter = self._adapters.get(source)
        if adapter is None or not record_id:
            return None
        return await adapter.get_by_id(record_id, category)


def create_catalog_client(
    settings: ResolverSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Instantiate the async HTTP client shared by all catalog adapters."""

    resolved = settings or ResolverSettings()
    return httpx.AsyncClient(
        timeout=resolved.request_timeout,
        headers={"User-Agent": resolved.user_agent},
        follow_redirects=True,
        transport=transport,
    )


@asynccontextmanager
async def _client_scope(
    client: httpx.AsyncClient | None, settings: ResolverSettings
) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return
    async with create_catalog_client(settings) as owned:
        yield owned


async def resolve_metadata(
    title: str,
    category: MediaCategory,
    *,
    client: httpx.AsyncClient | None = None,
    settings: ResolverSettings | None = None,
) -> Optional[CandidateMetadata]:
    """Search the category's catalog cascade for ``title``."""

    resolved = settings or ResolverSettings()
    async with _client_scope(client, resolved) as http:
        resolver = MetadataResolver(build_adapters(http, resolved))
        return await resolver.resolve(title, category)


async def resolve_by_id(
    record_id: str,
    source: CatalogName,
    category: MediaCategory,
    *,
    client: httpx.AsyncClient | None = None,
    settings: ResolverSettings | None = None,
) -> Optional[CandidateMetadata]:
    """Fetch a previously matched record directly from ``source``."""

    resolved = settings or ResolverSettings()
    async with _client_scope(client, resolved) as http:
        resolver = MetadataResolver(build_adapters(http, resolved))
        return await resolver.resolve_by_id(record_id, source, category)


async def validate_thumbnail(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: ResolverSettings | None = None,
) -> Optional[str]:
    """Return ``url`` if a HEAD request succeeds, otherwise ``None``."""

    if not url or url == PLACEHOLDER_THUMBNAIL:
        return None

    resolved = settings or ResolverSettings()
    async with _client_scope(client, resolved) as http:
        try:
            response = await http.head(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("Thumbnail %s unreachable: %s", url, exc)
            return None
    return url if response.is_success else None


def thumbnail_with_fallback(url: str | None) -> str:
    return url or PLACEHOLDER_THUMBNAIL
