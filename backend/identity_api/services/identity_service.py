"""Metadata lookup helpers for the identity API."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from ...resolver.catalogs import build_adapters
from ...resolver.metadata import MetadataResolver, create_catalog_client, validate_thumbnail
from ...resolver.models import CandidateMetadata, CatalogName, MediaCategory
from ...resolver.settings import ResolverSettings

logger = logging.getLogger(__name__)


class IdentityService:
    """Wraps the metadata resolver with per-call HTTP clients and a time bound."""

    def __init__(
        self,
        settings: ResolverSettings,
        *,
        resolve_timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._resolve_timeout = resolve_timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return create_catalog_client(self._settings, transport=self._transport)

    async def search(self, title: str, category: MediaCategory) -> Optional[CandidateMetadata]:
        """Run the catalog cascade, giving up after ``resolve_timeout`` seconds."""

        async with self._client() as client:
            resolver = MetadataResolver(build_adapters(client, self._settings))
            try:
                return await asyncio.wait_for(
                    resolver.resolve(title, category), timeout=self._resolve_timeout
                )
            except asyncio.TimeoutError:
                logger.warning(
                    "Metadata lookup for %r timed out after %.1fs", title, self._resolve_timeout
                )
                return None

    async def get_by_id(
        self, record_id: str, source: CatalogName, category: MediaCategory
    ) -> Optional[CandidateMetadata]:
        async with self._client() as client:
            resolver = MetadataResolver(build_adapters(client, self._settings))
            return await resolver.resolve_by_id(record_id, source, category)

    async def validate_thumbnail(self, url: str) -> Optional[str]:
        async with self._client() as client:
            return await validate_thumbnail(url, client=client, settings=self._settings)
