"""External catalog adapters sharing the ``search(title, category)`` contract."""
from __future__ import annotations

from typing import Dict

import httpx

from ..models import CatalogName
from ..settings import ResolverSettings
from .anilist import AniListCatalog
from .base import CatalogAdapter, CatalogError
from .jikan import JikanCatalog
from .mangadex import MangaDexCatalog
from .openlibrary import OpenLibraryCatalog

ADAPTER_TYPES = {
    CatalogName.ANILIST: AniListCatalog,
    CatalogName.MAL: JikanCatalog,
    CatalogName.MANGADEX: MangaDexCatalog,
    CatalogName.OPENLIBRARY: OpenLibraryCatalog,
}


def build_adapters(
    client: httpx.AsyncClient, settings: ResolverSettings | None = None
) -> Dict[CatalogName, CatalogAdapter]:
    """Instantiate one adapter per catalog sharing ``client``."""

    resolved = settings or ResolverSettings()
    return {name: adapter_type(client, resolved) for name, adapter_type in ADAPTER_TYPES.items()}


__all__ = [
    "ADAPTER_TYPES",
    "AniListCatalog",
    "CatalogAdapter",
    "CatalogError",
    "JikanCatalog",
    "MangaDexCatalog",
    "OpenLibraryCatalog",
    "build_adapters",
]
