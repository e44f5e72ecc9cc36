"""
AniList GraphQL adapter (primary catalog for anime and manga).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import CandidateMetadata, CatalogName, MediaCategory
from .base import CatalogAdapter, CatalogError, dict_entries, ensure_dict, text_values

SEARCH_QUERY = """
query ($search: String, $type: MediaType, $perPage: Int) {
  Page(page: 1, perPage: $perPage) {
    media(search: $search, type: $type) {
      id
      title { romaji english native }
      synonyms
      coverImage { large medium }
    }
  }
}
"""

BY_ID_QUERY = """
query ($id: Int) {
  Media(id: $id) {
    id
    title { romaji english native }
    synonyms
    coverImage { large medium }
  }
}
"""


def media_type(category: MediaCategory) -> str:
    return "ANIME" if category == MediaCategory.ANIME else "MANGA"


class AniListCatalog(CatalogAdapter):
    name = CatalogName.ANILIST

    async def _graphql(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        payload = await self._request_json(
            "POST",
            self._settings.anilist_url,
            json={"query": query, "variables": variables},
            headers={"Accept": "application/json"},
        )
        body = ensure_dict(payload)
        if body.get("errors") and not body.get("data"):
            raise CatalogError(f"anilist query failed: {body['errors']}")
        return ensure_dict(body.get("data"))

    async def _search_records(self, title: str, category: MediaCategory) -> List[Dict[str, Any]]:
        data = await self._graphql(
            SEARCH_QUERY,
            {
                "search": title,
                "type": media_type(category),
                "perPage": self._settings.candidate_limit,
            },
        )
        return dict_entries(ensure_dict(data.get("Page")).get("media"))

    async def _fetch_record(self, record_id: str, category: MediaCategory) -> Optional[Dict[str, Any]]:
        try:
            numeric_id = int(record_id)
        except ValueError as exc:
            raise CatalogError(f"anilist ids are numeric, got {record_id!r}") from exc
        data = await self._graphql(BY_ID_QUERY, {"id": numeric_id})
        media = data.get("Media")
        return media if isinstance(media, dict) else None

    def _title_variants(self, record: Dict[str, Any]) -> List[str]:
        titles = ensure_dict(record.get("title"))
        synonyms = record.get("synonyms") or []
        return text_values(
            [titles.get("english"), titles.get("romaji"), titles.get("native"), *synonyms]
        )

    def _display_title(self, record: Dict[str, Any]) -> str:
        titles = ensure_dict(record.get("title"))
        return next(iter(text_values([titles.get("english"), titles.get("romaji"), titles.get("native")])), "")

    def _to_metadata(self, record: Dict[str, Any], title: str) -> Optional[CandidateMetadata]:
        cover = ensure_dict(record.get("coverImage"))
        thumbnail = next(iter(text_values([cover.get("large"), cover.get("medium")])), "")
        return CandidateMetadata(
            id=str(record["id"]),
            title=title,
            thumbnail_url=thumbnail,
            source=self.name,
        )
