"""
Open Library adapter (bibliographic catalog for novels).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import CandidateMetadata, CatalogName, MediaCategory
from .base import CatalogAdapter, dict_entries, ensure_dict, text_values


class OpenLibraryCatalog(CatalogAdapter):
    name = CatalogName.OPENLIBRARY

    async def _search_records(self, title: str, category: MediaCategory) -> List[Dict[str, Any]]:
        payload = await self._request_json(
            "GET",
            f"{self._settings.openlibrary_url}/search.json",
            params={"title": title, "limit": self._settings.candidate_limit},
        )
        return dict_entries(ensure_dict(payload).get("docs"))

    async def _fetch_record(self, record_id: str, category: MediaCategory) -> Optional[Dict[str, Any]]:
        # work keys look like "/works/OL123W"
        key = record_id if record_id.startswith("/") else f"/{record_id}"
        payload = await self._request_json("GET", f"{self._settings.openlibrary_url}{key}.json")
        if not isinstance(payload, dict):
            return None
        payload.setdefault("key", key)
        return payload

    def _title_variants(self, record: Dict[str, Any]) -> List[str]:
        alternates = record.get("alternative_title") or []
        return text_values([record.get("title"), *alternates])

    def _display_title(self, record: Dict[str, Any]) -> str:
        title = record.get("title")
        return title if isinstance(title, str) else ""

    def _cover_url(self, record: Dict[str, Any]) -> str:
        covers_url = self._settings.openlibrary_covers_url
        cover_id = record.get("cover_i")
        if cover_id is None:
            covers = record.get("covers")
            if isinstance(covers, list) and covers:
                cover_id = covers[0]
        if cover_id is not None:
            return f"{covers_url}/id/{cover_id}-M.jpg"
        isbns = text_values(record.get("isbn") or [])
        if isbns:
            return f"{covers_url}/isbn/{isbns[0]}-M.jpg"
        return ""

    def _to_metadata(self, record: Dict[str, Any], title: str) -> Optional[CandidateMetadata]:
        thumbnail = self._cover_url(record)
        if not thumbnail:
            return None
        record_id = record.get("key") or str(record.get("cover_i"))
        # Open Library keeps the main title as canonical, not the matched variant
        return CandidateMetadata(
            id=str(record_id),
            title=self._display_title(record) or title,
            thumbnail_url=thumbnail,
            source=self.name,
        )
