"""
Jikan (unofficial MyAnimeList REST API) adapter, backup for anime and manga.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import CandidateMetadata, CatalogName, MediaCategory
from .base import CatalogAdapter, dict_entries, ensure_dict, text_values


def jikan_type(category: MediaCategory) -> str:
    return "anime" if category == MediaCategory.ANIME else "manga"


def image_url(record: Dict[str, Any]) -> str:
    images = ensure_dict(record.get("images"))
    jpg = ensure_dict(images.get("jpg"))
    webp = ensure_dict(images.get("webp"))
    candidates = text_values(
        [
            jpg.get("large_image_url"),
            jpg.get("image_url"),
            webp.get("large_image_url"),
            webp.get("image_url"),
        ]
    )
    return candidates[0] if candidates else ""


class JikanCatalog(CatalogAdapter):
    name = CatalogName.MAL

    async def _search_records(self, title: str, category: MediaCategory) -> List[Dict[str, Any]]:
        payload = await self._request_json(
            "GET",
            f"{self._settings.jikan_url}/{jikan_type(category)}",
            params={"q": title, "limit": self._settings.candidate_limit},
        )
        return dict_entries(ensure_dict(payload).get("data"))

    async def _fetch_record(self, record_id: str, category: MediaCategory) -> Optional[Dict[str, Any]]:
        payload = await self._request_json(
            "GET", f"{self._settings.jikan_url}/{jikan_type(category)}/{record_id}"
        )
        data = ensure_dict(payload).get("data")
        return data if isinstance(data, dict) else None

    def _title_variants(self, record: Dict[str, Any]) -> List[str]:
        alternates = [entry.get("title") for entry in dict_entries(record.get("titles"))]
        return text_values(
            [record.get("title_english"), record.get("title"), record.get("title_japanese"), *alternates]
        )

    def _display_title(self, record: Dict[str, Any]) -> str:
        return next(iter(text_values([record.get("title_english"), record.get("title")])), "")

    def _to_metadata(self, record: Dict[str, Any], title: str) -> Optional[CandidateMetadata]:
        thumbnail = image_url(record)
        if not thumbnail:
            return None
        return CandidateMetadata(
            id=str(record["mal_id"]),
            title=title,
            thumbnail_url=thumbnail,
            source=self.name,
        )
