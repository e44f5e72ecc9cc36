"""
MangaDex adapter: primary for webcomics, last fallback for manga.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import CandidateMetadata, CatalogName, MediaCategory
from .base import CatalogAdapter, dict_entries, ensure_dict, text_values

PREFERRED_LOCALES = ("en", "en-us", "ja-ro", "ja")


class MangaDexCatalog(CatalogAdapter):
    name = CatalogName.MANGADEX

    async def _search_records(self, title: str, category: MediaCategory) -> List[Dict[str, Any]]:
        payload = await self._request_json(
            "GET",
            f"{self._settings.mangadex_url}/manga",
            params={
                "title": title,
                "limit": self._settings.candidate_limit,
                "includes[]": "cover_art",
            },
        )
        return dict_entries(ensure_dict(payload).get("data"))

    async def _fetch_record(self, record_id: str, category: MediaCategory) -> Optional[Dict[str, Any]]:
        payload = await self._request_json(
            "GET",
            f"{self._settings.mangadex_url}/manga/{record_id}",
            params={"includes[]": "cover_art"},
        )
        data = ensure_dict(payload).get("data")
        return data if isinstance(data, dict) else None

    def _title_variants(self, record: Dict[str, Any]) -> List[str]:
        attributes = ensure_dict(record.get("attributes"))
        titles = ensure_dict(attributes.get("title"))
        variants = [titles.get(locale) for locale in PREFERRED_LOCALES]
        variants.extend(titles.values())
        for alternate in dict_entries(attributes.get("altTitles")):
            variants.extend(alternate.values())
        # locale-preferred entries repeat in the full listing; keep first occurrence
        return list(dict.fromkeys(text_values(variants)))

    def _display_title(self, record: Dict[str, Any]) -> str:
        attributes = ensure_dict(record.get("attributes"))
        titles = ensure_dict(attributes.get("title"))
        preferred = text_values([titles.get(locale) for locale in ("en", "ja-ro", "ja")])
        preferred.extend(text_values(titles.values()))
        return preferred[0] if preferred else ""

    def _cover_url(self, record: Dict[str, Any]) -> str:
        for relation in dict_entries(record.get("relationships")):
            if relation.get("type") != "cover_art":
                continue
            file_name = ensure_dict(relation.get("attributes")).get("fileName")
            if isinstance(file_name, str) and file_name:
                return f"{self._settings.mangadex_covers_url}/{record['id']}/{file_name}.512.jpg"
        return ""

    def _to_metadata(self, record: Dict[str, Any], title: str) -> Optional[CandidateMetadata]:
        thumbnail = self._cover_url(record)
        if not thumbnail:
            return None
        return CandidateMetadata(
            id=str(record["id"]),
            title=title,
            thumbnail_url=thumbnail,
            source=self.name,
        )
