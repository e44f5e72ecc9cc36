"""
Shared plumbing for external catalog adapters.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import httpx

from ..models import CandidateMetadata, CatalogName, MediaCategory
from ..settings import ResolverSettings
from ..similarity import similarity

logger = logging.getLogger(__name__)

# Payload shape problems surface as one of these while walking the JSON.
PAYLOAD_ERRORS = (KeyError, TypeError, AttributeError, ValueError, IndexError)


class CatalogError(RuntimeError):
    """Raised when a catalog is unreachable or returns an unusable payload."""


@dataclass(slots=True)
class ScoredRecord:
    """Best title variant of one catalog record and its similarity score."""

    record: Dict[str, Any]
    score: float
    title: str


def ensure_dict(value: object) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def dict_entries(value: object) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def text_values(values: Iterable[object]) -> List[str]:
    return [value for value in values if isinstance(value, str) and value]


class CatalogAdapter:
    """Base class implementing the uniform ``search``/``get_by_id`` contract.

    Subclasses provide the catalog-specific request and payload handling:
    ``_search_records``, ``_fetch_record``, ``_title_variants``,
    ``_display_title`` and ``_to_metadata``.
    """

    name: CatalogName

    def __init__(self, client: httpx.AsyncClient, settings: ResolverSettings | None = None) -> None:
        self._client = client
        self._settings = settings or ResolverSettings()

    # ------------------------------------------------------------------
    # Uniform contract

    async def search(self, title: str, category: MediaCategory) -> Optional[CandidateMetadata]:
        """Return the best match for ``title`` or ``None`` below the threshold."""

        try:
            records = await self._search_records(title, category)
            best = self.pick_best(title, records)
            if best is None:
                logger.warning("%s: no results for %r", self.name.value, title)
                return None
            if best.score < self._settings.acceptance_threshold:
                logger.warning(
                    "%s: no good match for %r (best score: %.2f)",
                    self.name.value,
                    title,
                    best.score,
                )
                return None
            return self._to_metadata(best.record, best.title)
        except CatalogError as exc:
            logger.warning("%s search failed for %r: %s", self.name.value, title, exc)
        except PAYLOAD_ERRORS as exc:
            logger.warning("%s returned a malformed search payload: %r", self.name.value, exc)
        return None

    async def get_by_id(self, record_id: str, category: MediaCategory) -> Optional[CandidateMetadata]:
        """Fetch one known record directly, without scoring."""

        try:
            record = await self._fetch_record(record_id, category)
            if not record:
                return None
            return self._to_metadata(record, self._display_title(record))
        except CatalogError as exc:
            logger.warning("%s lookup of %r failed: %s", self.name.value, record_id, exc)
        except PAYLOAD_ERRORS as exc:
            logger.warning("%s returned a malformed record: %r", self.name.value, exc)
        return None

    def pick_best(self, query: str, records: List[Dict[str, Any]]) -> Optional[ScoredRecord]:
        best: Optional[ScoredRecord] = None
        for record in records:
            variant_score = 0.0
            variant_title = self._display_title(record)
            for candidate_title in self._title_variants(record):
                score = similarity(query, candidate_title)
                if score > variant_score:
                    variant_score = score
                    variant_title = candidate_title

            if best is None or variant_score > best.score:
                best = ScoredRecord(record=record, score=variant_score, title=variant_title)

            if variant_score >= self._settings.exact_match_score:
                break
        return best

    # ------------------------------------------------------------------
    # HTTP helpers

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogError(
                f"{self.name.value} responded with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogError(f"failed to contact {self.name.value}: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CatalogError(f"{self.name.value} returned invalid JSON") from exc

    # ------------------------------------------------------------------
    # Catalog specific hooks

    async def _search_records(self, title: str, category: MediaCategory) -> List[Dict[str, Any]]:
        raise NotImplementedError

    async def _fetch_record(self, record_id: str, category: MediaCategory) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def _title_variants(self, record: Dict[str, Any]) -> List[str]:
        raise NotImplementedError

    def _display_title(self, record: Dict[str, Any]) -> str:
        raise NotImplementedError

    def _to_metadata(self, record: Dict[str, Any], title: str) -> Optional[CandidateMetadata]:
        raise NotImplementedError
