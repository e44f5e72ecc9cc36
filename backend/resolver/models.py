"""
Value types passed through the identity resolution engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class MediaCategory(str, Enum):
    """Kind of serialized work a page belongs to."""

    ANIME = "anime"
    MANGA = "manga"
    WEBCOMIC = "webcomic"
    NOVEL = "novel"


class CatalogName(str, Enum):
    """External catalogs that can supply canonical metadata."""

    ANILIST = "anilist"
    MAL = "mal"
    MANGADEX = "mangadex"
    OPENLIBRARY = "openlibrary"


@dataclass(frozen=True, slots=True)
class PageSignals:
    url: str
    title: str
    body_text: str = ""


@dataclass(frozen=True, slots=True)
class Chapter:
    """Chapter position. Fractional numbers (12.5) are kept as floats."""

    number: Union[int, float]


@dataclass(frozen=True, slots=True)
class Episode:
    number: int


ProgressMark = Optional[Union[Chapter, Episode]]


def progress_to_dict(mark: ProgressMark) -> Dict[str, Union[int, float]]:
    if isinstance(mark, Chapter):
        return {"chapter": mark.number}
    if isinstance(mark, Episode):
        return {"episode": mark.number}
    return {}


def format_progress(mark: ProgressMark) -> str:
    """Short display label such as ``Ch. 12.5`` or ``Ep. 3``."""

    if isinstance(mark, Chapter):
        return f"Ch. {mark.number}"
    if isinstance(mark, Episode):
        return f"Ep. {mark.number}"
    return "No progress"


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Static keyword and known-site table for one category."""

    keywords: Tuple[str, ...]
    sites: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CandidateMetadata:
    """Canonical metadata recovered from one external catalog."""

    id: str
    title: str
    thumbnail_url: str
    source: CatalogName


@dataclass(frozen=True, slots=True)
class CatalogLookup:
    """One step of a cascade: a catalog plus an optional category override."""

    catalog: CatalogName
    category: Optional[MediaCategory] = None


@dataclass(frozen=True, slots=True)
class SearchStrategy:
    primary: CatalogLookup
    fallbacks: Tuple[CatalogLookup, ...] = ()

    def steps(self) -> Tuple[CatalogLookup, ...]:
        return (self.primary, *self.fallbacks)
