from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from .utils import coerce_date


@dataclass(frozen=True)
class Article:
    title: str
    date: date
    url: str
    external: bool = False


@dataclass(frozen=True)
class ExternalLink:
    date: date
    title: str
    url: str
    external: bool = field(default=True, init=False)

    @classmethod
    def all(cls, data: Dict[str, Any]) -> List["ExternalLink"]:
        return [
            cls(
                coerce_date(attrs.get("date")),
                attrs.get("title") or "",
                attrs.get("url") or "",
            )
            for attrs in (data or {}).values()
        ]


@dataclass(frozen=True)
class Occurrence:
    date: date
    event_name: str
    event_url: Optional[str] = None
    venue_name: str = ""
    venue_url: Optional[str] = None
    slides_url: Optional[str] = None
    video_url: Optional[str] = None

    @property
    def has_video(self) -> bool:
        return bool(self.video_url)

    @classmethod
    def from_hash_list(cls, items) -> Tuple["Occurrence", ...]:
        return tuple(
            cls(
                coerce_date(attrs.get("date")),
                attrs.get("event_name") or "",
                attrs.get("event_url"),
                attrs.get("venue_name") or "",
                attrs.get("venue_url"),
                attrs.get("slides_url"),
                attrs.get("video_url"),
            )
            for attrs in (items or [])
        )


@dataclass(frozen=True)
class Talk:
    title: str
    occurrences: Tuple[Occurrence, ...] = ()

    @classmethod
    def all(cls, data: Dict[str, Any]) -> List["Talk"]:
        return [
            cls(
                attrs.get("title") or "",
                Occurrence.from_hash_list(attrs.get("occurrences")),
            )
            for attrs in (data or {}).values()
        ]


@dataclass(frozen=True)
class Page:
    url: str
    title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None


@dataclass(frozen=True)
class Defaults:
    page_title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Defaults":
        data = data or {}
        return cls(
            data.get("page_title") or "",
            data.get("meta_description") or "",
            data.get("meta_keywords") or "",
        )
