from __future__ import annotations

from typing import Any, Dict, List

from markupsafe import Markup

from .html import link_to, text
from .models import Occurrence, Talk


def talks(data: Dict[str, Any]) -> List[Talk]:
    return Talk.all(data)


def _linked_or_plain(name: str, url) -> Markup:
    if url:
        return link_to(name, url)
    return text(name)


def talk_event(occurrence: Occurrence) -> Markup:
    return _linked_or_plain(occurrence.event_name, occurrence.event_url)


def talk_venue(occurrence: Occurrence) -> Markup:
    return _linked_or_plain(occurrence.venue_name, occurrence.venue_url)


def talk_slides(occurrence: Occurrence) -> Markup:
    if not occurrence.slides_url:
        return Markup("")
    return link_to("Slides", occurrence.slides_url)


def talk_video(occurrence: Occurrence) -> Markup:
    if not occurrence.has_video:
        return Markup("")
    return link_to("Video", occurrence.video_url)
