from __future__ import annotations

from urllib.parse import urlencode

from markupsafe import Markup

from .config import (
    TWITTER_BASE_URL,
    TWITTER_HANDLE,
    TWITTER_ICON,
    TWITTER_LINK_TEXT,
)
from .html import content_tag, image_tag, link_to


class TwitterUrl:
    """
    Share-intent URL for a page:

        http://twitter.com/home?status=Read+%27<title>%27+%40obscurehobo+<url>
    """

    def __init__(self, title: str, absolute_url: str):
        self._title = title
        self._absolute_url = absolute_url

    def __str__(self) -> str:
        return self._base_url() + self._query()

    def status(self) -> str:
        return f"Read '{self._title}' {self._handle()} {self._absolute_url}"

    def _base_url(self) -> str:
        return TWITTER_BASE_URL

    def _query(self) -> str:
        return urlencode({"status": self.status()})

    def _handle(self) -> str:
        return TWITTER_HANDLE


def twitter_share_url(title: str, absolute_url: str) -> str:
    return str(TwitterUrl(title, absolute_url))


def twitter_share_link(title: str, absolute_url: str) -> Markup:
    body = image_tag(TWITTER_ICON) + content_tag("span", TWITTER_LINK_TEXT)
    return link_to(body, twitter_share_url(title, absolute_url), target="_blank")
