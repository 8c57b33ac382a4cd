from __future__ import annotations

from typing import List, Sequence, Union

from markupsafe import Markup

from .config import RELATIVE_LINKS
from .html import content_tag, link_to
from .models import Article, ExternalLink
from .utils import format_date, relative_url

Item = Union[Article, ExternalLink]


def index_items(
    articles: Sequence[Article],
    external_links: Sequence[ExternalLink],
) -> List[Item]:
    """
    Articles and external links in one list, newest first. `sorted` is
    stable, so items sharing a date keep their input order.
    """
    items: List[Item] = [*articles, *external_links]
    return sorted(items, key=lambda item: item.date, reverse=True)


def item_href(item: Item, current_url: str = "/") -> str:
    if item.external:
        return item.url
    if RELATIVE_LINKS:
        return relative_url(item.url, current_url)
    return item.url


def title_and_date_link(item: Item, current_url: str = "/") -> Markup:
    body = content_tag("h2", item.title) + content_tag(
        "p", format_date(item.date)
    )
    return link_to(body, item_href(item, current_url))
