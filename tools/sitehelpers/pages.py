from __future__ import annotations

from .models import Defaults, Page


def absolute_url(host: str, page: Page) -> str:
    return host + page.url


def is_root(page: Page) -> bool:
    return page.url == "/"


def open_graph_type(page: Page) -> str:
    return "profile" if is_root(page) else "article"


def page_title(defaults: Defaults, page: Page) -> str:
    default_title = defaults.page_title

    if page.title and page.title.strip():
        return f"{default_title} - {page.title}"
    return default_title


def meta_description(defaults: Defaults, page: Page) -> str:
    return page.meta_description or defaults.meta_description


def meta_keywords(defaults: Defaults, page: Page) -> str:
    return page.meta_keywords or defaults.meta_keywords
