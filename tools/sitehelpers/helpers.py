from __future__ import annotations

from typing import Any, Callable, Dict, List

from markupsafe import Markup

from . import content, pages, social, talks
from .content import Item
from .models import Occurrence, Page, Talk
from .site import Site


class ViewHelpers:
    """
    The helper surface a template sees: one instance per rendered page,
    bound to the loaded site and the page being rendered.
    """

    def __init__(self, site: Site, current_page: Page):
        self.site = site
        self.current_page = current_page

    # ---------- Pages

    def absolute_url(self) -> str:
        return pages.absolute_url(self.site.host, self.current_page)

    def is_root(self) -> bool:
        return pages.is_root(self.current_page)

    def open_graph_type(self) -> str:
        return pages.open_graph_type(self.current_page)

    def page_title(self) -> str:
        return pages.page_title(self.site.defaults, self.current_page)

    def meta_description(self) -> str:
        return pages.meta_description(self.site.defaults, self.current_page)

    def meta_keywords(self) -> str:
        return pages.meta_keywords(self.site.defaults, self.current_page)

    # ---------- Listing

    def index_items(self) -> List[Item]:
        return content.index_items(self.site.articles, self.site.external_links)

    def title_and_date_link(self, item: Item) -> Markup:
        return content.title_and_date_link(item, self.current_page.url)

    # ---------- Sharing

    def twitter_share_link(self, title: str) -> Markup:
        return social.twitter_share_link(title, self.absolute_url())

    # ---------- Talks

    def talks(self) -> List[Talk]:
        return self.site.talks

    def talk_event(self, occurrence: Occurrence) -> Markup:
        return talks.talk_event(occurrence)

    def talk_venue(self, occurrence: Occurrence) -> Markup:
        return talks.talk_venue(occurrence)

    def talk_slides(self, occurrence: Occurrence) -> Markup:
        return talks.talk_slides(occurrence)

    def talk_video(self, occurrence: Occurrence) -> Markup:
        return talks.talk_video(occurrence)

    def as_globals(self) -> Dict[str, Callable[..., Any]]:
        names = (
            "absolute_url",
            "is_root",
            "open_graph_type",
            "page_title",
            "meta_description",
            "meta_keywords",
            "index_items",
            "title_and_date_link",
            "twitter_share_link",
            "talks",
            "talk_event",
            "talk_venue",
            "talk_slides",
            "talk_video",
        )
        return {name: getattr(self, name) for name in names}

    def install(self, env) -> None:
        """Expose the helpers as globals of a jinja2.Environment."""
        env.globals.update(self.as_globals())
