"""Tests for page metadata resolution."""

import pytest

from sitehelpers.models import Defaults, Page
from sitehelpers.pages import (
    absolute_url,
    is_root,
    meta_description,
    meta_keywords,
    open_graph_type,
    page_title,
)


def test_absolute_url_joins_host_and_path():
    page = Page(url="/blog/hello/")
    assert absolute_url("https://example.com", page) == "https://example.com/blog/hello/"


class TestPageTitle:
    def test_appends_page_title(self, defaults, post_page):
        assert page_title(defaults, post_page) == "Jeff Cole - Hello World"

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_falls_back_to_default(self, defaults, title):
        assert page_title(defaults, Page(url="/", title=title)) == "Jeff Cole"


class TestMetaTags:
    def test_page_values_win(self, defaults):
        page = Page(url="/x/", meta_description="About x", meta_keywords="x, y")

        assert meta_description(defaults, page) == "About x"
        assert meta_keywords(defaults, page) == "x, y"

    @pytest.mark.parametrize("value", [None, ""])
    def test_blank_values_fall_back(self, defaults, value):
        page = Page(url="/x/", meta_description=value, meta_keywords=value)

        assert meta_description(defaults, page) == "Writing and talks"
        assert meta_keywords(defaults, page) == "ruby, elixir, testing"

    def test_empty_defaults_stay_empty(self):
        page = Page(url="/")
        assert meta_description(Defaults(), page) == ""
        assert meta_keywords(Defaults(), page) == ""


class TestRoot:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("/", True),
            ("", False),
            ("/index.html", False),
            ("/blog/", False),
            ("//", False),
        ],
    )
    def test_is_root_only_for_slash(self, url, expected):
        assert is_root(Page(url=url)) is expected

    def test_open_graph_type(self):
        assert open_graph_type(Page(url="/")) == "profile"
        assert open_graph_type(Page(url="/blog/hello/")) == "article"
