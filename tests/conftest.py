"""Shared fixtures: a throwaway site root with data files and posts."""

from datetime import date
from pathlib import Path

import pytest
import yaml

from sitehelpers.models import Article, Defaults, ExternalLink, Occurrence, Page
from sitehelpers.site import Site


def _write_yaml(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")


@pytest.fixture
def site_root(tmp_path) -> Path:
    """A site root laid out like the real one."""
    data = tmp_path / "data"
    _write_yaml(
        data / "defaults.yml",
        {
            "page_title": "Jeff Cole",
            "meta_description": "Writing and talks",
            "meta_keywords": "ruby, elixir, testing",
        },
    )
    _write_yaml(
        data / "external_links.yml",
        {
            "pipelines": {
                "date": "2016-03-01",
                "title": "Composable Pipelines",
                "url": "https://example.org/pipelines",
            },
            "mocks": {
                "date": "2015-11-20",
                "title": "Mocks and Explicit Contracts",
                "url": "https://example.org/mocks",
            },
        },
    )
    _write_yaml(
        data / "talks.yml",
        {
            "jam": {
                "title": "Building a Chat App",
                "occurrences": [
                    {
                        "date": "2016-05-10",
                        "event_name": "Elixir Meetup",
                        "event_url": "https://meetup.example.org",
                        "venue_name": "The Garage",
                        "slides_url": "https://slides.example.org/jam",
                        "video_url": "https://video.example.org/jam",
                    },
                    {
                        "date": "2016-06-02",
                        "event_name": "Lunch and Learn",
                        "venue_name": "Office",
                        "venue_url": "https://office.example.org",
                    },
                ],
            },
        },
    )

    posts = tmp_path / "source" / "blog" / "posts"
    posts.mkdir(parents=True)
    (posts / "2016-01-05-hello-world.html.md").write_text(
        "---\ntitle: Hello World\n---\n\nFirst post.\n", encoding="utf-8"
    )
    (posts / "2016-03-01-testing-phoenix.html.md").write_text(
        "---\ntitle: Testing Phoenix\ndate: 2016-03-01\n---\n\nBody.\n",
        encoding="utf-8",
    )
    (posts / "2015-12-24-no-frontmatter.html").write_text(
        "<p>No frontmatter here.</p>\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def defaults() -> Defaults:
    return Defaults(
        page_title="Jeff Cole",
        meta_description="Writing and talks",
        meta_keywords="ruby, elixir, testing",
    )


@pytest.fixture
def sample_site(defaults) -> Site:
    return Site(
        host="https://example.com",
        defaults=defaults,
        articles=[
            Article("Hello World", date(2016, 1, 5), "/blog/hello-world/"),
            Article("Same Day Post", date(2016, 3, 1), "/blog/same-day-post/"),
        ],
        external_links=[
            ExternalLink(date(2016, 3, 1), "Pipelines", "https://example.org/p"),
        ],
    )


@pytest.fixture
def linked_occurrence() -> Occurrence:
    return Occurrence(
        date=date(2016, 5, 10),
        event_name="Elixir Meetup",
        event_url="https://meetup.example.org",
        venue_name="The Garage",
        venue_url="https://garage.example.org",
        slides_url="https://slides.example.org/jam",
        video_url="https://video.example.org/jam",
    )


@pytest.fixture
def plain_occurrence() -> Occurrence:
    return Occurrence(
        date=date(2016, 6, 2),
        event_name="Lunch & Learn",
        event_url="",
        venue_name="Office",
        venue_url=None,
    )


@pytest.fixture
def post_page() -> Page:
    return Page(url="/blog/hello-world/", title="Hello World")
