from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from typing import List

from .config import (
    DEFAULTS_FILE,
    EXTERNAL_LINKS_FILE,
    ROOT,
    TALKS_FILE,
    data_dir,
    posts_dir,
    site_host,
)
from .models import Article, Defaults, ExternalLink, Talk
from .posts import load_articles
from .utils import read_yaml


@dataclass
class Site:
    """Everything the helpers read, loaded once per build."""

    host: str
    defaults: Defaults = field(default_factory=Defaults)
    articles: List[Article] = field(default_factory=list)
    external_links: List[ExternalLink] = field(default_factory=list)
    talks: List[Talk] = field(default_factory=list)


def load_site(
    root: pathlib.Path = ROOT,
    environment: str | None = None,
) -> Site:
    host = site_host(environment)
    ddir = data_dir(root)

    defaults = Defaults.from_data(read_yaml(ddir / DEFAULTS_FILE))
    external_links = ExternalLink.all(read_yaml(ddir / EXTERNAL_LINKS_FILE))
    talks = Talk.all(read_yaml(ddir / TALKS_FILE))
    print(
        f"✓ loaded {len(external_links)} external links, {len(talks)} talks"
    )

    articles = load_articles(posts_dir(root))

    return Site(
        host=host,
        defaults=defaults,
        articles=articles,
        external_links=external_links,
        talks=talks,
    )
