from __future__ import annotations

import pathlib
from datetime import date
from typing import List

from .config import BLOG_PREFIX, POST_FILENAME
from .models import Article
from .utils import (
    _norm_text,
    coerce_date,
    parse_frontmatter,
    slugify,
)


def article_url(slug: str) -> str:
    return f"/{BLOG_PREFIX}/{slug}/"


def load_article(path: pathlib.Path) -> Article:
    m = POST_FILENAME.match(path.name)
    if not m:
        raise ValueError(
            f"post file name must look like YYYY-MM-DD-title.ext: {path.name}"
        )

    text = _norm_text(path.read_text(encoding="utf-8"))
    fm, _ = parse_frontmatter(text)
    fm = fm or {}

    slug = slugify(m.group("title"))
    title = fm.get("title") or m.group("title").replace("-", " ").title()
    if fm.get("date"):
        published = coerce_date(fm["date"])
    else:
        published = date(
            int(m.group("year")), int(m.group("month")), int(m.group("day"))
        )

    return Article(title=title, date=published, url=article_url(slug))


def load_articles(posts_dir: pathlib.Path) -> List[Article]:
    if not posts_dir.exists():
        print(f"- no posts in {posts_dir}")
        return []

    articles: List[Article] = []
    for p in sorted(posts_dir.iterdir()):
        if not p.is_file() or p.name.startswith("."):
            continue
        if not POST_FILENAME.match(p.name):
            print(f"- skipped {p.name}")
            continue
        articles.append(load_article(p))
    print(f"✓ loaded {len(articles)} articles")
    return articles
