#!/usr/bin/env python3
from __future__ import annotations

import os
import pathlib
import re

# ---------- Paths

# This assumes the package sits in tools/ at the repo root.
ROOT = pathlib.Path(__file__).resolve().parents[2]
DATA_DIR_NAME = "data"
SOURCE_DIR_NAME = "source"
TEMPLATE_DIR = ROOT / "tools" / "templates"

# ---------- Site

ENVIRONMENTS = {
    "development": "http://localhost:4567",
    "build": "https://jeffcole.github.io",
}
DEFAULT_ENVIRONMENT = os.environ.get("SITE_ENV", "development")

BLOG_PREFIX = "blog"
POSTS_SUBDIR = "posts"
RELATIVE_LINKS = True

DEFAULTS_FILE = "defaults.yml"
EXTERNAL_LINKS_FILE = "external_links.yml"
TALKS_FILE = "talks.yml"

# ---------- Sharing

TWITTER_BASE_URL = "http://twitter.com/home?"
TWITTER_HANDLE = "@obscurehobo"
TWITTER_ICON = "/assets/images/icons/twitter.svg"
TWITTER_LINK_TEXT = "Tweet This"

# ---------- Formats

# January 5, 2016
DATE_FORMAT = "{d:%B} {d.day}, {d.year}"

# Accepted besides ISO YYYY-MM-DD
DATE_INPUT_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%Y/%m/%d")

# {year}-{month}-{day}-{title}.<ext>
POST_FILENAME = re.compile(
    r'^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})-(?P<title>.+?)'
    r'(?P<ext>(?:\.(?:html|md|markdown|erb|haml|slim))+)$'
)
SLUG_RE = re.compile(r"[^a-z0-9.-]+")


def site_host(environment: str | None = None) -> str:
    env = environment or DEFAULT_ENVIRONMENT
    try:
        return ENVIRONMENTS[env]
    except KeyError:
        raise ValueError(
            f"unknown environment {env!r}, expected one of "
            + ", ".join(sorted(ENVIRONMENTS))
        ) from None


def posts_dir(root: pathlib.Path) -> pathlib.Path:
    return root / SOURCE_DIR_NAME / BLOG_PREFIX / POSTS_SUBDIR


def data_dir(root: pathlib.Path) -> pathlib.Path:
    return root / DATA_DIR_NAME
