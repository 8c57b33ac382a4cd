from __future__ import annotations

import pathlib
import posixpath
import re
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

import yaml

from .config import DATE_FORMAT, DATE_INPUT_FORMATS, SLUG_RE


def slugify(s: str) -> str:
    return re.sub(r"-{2,}", "-", SLUG_RE.sub("-", s.lower()).strip("-"))


def read_yaml(path: pathlib.Path) -> Dict[str, Any]:
    if path.exists():
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {}


def _norm_text(s: str) -> str:
    return s.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')


def coerce_date(v) -> date:
    """
    YAML hands back `date` for bare YYYY-MM-DD scalars and `str` for quoted
    ones. Strings may also be written out ("May 10, 2016"), see
    DATE_INPUT_FORMATS. Anything else is a data error.
    """
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        s = v.strip().strip('"').strip("'")
        try:
            return date.fromisoformat(s)
        except ValueError:
            pass
        for fmt in DATE_INPUT_FORMATS:
            try:
                return datetime.strptime(s, fmt).date()
            except ValueError:
                continue
    raise ValueError(f"invalid date: {v!r}")


def format_date(d: date) -> str:
    return DATE_FORMAT.format(d=d)


def parse_frontmatter(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    s = text.lstrip()
    if not s.startswith("---\n") and not s.startswith("---\r\n"):
        return None, text

    lines = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            fm_text = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            fm = yaml.safe_load(fm_text) or {}
            return fm, body
    return None, text


def relative_url(target: str, current: str) -> str:
    """
    Path of `target` as seen from the page at `current`, both site-absolute
    ("/blog/foo/"). Directory-style targets keep their trailing slash.
    """
    base = current if current.endswith("/") else posixpath.dirname(current)
    rel = posixpath.relpath(target, base or "/")
    if target.endswith("/"):
        rel = "./" if rel == "." else rel + "/"
    return rel
