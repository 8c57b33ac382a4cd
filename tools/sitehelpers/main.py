#!/usr/bin/env python3
"""
View helpers for the blog's static build.

- Articles  <- source/blog/posts/YYYY-MM-DD-<slug>.<ext> (optional frontmatter)
- Links     <- data/external_links.yml
- Talks     <- data/talks.yml
- Defaults  <- data/defaults.yml (page_title, meta_description, meta_keywords)

Running this module loads the site for an environment and prints the
head tags and index listing for one page, rendered through the same
Jinja2 globals the templates use.
"""

from __future__ import annotations

import argparse
import pathlib
import sys

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import DEFAULT_ENVIRONMENT, ENVIRONMENTS, ROOT, TEMPLATE_DIR, data_dir
from .helpers import ViewHelpers
from .models import Page
from .site import load_site

PREVIEW_TEMPLATE = "preview.html.j2"


def make_env(template_dir: pathlib.Path = TEMPLATE_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_preview(helpers: ViewHelpers, env: Environment | None = None) -> str:
    env = env or make_env()
    helpers.install(env)
    return env.get_template(PREVIEW_TEMPLATE).render()


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    ap.add_argument(
        "--env",
        default=DEFAULT_ENVIRONMENT,
        choices=sorted(ENVIRONMENTS),
        help="site environment (default: %(default)s)",
    )
    ap.add_argument(
        "--root",
        type=pathlib.Path,
        default=ROOT,
        help="site root holding data/ and source/",
    )
    ap.add_argument("--page", default="/", help="page path to preview")
    ap.add_argument("--title", default=None, help="page title")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.env not in ENVIRONMENTS:
        print(
            f"ERROR: unknown environment {args.env!r}, expected one of "
            + ", ".join(sorted(ENVIRONMENTS)),
            file=sys.stderr,
        )
        sys.exit(1)

    if not data_dir(args.root).exists():
        print(
            f"ERROR: data/ missing at site root {args.root}",
            file=sys.stderr,
        )
        sys.exit(1)

    site = load_site(args.root, args.env)
    helpers = ViewHelpers(site, Page(url=args.page, title=args.title))
    print(render_preview(helpers))


if __name__ == "__main__":
    main()
