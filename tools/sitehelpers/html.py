from __future__ import annotations

from markupsafe import Markup, escape


def _attrs(attrs: dict) -> Markup:
    out = Markup("")
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        out += Markup(' {}="{}"').format(name.rstrip("_"), value)
    return out


def content_tag(name: str, body="", **attrs) -> Markup:
    return Markup("<{0}{1}>{2}</{0}>").format(
        Markup(name), _attrs(attrs), body
    )


def link_to(body, url: str, **attrs) -> Markup:
    """
    <a href="url">body</a>. Plain strings are escaped, Markup bodies are
    embedded as-is.
    """
    return content_tag("a", body, href=url, **attrs)


def image_tag(src: str, **attrs) -> Markup:
    return Markup("<img{}>").format(_attrs({"src": src, **attrs}))


def text(value) -> Markup:
    return escape(value or "")
