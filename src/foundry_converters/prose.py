"""Prose conversion between Markdown and HTML.

The callout converters only need two operations from a prose converter,
``make_html`` and ``make_markdown``. Anything providing them can be injected;
MarkdownProseConverter is the default used for vault import/export.
"""

from typing import Protocol

from markdown_it import MarkdownIt
from markdownify import markdownify


class ProseConverter(Protocol):
    """General-purpose Markdown <-> HTML converter that knows nothing about callouts."""

    def make_html(self, text: str) -> str:
        ...

    def make_markdown(self, html: str) -> str:
        ...


class MarkdownProseConverter:
    """Convert with markdown-it-py (Markdown -> HTML) and markdownify (HTML -> Markdown)."""

    def __init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])

    def make_html(self, text: str) -> str:
        return self._markdown.render(text)

    def make_markdown(self, html: str) -> str:
        return markdownify(html, heading_style="ATX", strong_em_symbol="*", bullets="-")


class IdentityProseConverter:
    """Return text unchanged in both directions.

    Useful for checking the callout round trip without any prose rewriting.
    """

    def make_html(self, text: str) -> str:
        return text

    def make_markdown(self, html: str) -> str:
        return html
