"""Obsidian callout round trip between vault Markdown and FoundryVTT journal HTML.

Import: extract_callouts -> prose conversion -> replace_callout_placeholders
Export: extract_callouts_from_html -> prose conversion -> restore_callout_placeholders
"""

from .html_extract import extract_callouts_from_html
from .html_render import render_callout, replace_callout_placeholders, type_to_title_case
from .markdown_extract import CalloutHeader, extract_callouts, parse_callout_header
from .markdown_restore import build_callout_markdown, restore_callout_placeholders
from .placeholders import make_placeholder

__all__ = [
    "CalloutHeader",
    "build_callout_markdown",
    "extract_callouts",
    "extract_callouts_from_html",
    "make_placeholder",
    "parse_callout_header",
    "render_callout",
    "replace_callout_placeholders",
    "restore_callout_placeholders",
    "type_to_title_case",
]
