"""FoundryVTT <-> Obsidian format converters.

Pure conversion logic for moving journal content between FoundryVTT journal
HTML and Obsidian vault Markdown. No network or filesystem access.
"""

from .callouts import (
    extract_callouts,
    extract_callouts_from_html,
    replace_callout_placeholders,
    restore_callout_placeholders,
)
from .journals import convert_journal_html_to_markdown, convert_markdown_to_journal_html
from .prose import IdentityProseConverter, MarkdownProseConverter, ProseConverter
from .references import replace_with_placeholders

__all__ = [
    # Callouts
    "extract_callouts",
    "extract_callouts_from_html",
    "replace_callout_placeholders",
    "restore_callout_placeholders",
    # Journals
    "convert_journal_html_to_markdown",
    "convert_markdown_to_journal_html",
    # Prose
    "IdentityProseConverter",
    "MarkdownProseConverter",
    "ProseConverter",
    # References
    "replace_with_placeholders",
]
