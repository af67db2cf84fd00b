"""Journal page conversion between Obsidian vault notes and FoundryVTT."""

from .converter import (
    JournalContent,
    convert_html_to_markdown,
    convert_journal_html_to_markdown,
    convert_markdown_to_journal_html,
)
from .frontmatter import extract_frontmatter, merge_frontmatter, prepend_frontmatter
from .preprocess import convert_newlines_to_br

__all__ = [
    "JournalContent",
    "convert_html_to_markdown",
    "convert_journal_html_to_markdown",
    "convert_markdown_to_journal_html",
    "convert_newlines_to_br",
    "extract_frontmatter",
    "merge_frontmatter",
    "prepend_frontmatter",
]
