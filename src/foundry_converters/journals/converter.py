"""Convert Obsidian vault notes to FoundryVTT journal page HTML and back.

These functions run the content steps of an import or export in order for a
single page. Callouts are lifted out into placeholders before the prose
converter sees the document and put back afterwards.
"""

import logging
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from config import get_preserve_line_breaks
from exceptions import ConversionError
from models.callout import Callout
from ..callouts import (
    extract_callouts,
    extract_callouts_from_html,
    make_placeholder,
    render_callout,
    restore_callout_placeholders,
)
from ..prose import MarkdownProseConverter, ProseConverter
from .frontmatter import extract_frontmatter, prepend_frontmatter
from .preprocess import convert_newlines_to_br

logger = logging.getLogger(__name__)


class JournalContent(BaseModel):
    """Journal page HTML plus the vault frontmatter it was split from."""
    model_config = ConfigDict(frozen=True)

    html: str
    frontmatter: Optional[str] = None


def convert_html_to_markdown(html_content: Optional[str], converter: ProseConverter) -> str:
    """Convert HTML to Markdown, leaving any placeholders in place."""
    if not html_content:
        return ""
    return converter.make_markdown(html_content)


def _render_callout_paragraphs(html: str, callouts: List[Callout], converter: ProseConverter) -> str:
    """Replace each callout's own <p>{{CALLOUT:N}}</p> with the rendered container.

    A bare token elsewhere (e.g. authored inside a code block) is only used
    when the placeholder paragraph is missing.
    """
    for index, callout in enumerate(callouts):
        placeholder = make_placeholder(index)
        rendered = render_callout(callout, converter)
        paragraph = re.compile(rf"<p>\s*{re.escape(placeholder)}\s*</p>")
        html, count = paragraph.subn(lambda _: rendered, html, count=1)
        if count == 0:
            html = html.replace(placeholder, rendered, 1)
    logger.debug(f"Rendered {len(callouts)} callout(s) into journal HTML")
    return html


def convert_markdown_to_journal_html(
    markdown: Optional[str],
    converter: Optional[ProseConverter] = None,
    preserve_line_breaks: Optional[bool] = None,
) -> JournalContent:
    """
    Convert a vault note to journal page HTML.

    Steps:
    1. Split off YAML frontmatter (kept verbatim on the result)
    2. Replace callouts with placeholders
    3. Optionally turn single line breaks into <br />
    4. Render the remaining Markdown with the prose converter
    5. Render callouts into the placeholders' positions

    Args:
        markdown: Note content
        converter: Prose converter (default: MarkdownProseConverter)
        preserve_line_breaks: Apply step 3 (default: OBSIDIAN_BRIDGE_PRESERVE_LINE_BREAKS)

    Returns:
        JournalContent with the page HTML and frontmatter

    Raises:
        ConversionError: If the prose converter fails
    """
    if converter is None:
        converter = MarkdownProseConverter()
    if preserve_line_breaks is None:
        preserve_line_breaks = get_preserve_line_breaks()

    frontmatter, body = extract_frontmatter(markdown)
    # Each placeholder gets its own paragraph so it never shares a <p> with prose
    content, callouts = extract_callouts(body, pad_placeholders=True)
    if preserve_line_breaks:
        content = convert_newlines_to_br(content)

    try:
        html = converter.make_html(content) if content else ""
        html = _render_callout_paragraphs(html, callouts, converter)
    except ConversionError:
        raise
    except Exception as e:
        raise ConversionError(f"Failed to convert markdown to journal HTML: {e}") from e

    logger.info(f"Converted markdown to journal HTML ({len(callouts)} callout(s))")
    return JournalContent(html=html, frontmatter=frontmatter)


def convert_journal_html_to_markdown(
    html_content: Optional[str],
    converter: Optional[ProseConverter] = None,
    frontmatter: Optional[str] = None,
) -> str:
    """
    Convert journal page HTML to a vault note.

    Args:
        html_content: Journal page HTML
        converter: Prose converter (default: MarkdownProseConverter)
        frontmatter: Frontmatter to put back at the top, if any

    Returns:
        Markdown note content

    Raises:
        ConversionError: If the prose converter fails
    """
    if converter is None:
        converter = MarkdownProseConverter()

    try:
        content, callouts = extract_callouts_from_html(html_content, converter)
        markdown = convert_html_to_markdown(content, converter)
    except ConversionError:
        raise
    except Exception as e:
        raise ConversionError(f"Failed to convert journal HTML to markdown: {e}") from e

    markdown = restore_callout_placeholders(markdown, callouts)

    logger.info(f"Converted journal HTML to markdown ({len(callouts)} callout(s))")
    return prepend_frontmatter(frontmatter, markdown)
