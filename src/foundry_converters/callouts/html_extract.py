"""Recover callout data from journal HTML, leaving {{CALLOUT:N}} placeholders."""

import logging
from typing import List, Optional

from models.callout import CalloutExtraction, CalloutRecord
from ..prose import ProseConverter
from .document import ParsedDocument
from .placeholders import (
    CALLOUT_CLASS,
    CONTENT_CLASS,
    CUSTOM_TITLE_ATTRIBUTE,
    DISCLOSURE_TAG,
    OPEN_ATTRIBUTE,
    PLACEHOLDER_TAG,
    TITLE_CLASS,
    TYPE_ATTRIBUTE,
    make_placeholder,
)

logger = logging.getLogger(__name__)


def _convert_child(doc: ParsedDocument, element, class_name: str, converter: ProseConverter) -> str:
    child = doc.find_child_by_class(element, class_name)
    if child is None:
        return ""
    return converter.make_markdown(doc.inner_html(child)).strip()


def extract_callouts_from_html(html_content: Optional[str], converter: ProseConverter) -> CalloutExtraction:
    """
    Extract .obsidian-callout elements from HTML, replacing them with placeholders.

    Each callout element is replaced with a <p>{{CALLOUT:N}}</p> block. A
    block element (not an inline span) keeps adjacent placeholders apart when
    the document is later run through the prose converter.

    Attribute defaults:
        - data-callout-type missing: "note"
        - data-callout-custom-title missing: treated as an authored title,
          so older hand-written HTML keeps its titles on export

    Args:
        html_content: Journal HTML
        converter: Prose converter with make_markdown, used for title and body

    Returns:
        CalloutExtraction of (HTML with placeholders, list of CalloutRecord).
        If no callouts are found the HTML is returned as given.
    """
    if not html_content:
        return CalloutExtraction("", [])

    doc = ParsedDocument(html_content)
    elements = doc.select_by_class(CALLOUT_CLASS)

    if not elements:
        return CalloutExtraction(html_content, [])

    callouts: List[CalloutRecord] = []

    for index, element in enumerate(elements):
        foldable = doc.tag_name(element) == DISCLOSURE_TAG

        callouts.append(CalloutRecord(
            type=doc.get_attribute(element, TYPE_ATTRIBUTE) or "note",
            title=_convert_child(doc, element, TITLE_CLASS, converter),
            custom_title=doc.get_attribute(element, CUSTOM_TITLE_ATTRIBUTE) != "false",
            foldable=foldable,
            default_open=doc.has_attribute(element, OPEN_ATTRIBUTE) if foldable else True,
            body=_convert_child(doc, element, CONTENT_CLASS, converter),
        ))

        doc.replace_with_block(element, make_placeholder(index), tag=PLACEHOLDER_TAG)

    logger.debug(f"Extracted {len(callouts)} callout(s) from HTML")
    return CalloutExtraction(doc.serialize(), callouts)
