"""Render extracted callouts to FoundryVTT journal HTML in place of their placeholders."""

import html
import logging
import re
from typing import Optional, Sequence

from models.callout import Callout
from ..prose import ProseConverter
from .placeholders import (
    CALLOUT_CLASS,
    CONTENT_CLASS,
    CUSTOM_TITLE_ATTRIBUTE,
    DISCLOSURE_TAG,
    DISCLOSURE_TITLE_TAG,
    OPEN_ATTRIBUTE,
    STATIC_TAG,
    TITLE_CLASS,
    TYPE_ATTRIBUTE,
    make_placeholder,
)

logger = logging.getLogger(__name__)

_PARAGRAPH_WRAPPER = re.compile(r"^<p>|</p>$")


def type_to_title_case(callout_type: str) -> str:
    """
    Convert a callout type to a display title.

    >>> type_to_title_case("my-custom_type")
    'My Custom Type'
    """
    words = re.split(r"[-_]", callout_type)
    return " ".join(word[:1].upper() + word[1:] for word in words)


def _display_title(callout: Callout, converter: ProseConverter) -> str:
    if callout.custom_title and callout.title:
        title_html = converter.make_html(callout.title).strip()
        return _PARAGRAPH_WRAPPER.sub("", title_html).strip()
    return type_to_title_case(callout.type)


def render_callout(callout: Callout, converter: ProseConverter) -> str:
    """
    Render a single callout to journal HTML.

    Foldable callouts become <details>/<summary> (with ``open`` when
    default_open), everything else a <div>. Both carry the type and whether
    the title was authored, so the HTML can be turned back into Markdown.

    Args:
        callout: Callout to render
        converter: Prose converter used for the title and body

    Returns:
        HTML string for the callout
    """
    custom_title = "true" if callout.custom_title else "false"
    attributes = (
        f'class="{CALLOUT_CLASS}" '
        f'{TYPE_ATTRIBUTE}="{html.escape(callout.type)}" '
        f'{CUSTOM_TITLE_ATTRIBUTE}="{custom_title}"'
    )
    title = _display_title(callout, converter)
    body_html = converter.make_html(callout.body) if callout.body else ""
    content = f'<div class="{CONTENT_CLASS}">{body_html}</div>'

    if callout.foldable:
        open_flag = f" {OPEN_ATTRIBUTE}" if callout.default_open else ""
        return (
            f"<{DISCLOSURE_TAG} {attributes}{open_flag}>"
            f'<{DISCLOSURE_TITLE_TAG} class="{TITLE_CLASS}">{title}</{DISCLOSURE_TITLE_TAG}>'
            f"{content}"
            f"</{DISCLOSURE_TAG}>"
        )

    return (
        f"<{STATIC_TAG} {attributes}>"
        f'<div class="{TITLE_CLASS}">{title}</div>'
        f"{content}"
        f"</{STATIC_TAG}>"
    )


def replace_callout_placeholders(
    content: Optional[str],
    callouts: Sequence[Callout],
    converter: ProseConverter,
) -> str:
    """
    Replace {{CALLOUT:N}} placeholders with rendered callout HTML.

    Placeholders are substituted in index order, first occurrence only.

    Args:
        content: HTML content with callout placeholders
        callouts: Callouts from the same extraction pass
        converter: Prose converter with make_html

    Returns:
        HTML content with callouts rendered
    """
    if not content:
        return ""

    result = content
    for index, callout in enumerate(callouts):
        result = result.replace(make_placeholder(index), render_callout(callout, converter), 1)

    logger.debug(f"Rendered {len(callouts)} callout(s) to HTML")
    return result
