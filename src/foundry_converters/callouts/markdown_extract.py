"""Extract Obsidian callout blocks from Markdown, leaving {{CALLOUT:N}} placeholders.

A callout is a blockquote whose first line is a header such as:

    > [!note]                     - Basic callout
    > [!warning] Title            - Callout with title
    > [!tip]+                     - Foldable, open by default
    > [!danger]- Collapsed Title  - Foldable, closed by default, with title

Lines that look almost like a header (empty type, missing bracket, spaces in
the type) are left untouched, and so are the blockquote lines after them.
"""

import logging
import re
from typing import List, NamedTuple, Optional

from models.callout import Callout, CalloutExtraction
from .placeholders import make_placeholder

logger = logging.getLogger(__name__)

# ASCII letters, digits, underscores and hyphens
_TYPE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
_FOLD_MODIFIERS = ("+", "-")


class CalloutHeader(NamedTuple):
    """Fields read from a callout header line."""
    type: str
    fold_modifier: Optional[str]
    title: str


def parse_callout_header(line: str) -> Optional[CalloutHeader]:
    """
    Parse a callout header line.

    The fold modifier must immediately follow the closing bracket. With any
    whitespace in between, the "+" or "-" is the first character of the title:
    "> [!warning] - Title" is a non-foldable callout titled "- Title".

    Args:
        line: A single line of Markdown, without its newline

    Returns:
        CalloutHeader with the type lowercased and the title trimmed,
        or None if the line is not a callout header
    """
    if not line.startswith(">"):
        return None

    rest = line[1:].lstrip()
    if not rest.startswith("[!"):
        return None

    close = rest.find("]", 2)
    if close == -1:
        return None

    callout_type = rest[2:close]
    if not _TYPE_PATTERN.fullmatch(callout_type):
        return None

    rest = rest[close + 1:]
    fold_modifier = None
    if rest[:1] in _FOLD_MODIFIERS:
        fold_modifier = rest[0]
        rest = rest[1:]

    # Anything glued to the bracket or modifier ("[!note]x", "[!tip]+-") is not a header
    if rest and not rest[0].isspace():
        return None

    return CalloutHeader(
        type=callout_type.lower(),
        fold_modifier=fold_modifier,
        title=rest.strip(),
    )


def _strip_quote_marker(line: str) -> str:
    """Remove the leading '>' and at most one space after it."""
    content = line[1:]
    if content.startswith(" "):
        content = content[1:]
    return content


def _create_callout(header: CalloutHeader, body_lines: List[str]) -> Callout:
    return Callout(
        type=header.type,
        title=header.title,
        custom_title=len(header.title) > 0,
        foldable=header.fold_modifier is not None,
        default_open=header.fold_modifier != "-",
        body="\n".join(body_lines),
    )


def extract_callouts(content: Optional[str], pad_placeholders: bool = False) -> CalloutExtraction:
    """
    Extract Obsidian callout blocks from Markdown content.

    Each callout (header line plus the blockquote lines that follow it) is
    replaced by a single {{CALLOUT:N}} line. A new header ends the previous
    callout's body, so adjacent callouts never merge.

    Args:
        content: Markdown content; None or empty yields empty output
        pad_placeholders: Surround each placeholder line with blank lines so a
            Markdown renderer gives it a paragraph of its own

    Returns:
        CalloutExtraction of (content with placeholders, list of Callout)

    Example:
        >>> content, callouts = extract_callouts("> [!note]\\n> Body.")
        >>> content
        '{{CALLOUT:0}}'
        >>> callouts[0].body
        'Body.'
    """
    if not content:
        return CalloutExtraction("", [])

    lines = content.split("\n")
    callouts: List[Callout] = []
    output_lines: List[str] = []

    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1

        header = parse_callout_header(line)
        if header is None:
            if line.startswith(">") and "[!" in line:
                logger.debug(f"Not a callout header, passing through: {line!r}")
            output_lines.append(line)
            continue

        body_lines = []
        while i < len(lines) and lines[i].startswith(">") and parse_callout_header(lines[i]) is None:
            body_lines.append(_strip_quote_marker(lines[i]))
            i += 1

        callouts.append(_create_callout(header, body_lines))
        placeholder = make_placeholder(len(callouts) - 1)
        output_lines.extend(["", placeholder, ""] if pad_placeholders else [placeholder])

    logger.debug(f"Extracted {len(callouts)} callout(s) from markdown")
    return CalloutExtraction("\n".join(output_lines), callouts)
