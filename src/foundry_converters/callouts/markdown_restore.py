"""Turn {{CALLOUT:N}} placeholders back into Obsidian callout Markdown."""

import logging
from dataclasses import fields
from typing import Any, Mapping, Optional, Sequence, Union

from models.callout import Callout, CalloutRecord
from .placeholders import make_placeholder

logger = logging.getLogger(__name__)

# Keys accepted from mapping records, including the camelCase spellings
_KEY_ALIASES = {
    "customTitle": "custom_title",
    "defaultOpen": "default_open",
}

CalloutLike = Union[Callout, CalloutRecord, Mapping[str, Any]]


def _as_record(callout: CalloutLike) -> CalloutRecord:
    if isinstance(callout, CalloutRecord):
        return callout
    if isinstance(callout, Callout):
        return CalloutRecord(**callout.model_dump())

    known = {f.name for f in fields(CalloutRecord)}
    values = {}
    for key, value in callout.items():
        key = _KEY_ALIASES.get(key, key)
        if key in known:
            values[key] = value
    return CalloutRecord(**values)


def build_callout_markdown(callout: CalloutLike) -> str:
    """
    Build Obsidian callout syntax for one callout.

    Every body line gets a "> " prefix, so a body line that is itself a
    quote ("> nested") comes back with two markers ("> > nested").

    Example:
        >>> build_callout_markdown(CalloutRecord(
        ...     type="danger", title="Danger Zone", custom_title=True,
        ...     foldable=True, default_open=False, body="Collapsed content."))
        '> [!danger]- Danger Zone\\n> Collapsed content.'
    """
    record = _as_record(callout)

    modifier = ""
    if record.foldable:
        modifier = "+" if record.default_open else "-"

    header = f"> [!{record.type}]{modifier}"
    if record.custom_title and record.title:
        header += f" {record.title}"

    if not record.body:
        return header

    body_lines = "\n".join(f"> {line}" for line in record.body.split("\n"))
    return f"{header}\n{body_lines}"


def restore_callout_placeholders(content: Optional[str], callouts: Sequence[CalloutLike]) -> str:
    """
    Replace {{CALLOUT:N}} placeholders with Obsidian callout Markdown.

    Args:
        content: Markdown content with callout placeholders
        callouts: Callout records from the same extraction pass

    Returns:
        Markdown with placeholders replaced, first occurrence of each index only
    """
    if not content:
        return ""

    result = content
    for index, callout in enumerate(callouts):
        result = result.replace(make_placeholder(index), build_callout_markdown(callout), 1)

    logger.debug(f"Restored {len(callouts)} callout(s) to markdown")
    return result
