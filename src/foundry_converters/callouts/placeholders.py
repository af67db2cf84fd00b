"""Placeholder tokens and the HTML marker contract for callout containers.

A placeholder binds one callout's data to its position in the surrounding
document for the duration of a single extraction pass. Index N refers to
position N in the callout list produced by that pass.
"""

PLACEHOLDER_TEMPLATE = "{{{{CALLOUT:{index}}}}}"

# Container markup
CALLOUT_CLASS = "obsidian-callout"
TITLE_CLASS = "callout-title"
CONTENT_CLASS = "callout-content"
TYPE_ATTRIBUTE = "data-callout-type"
CUSTOM_TITLE_ATTRIBUTE = "data-callout-custom-title"
OPEN_ATTRIBUTE = "open"

STATIC_TAG = "div"
DISCLOSURE_TAG = "details"
DISCLOSURE_TITLE_TAG = "summary"

# Block-level so adjacent placeholders survive a trip through the prose converter
PLACEHOLDER_TAG = "p"


def make_placeholder(index: int) -> str:
    """Return the placeholder token for the callout at ``index``.

    >>> make_placeholder(3)
    '{{CALLOUT:3}}'
    """
    return PLACEHOLDER_TEMPLATE.format(index=index)
