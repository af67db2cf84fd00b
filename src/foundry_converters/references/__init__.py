"""Links and asset references in vault Markdown and FoundryVTT journal HTML.

Both formats are scanned for references, which are then swapped for
{{LINK:N}} / {{ASSET:N}} placeholders before the prose converter runs.
"""

from . import html_extract, markdown_extract
from .replace import ReferenceReplacement, replace_with_placeholders

__all__ = [
    "ReferenceReplacement",
    "html_extract",
    "markdown_extract",
    "replace_with_placeholders",
]
