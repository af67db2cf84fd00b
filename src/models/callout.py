"""Models for Obsidian callout blocks moving between vault Markdown and journal HTML.

Callout is the validated, immutable record produced when parsing Markdown.
CalloutRecord is the plain record recovered from already-rendered journal HTML;
it carries the same fields without construction-time checks.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Union
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class Callout(BaseModel):
    """An Obsidian callout block parsed from Markdown.

    Attributes:
        type: Lowercased callout type identifier (e.g. "note", "my-type")
        title: Raw title text as authored, empty if none
        custom_title: True if the author wrote title text
        foldable: True if the block renders as a collapsible disclosure
        default_open: Initial open state (only meaningful when foldable)
        body: Body text with one level of blockquote markers removed
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: StrictStr = Field(default="", validate_default=True)
    title: str = ""
    custom_title: bool = False
    foldable: bool = False
    default_open: bool = True
    body: str = ""

    @field_validator("type")
    @classmethod
    def _require_type(cls, value: str) -> str:
        if not value:
            raise ValueError("Callout requires a valid type string")
        return value


@dataclass
class CalloutRecord:
    """Callout data recovered from journal HTML.

    Defaults mirror what a bare container element implies: a "note" whose
    title counts as authored unless the HTML says otherwise.
    """
    type: str = "note"
    title: str = ""
    custom_title: bool = True
    foldable: bool = False
    default_open: bool = True
    body: str = ""


class CalloutExtraction(NamedTuple):
    """Content with callouts replaced by {{CALLOUT:N}} placeholders, plus the callouts."""
    content: str
    callouts: List[Union[Callout, CalloutRecord]]
