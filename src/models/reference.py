"""Model for links and assets referenced from vault notes or journal pages."""

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator


class Reference(BaseModel):
    """A document link or asset found in Markdown or journal HTML.

    Attributes:
        source: The exact text matched in the input (e.g. "[[Dragon Lair]]")
        obsidian: Vault-side target (note name or asset path), empty if unknown
        foundry: Foundry-side target (UUID or asset path), None if unknown
        label: Display text, None if the link has none
        placeholder: {{LINK:N}} / {{ASSET:N}} token once assigned
        type: "document" for note/entity links, "asset" for files
        is_image: True for images and image embeds
        metadata: Extra per-syntax details (heading, isEmbed, ...)
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    source: StrictStr = Field(default="", validate_default=True)
    obsidian: str = ""
    foundry: Optional[str] = None
    label: Optional[str] = None
    placeholder: Optional[str] = None
    type: Literal["document", "asset"] = "document"
    is_image: bool = False
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("source")
    @classmethod
    def _require_source(cls, value: str) -> str:
        if not value:
            raise ValueError("Reference requires a valid source string")
        return value

    @model_validator(mode="after")
    def _require_target(self) -> "Reference":
        if not self.obsidian and not self.foundry:
            raise ValueError("Reference requires either obsidian or foundry to be set")
        return self
