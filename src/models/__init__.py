"""Models for content exchanged between Obsidian vaults and FoundryVTT journals."""

from models.callout import (
    Callout,
    CalloutExtraction,
    CalloutRecord,
)
from models.reference import Reference

__all__ = [
    "Callout",
    "CalloutExtraction",
    "CalloutRecord",
    "Reference",
]
