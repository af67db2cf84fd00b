"""Swap link and asset references in text for {{LINK:N}} / {{ASSET:N}} tokens."""

import logging
from typing import List, NamedTuple, Optional

from models.reference import Reference

logger = logging.getLogger(__name__)

LINK_PLACEHOLDER_TEMPLATE = "{{{{LINK:{index}}}}}"
ASSET_PLACEHOLDER_TEMPLATE = "{{{{ASSET:{index}}}}}"


class ReferenceReplacement(NamedTuple):
    """Text with references replaced, plus the references carrying their placeholders."""
    text: str
    links: List[Reference]
    assets: List[Reference]


def replace_with_placeholders(
    text: Optional[str],
    links: List[Reference],
    assets: List[Reference],
) -> ReferenceReplacement:
    """
    Replace every occurrence of each reference's source text with its placeholder.

    Links are numbered {{LINK:0}}, {{LINK:1}}, ... and assets {{ASSET:0}}, ...
    in list order. Longer sources are replaced first so "[[Dragon Lair]]" is
    not broken up by a shorter "[[Dragon]]"; equal lengths keep links before
    assets, each in list order.

    Args:
        text: Markdown or HTML content; None or empty yields empty output
        links: Document references found in text
        assets: Asset references found in text

    Returns:
        ReferenceReplacement of (text, links, assets); the returned references
        are copies with placeholder set
    """
    if not text:
        return ReferenceReplacement("", [], [])

    numbered_links = [
        link.model_copy(update={"placeholder": LINK_PLACEHOLDER_TEMPLATE.format(index=i)})
        for i, link in enumerate(links)
    ]
    numbered_assets = [
        asset.model_copy(update={"placeholder": ASSET_PLACEHOLDER_TEMPLATE.format(index=i)})
        for i, asset in enumerate(assets)
    ]

    # sorted() is stable, so ties keep links-then-assets order
    for reference in sorted(numbered_links + numbered_assets, key=lambda r: len(r.source), reverse=True):
        text = text.replace(reference.source, reference.placeholder)

    logger.debug(f"Replaced {len(numbered_links)} link(s) and {len(numbered_assets)} asset(s) with placeholders")
    return ReferenceReplacement(text, numbered_links, numbered_assets)
