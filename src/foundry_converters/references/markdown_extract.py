"""Find note links and asset references in Obsidian Markdown.

Link syntaxes:

    [[Note]]                    - wiki link
    [[Note#Heading|Shown]]      - wiki link with heading and display text
    ![[Note]]                   - note embed
    [Shown](foundry://UUID)     - link to an existing Foundry document

Asset syntaxes:

    ![alt](path/image.png)      - Markdown image
    [text](path/file.pdf)       - Markdown file link
    ![[image.png]]              - Obsidian embed of a non-note file
"""

import logging
import re
from typing import List, Optional

from models.reference import Reference

logger = logging.getLogger(__name__)

# Groups: 1 embed marker, 2 target, 4 heading, 6 display text
OBSIDIAN_LINK_PATTERN = re.compile(r"(!?)\[\[([^\]#|]+)(#([^\]|]+))?(\|([^\]]+))?\]\]")
FILE_EXTENSION_PATTERN = re.compile(r"\.[^.]+$")
FOUNDRY_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(foundry://([^)]+)\)")

MARKDOWN_IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
MARKDOWN_LINK_PATTERN = re.compile(r"(?<!!)\[([^\]]+)\]\(([^)]+)\)")
OBSIDIAN_EMBED_PATTERN = re.compile(r"!?\[\[([^\]#|]+\.[^\]#|]+)\]\]")

_SKIPPED_ASSET_PREFIXES = ("http://", "https://", "foundry://")


def extract_link_references(markdown_text: Optional[str]) -> List[Reference]:
    """
    Extract note links from Markdown.

    Wiki links come first in document order, then foundry:// links. Embeds of
    non-note files ("![[map.png]]") are assets, not links, and are skipped.
    A trailing ".md" on a wiki link target is dropped.

    Args:
        markdown_text: Markdown content; None or empty yields no references

    Returns:
        List of document References
    """
    if not markdown_text:
        return []

    links: List[Reference] = []

    for match in OBSIDIAN_LINK_PATTERN.finditer(markdown_text):
        is_embed = match.group(1) == "!"
        target = match.group(2).strip()
        heading = match.group(4).strip() if match.group(4) else None
        display_text = match.group(6).strip() if match.group(6) else None

        has_extension = FILE_EXTENSION_PATTERN.search(target) is not None
        if is_embed and has_extension and not target.endswith(".md"):
            continue

        if target.endswith(".md"):
            target = target[:-3]
        if not target:
            logger.debug(f"Skipping wiki link with empty target: {match.group(0)!r}")
            continue

        links.append(Reference(
            source=match.group(0),
            obsidian=target,
            label=display_text or None,
            type="document",
            metadata={"heading": heading, "isEmbed": is_embed},
        ))

    for match in FOUNDRY_LINK_PATTERN.finditer(markdown_text):
        uuid = match.group(2).strip()
        if not uuid:
            continue
        links.append(Reference(
            source=match.group(0),
            foundry=uuid,
            label=match.group(1).strip() or None,
            type="document",
            metadata={"isFoundryProtocol": True},
        ))

    logger.debug(f"Found {len(links)} link reference(s) in markdown")
    return links


def extract_asset_references(markdown_text: Optional[str]) -> List[Reference]:
    """
    Extract asset references from Markdown.

    Images are collected first, then file links, then Obsidian embeds. Note
    targets (".md"), web URLs and foundry:// links are not assets.

    Args:
        markdown_text: Markdown content; None or empty yields no references

    Returns:
        List of asset References
    """
    if not markdown_text:
        return []

    assets: List[Reference] = []

    for match in MARKDOWN_IMAGE_PATTERN.finditer(markdown_text):
        _append_asset(assets, match.group(0), match.group(2), match.group(1), is_image=True)

    for match in MARKDOWN_LINK_PATTERN.finditer(markdown_text):
        _append_asset(assets, match.group(0), match.group(2), match.group(1), is_image=False)

    for match in OBSIDIAN_EMBED_PATTERN.finditer(markdown_text):
        source = match.group(0)
        _append_asset(assets, source, match.group(1), "", is_image=source.startswith("!"))

    logger.debug(f"Found {len(assets)} asset reference(s) in markdown")
    return assets


def _append_asset(assets: List[Reference], source: str, path: str, alt_text: str, is_image: bool) -> None:
    path = path.strip()
    if not path or path.endswith(".md") or path.startswith(_SKIPPED_ASSET_PREFIXES):
        return
    assets.append(Reference(
        source=source,
        obsidian=path,
        label=alt_text.strip() or None,
        type="asset",
        is_image=is_image,
    ))
