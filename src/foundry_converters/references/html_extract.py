"""Find document links and asset references in FoundryVTT journal HTML.

Document links use Foundry's enricher syntax:

    @UUID[Actor.abc123]{Bob the NPC}
    @UUID[JournalEntry.abc.JournalEntryPage.def]{Page}
    @UUID[Actor.abc123]

Assets are <img> tags and <a href> file links pointing at local paths.
"""

import logging
import re
from typing import Callable, List, Optional, Set

from models.reference import Reference

logger = logging.getLogger(__name__)

NameLookup = Callable[[str], Optional[str]]

# Groups: 1 UUID, 2 display label (may be empty or absent)
UUID_PATTERN = re.compile(r"@UUID\[([^\]]+)\](?:\{([^}]*)\})?")
IMG_TAG_PATTERN = re.compile(r"<img[^>]*>", re.IGNORECASE)
IMG_SRC_PATTERN = re.compile(r"src=[\"']([^\"']+)[\"']", re.IGNORECASE)
IMG_ALT_PATTERN = re.compile(r"alt=[\"']([^\"']*)[\"']", re.IGNORECASE)
ANCHOR_TAG_PATTERN = re.compile(
    r"<a\s+[^>]*href=[\"']([^\"']+)[\"'][^>]*>([^<]+)</a>",
    re.IGNORECASE,
)

_SKIPPED_ASSET_PREFIXES = ("http://", "https://", "data:")


def is_journal_uuid(uuid: str) -> bool:
    """True for JournalEntry UUIDs, including compendium and page UUIDs."""
    return uuid.startswith("JournalEntry.") or ".JournalEntry." in uuid


def extract_link_references(
    html_content: Optional[str],
    name_lookup: Optional[NameLookup] = None,
) -> List[Reference]:
    """
    Extract @UUID document links from journal HTML.

    Args:
        html_content: Journal page HTML; None or empty yields no references
        name_lookup: Resolves a UUID to a document name for links written
            without a label. Returning None (or no lookup) labels the link
            with the UUID itself.

    Returns:
        List of document References with the UUID as the foundry target
    """
    if not html_content:
        return []

    links: List[Reference] = []

    for match in UUID_PATTERN.finditer(html_content):
        uuid = match.group(1).strip()
        if not uuid:
            continue

        label = (match.group(2) or "").strip()
        if not label:
            label = (name_lookup(uuid) if name_lookup else None) or uuid

        links.append(Reference(
            source=match.group(0),
            foundry=uuid,
            label=label,
            type="document",
            metadata={"isJournalReference": is_journal_uuid(uuid)},
        ))

    logger.debug(f"Found {len(links)} link reference(s) in HTML")
    return links


def extract_asset_references(
    html_content: Optional[str],
    asset_path_prefix: str = "",
) -> List[Reference]:
    """
    Extract image and file-link assets from journal HTML.

    Images are collected before anchors. A path seen once is not reported
    again, whichever tag it came from.

    Args:
        html_content: Journal page HTML; None or empty yields no references
        asset_path_prefix: Foundry data path prefix removed to form the vault
            path (e.g. "worlds/my-world/assets")

    Returns:
        List of asset References; foundry holds the path as written in the
        HTML, obsidian the path with the prefix removed
    """
    if not html_content:
        return []

    assets: List[Reference] = []
    seen_paths: Set[str] = set()

    for match in IMG_TAG_PATTERN.finditer(html_content):
        img_tag = match.group(0)
        src_match = IMG_SRC_PATTERN.search(img_tag)
        if not src_match:
            continue
        alt_match = IMG_ALT_PATTERN.search(img_tag)
        alt_text = alt_match.group(1).strip() if alt_match else ""
        _append_asset(assets, seen_paths, img_tag, src_match.group(1), alt_text, asset_path_prefix, is_image=True)

    for match in ANCHOR_TAG_PATTERN.finditer(html_content):
        _append_asset(
            assets, seen_paths, match.group(0), match.group(1), match.group(2).strip(),
            asset_path_prefix, is_image=False,
        )

    logger.debug(f"Found {len(assets)} asset reference(s) in HTML")
    return assets


def strip_path_prefix(path: str, prefix: str) -> str:
    """
    Remove a data path prefix from an asset path.

    Backslashes in either argument are treated as forward slashes. A path
    that does not start with the prefix is returned unchanged.
    """
    if not prefix:
        return path

    normalized_path = path.replace("\\", "/")
    normalized_prefix = prefix.replace("\\", "/")

    if not normalized_path.startswith(normalized_prefix):
        return path

    stripped = normalized_path[len(normalized_prefix):]
    return stripped[1:] if stripped.startswith("/") else stripped


def _append_asset(
    assets: List[Reference],
    seen_paths: Set[str],
    source: str,
    path: str,
    label: str,
    prefix: str,
    is_image: bool,
) -> None:
    full_path = path.strip()
    if not full_path or full_path.startswith(_SKIPPED_ASSET_PREFIXES) or full_path in seen_paths:
        return
    seen_paths.add(full_path)
    assets.append(Reference(
        source=source,
        foundry=full_path,
        obsidian=strip_path_prefix(full_path, prefix),
        label=label or None,
        type="asset",
        is_image=is_image,
    ))
