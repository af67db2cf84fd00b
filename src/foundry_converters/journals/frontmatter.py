"""
YAML frontmatter extraction, prepending, and merging.

Frontmatter is carried as the raw string between the ``---`` delimiters so
a page exported back to the vault keeps its exact formatting. Merging (used
when several vault notes end up in one journal entry) is the only place the
YAML is actually parsed.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r"\A---\r?\n(.+?)\r?\n---\r?\n", re.DOTALL)


def extract_frontmatter(content: Optional[str]) -> Tuple[Optional[str], str]:
    """
    Split leading YAML frontmatter off Markdown content.

    Args:
        content: Markdown content

    Returns:
        Tuple of (frontmatter without delimiters or None, remaining content)
    """
    if not content:
        return None, ""

    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None, content

    return match.group(1), content[match.end():]


def prepend_frontmatter(frontmatter: Optional[str], content: str) -> str:
    """Re-attach frontmatter with its delimiters. No-op when frontmatter is None."""
    if frontmatter is None:
        return content
    return f"---\n{frontmatter}\n---\n{content}"


def _parse_mapping(frontmatter: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = yaml.safe_load(frontmatter)
    except yaml.YAMLError as e:
        logger.debug(f"Frontmatter is not valid YAML: {e}")
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


def merge_frontmatter(frontmatter_blocks: Sequence[Optional[str]]) -> Tuple[Optional[str], List[str]]:
    """
    Merge several frontmatter strings into one.

    Shallow merge: the first value for a key wins, and every key whose later
    value differs produces a warning. If any block cannot be parsed as a YAML
    mapping, the first block is returned unchanged.

    Args:
        frontmatter_blocks: Frontmatter strings; None entries are skipped

    Returns:
        Tuple of (merged frontmatter or None, warnings)
    """
    blocks = [block for block in frontmatter_blocks if block is not None]

    if not blocks:
        return None, []
    if len(blocks) == 1:
        return blocks[0], []

    warnings: List[str] = []
    parsed_blocks = []

    for index, block in enumerate(blocks):
        parsed = _parse_mapping(block)
        if parsed is None:
            warnings.append(f"Could not parse frontmatter at index {index}, falling back to first frontmatter")
            logger.warning(warnings[-1])
            return blocks[0], warnings
        parsed_blocks.append(parsed)

    merged: Dict[str, Any] = {}
    for parsed in parsed_blocks:
        for key, value in parsed.items():
            if key not in merged:
                merged[key] = value
            elif merged[key] != value:
                warnings.append(f'Conflict on key "{key}": using value from first occurrence')
                logger.warning(warnings[-1])

    serialized = yaml.safe_dump(merged, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return serialized.rstrip("\n"), warnings
