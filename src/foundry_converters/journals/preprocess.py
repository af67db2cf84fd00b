"""Markdown preprocessing applied before prose conversion on import."""

import re
from typing import Optional

_FENCE_MARKERS = ("```", "~~~")


def convert_newlines_to_br(content: Optional[str]) -> str:
    """
    Turn single line breaks into <br /> tags so they survive Markdown rendering.

    A line gets a trailing <br /> when it and the next line both have
    content. Paragraph breaks (blank lines) are left alone, and so are
    fenced code blocks, fence lines included.

    Args:
        content: Markdown content

    Returns:
        Content with single line breaks converted, lines joined with "\\n"
    """
    if not content:
        return ""

    lines = re.split(r"\r?\n", content)
    result = []
    in_code_block = False

    for i, line in enumerate(lines):
        is_fence = line.lstrip().startswith(_FENCE_MARKERS)
        if is_fence:
            in_code_block = not in_code_block

        next_line = lines[i + 1] if i + 1 < len(lines) else None
        has_content = bool(line.strip())
        next_has_content = next_line is not None and bool(next_line.strip())

        if not in_code_block and not is_fence and has_content and next_has_content:
            result.append(f"{line}<br />")
        else:
            result.append(line)

    return "\n".join(result)
