"""
Markdown clean-up applied to every generated summary.

All transforms are idempotent: running ``format_markdown`` on its own
output returns it unchanged.
"""

import re
from typing import List, Optional, Tuple

from yt_tldr.core.prompts import TITLE_PLACEHOLDER

# A marker directly followed by another marker character is emphasis or a rule, not a list.
_UNORDERED_MARKER = re.compile(r"^([ \t]*[-*+])(?![\s\-*+]|$)", re.MULTILINE)
_ORDERED_MARKER = re.compile(r"^([ \t]*\d+\.)(?![\s\d]|$)", re.MULTILINE)
_LIST_LINE = re.compile(r"^[ \t]*(?:[-*+](?![-*+])|\d+\.(?!\d))")
_TIMESTAMP = re.compile(r"(?<!:)\b(\d{1,2}):(\d{2})\b")


def substitute_placeholders(markdown: str, title: Optional[str] = None) -> str:
    """Replace the title placeholder; left untouched when no title is given."""
    if not title:
        return markdown
    return markdown.replace(TITLE_PLACEHOLDER, title)


def fix_list_markers(markdown: str) -> str:
    """Put exactly one space after bullet and numbered list markers."""
    markdown = _UNORDERED_MARKER.sub(r"\1 ", markdown)
    return _ORDERED_MARKER.sub(r"\1 ", markdown)


def add_blank_lines_before_lists(markdown: str) -> str:
    """Insert a blank line between a text line and the list that follows it."""
    lines: List[str] = []
    for line in markdown.split("\n"):
        if lines and _LIST_LINE.match(line):
            previous = lines[-1]
            if previous.strip() and not _LIST_LINE.match(previous):
                lines.append("")
        lines.append(line)
    return "\n".join(lines)


def pad_timestamps(markdown: str) -> str:
    """Zero pad the minutes of M:SS timestamps."""
    return _TIMESTAMP.sub(lambda match: f"{match.group(1).zfill(2)}:{match.group(2)}", markdown)


def format_markdown(markdown: str, title: Optional[str] = None) -> str:
    """
    Post-process a generated summary.

    Steps run in this order: placeholder substitution, bullet marker
    spacing, numbered marker spacing, blank lines before lists and
    timestamp padding.

    Args:
        markdown: Summary text returned by the model or the structured formatter
        title: Video title for the placeholder; the placeholder stays when None

    Returns:
        The cleaned markdown
    """
    formatted = substitute_placeholders(markdown, title)
    formatted = fix_list_markers(formatted)
    formatted = add_blank_lines_before_lists(formatted)
    return pad_timestamps(formatted)


def timestamp_to_seconds(timestamp: str) -> int:
    """Convert an ``MM:SS`` or ``H:MM:SS`` timestamp to seconds."""
    total = 0
    for part in timestamp.strip().split(":"):
        total = total * 60 + int(part)
    return total


def find_timestamps(markdown: str) -> List[Tuple[str, int]]:
    """
    List the timestamps in a summary with their offsets in seconds.

    Used by clients that turn timestamps into seek links.
    """
    return [(match.group(0), timestamp_to_seconds(match.group(0))) for match in _TIMESTAMP.finditer(markdown)]
