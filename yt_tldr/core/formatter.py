"""
Rendering of structured summaries into the free-text markdown layout.
"""

from typing import Optional

from yt_tldr.core.markdown import timestamp_to_seconds
from yt_tldr.core.prompts import CREATOR_FALLBACK, TITLE_FALLBACK
from yt_tldr.models.schemas import SmartSection, StructuredSummary
from yt_tldr.utils.logger import logging

NO_SECTIONS = "No sections available"


def format_section(section: SmartSection) -> str:
    marker = "[AD] " if section.is_ad else ""
    return f"{section.timestamp} - {section.emoji} **{marker}{section.title}**"


def format_structured_summary(
    summary: StructuredSummary,
    title: Optional[str] = None,
    creator: Optional[str] = None,
) -> str:
    """
    Render a structured summary as markdown.

    Sections are written in the order the model returned them. Placeholders
    are left for ``format_markdown`` to substitute.

    Args:
        summary: Validated structured summary
        title: Video title for the header line
        creator: Video creator for the header line

    Returns:
        Markdown summary
    """
    lines = [
        f"🎬 **Title:** {title or TITLE_FALLBACK}",
        f"👤 **Creator:** {creator or CREATOR_FALLBACK}",
        "",
        "📄 **Summary:**",
        summary.summary,
        "",
        "📝 **Smart Sections:**",
    ]

    sections = summary.smart_sections or []
    if not sections:
        lines.append(NO_SECTIONS)
    else:
        _warn_if_unordered(sections)
        lines.extend(format_section(section) for section in sections)

    return "\n".join(lines)


def _warn_if_unordered(sections):
    previous = -1
    for section in sections:
        try:
            seconds = timestamp_to_seconds(section.timestamp)
        except ValueError:
            logging.warning(f"Smart section \"{section.title}\" has an unreadable timestamp: {section.timestamp}")
            continue
        if seconds < previous:
            logging.warning(f"Smart section \"{section.title}\" at {section.timestamp} is out of chronological order")
        previous = max(previous, seconds)
