"""
Conversion of timestamped transcripts into prompt-ready text.
"""

from typing import Any, Iterable, Mapping, Union

from yt_tldr.models.schemas import TranscriptItem


def format_offset(offset: float) -> str:
    """Render an offset in seconds as zero padded MM:SS."""
    minutes = int(offset // 60)
    seconds = int(offset % 60)
    return f"{minutes:02d}:{seconds:02d}"


def transcript_to_text(transcript: Iterable[Union[TranscriptItem, Mapping[str, Any]]]) -> str:
    """
    Convert transcript items into ``MM:SS - text`` lines.

    Args:
        transcript: Transcript items in chronological order. Plain mappings
            are validated into TranscriptItem first.

    Returns:
        The lines joined by newlines, or an empty string for an empty transcript
    """
    lines = []
    for item in transcript:
        if not isinstance(item, TranscriptItem):
            item = TranscriptItem.model_validate(item)
        lines.append(f"{format_offset(item.offset)} - {item.text}")
    return "\n".join(lines)
