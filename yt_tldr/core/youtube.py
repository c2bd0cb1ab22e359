"""
YouTube transcript and metadata sources.
"""

import re
from typing import List

from pytubefix import YouTube
from youtube_transcript_api import YouTubeTranscriptApi

from yt_tldr.models.schemas import TranscriptItem, VideoMetadata
from yt_tldr.utils.error_handling import NoTranscriptAvailable
from yt_tldr.utils.logger import logging

# YouTube URL patterns
_VIDEO_ID_PATTERNS = [
    r"(?:watch\?(?:.*&)?v=)([0-9A-Za-z_-]{11})",
    r"(?:youtu\.be\/)([0-9A-Za-z_-]{11})",
    r"(?:embed\/)([0-9A-Za-z_-]{11})",
    r"(?:youtube\.com\/v\/)([0-9A-Za-z_-]{11})",
    r"(?:shorts\/)([0-9A-Za-z_-]{11})",
]


def extract_video_id(url: str) -> str:
    """Extract the video ID from a YouTube URL; anything else is taken as an ID."""
    url = url.strip()
    for pattern in _VIDEO_ID_PATTERNS:
        match = re.search(pattern, url)
        if match:
            return match.group(1)
    return url


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


class YouTubeClient:
    """Fetches transcripts and metadata for YouTube videos."""

    def __init__(self):
        self.client = YouTubeTranscriptApi()

    def get_transcript(self, video_id: str) -> List[TranscriptItem]:
        """
        Fetch the transcript of a video.

        Args:
            video_id: YouTube video ID

        Returns:
            Transcript items in chronological order

        Raises:
            NoTranscriptAvailable: If the fetch fails or the transcript is empty
        """
        try:
            fetched = self.client.fetch(video_id)
            transcript = [
                TranscriptItem(text=snippet.text, offset=snippet.start, duration=snippet.duration)
                for snippet in fetched
            ]
        except Exception as e:
            logging.error(f"Transcript fetch error for {video_id}: {str(e)}")
            raise NoTranscriptAvailable(
                "Failed to retrieve the transcript for this video. It may not have captions available."
            ) from e

        if not transcript:
            raise NoTranscriptAvailable("This video does not have captions or a transcript available.")

        logging.info(f"Fetched transcript with {len(transcript)} lines for {video_id}")
        return transcript

    def get_video_metadata(self, video_id: str) -> VideoMetadata:
        """
        Fetch the title and creator of a video.

        Failures are not fatal: an empty VideoMetadata is returned instead.
        """
        try:
            yt = YouTube(watch_url(video_id))
            return VideoMetadata(title=yt.title or None, creator=yt.author or None)
        except Exception as e:
            logging.warning(f"Error fetching video metadata for {video_id}: {str(e)}")
            return VideoMetadata()
