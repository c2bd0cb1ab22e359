"""
Tests for the YouTube transcript and metadata sources.
"""

import pytest
from unittest.mock import patch, MagicMock

from yt_tldr.core.youtube import YouTubeClient, extract_video_id
from yt_tldr.models.schemas import TranscriptItem, VideoMetadata
from yt_tldr.utils.error_handling import NoTranscriptAvailable


@pytest.fixture
def mock_transcript_api():
    """Fixture to mock the YouTubeTranscriptApi class."""
    with patch("yt_tldr.core.youtube.YouTubeTranscriptApi") as mock_api:
        yield mock_api.return_value


@pytest.fixture
def mock_youtube():
    """Fixture to mock the YouTube class."""
    with patch("yt_tldr.core.youtube.YouTube") as mock_yt:
        mock_yt_instance = mock_yt.return_value
        mock_yt_instance.title = "Test Video"
        mock_yt_instance.author = "Test Author"
        yield mock_yt


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=V3TUEeB0kW0",
        "https://www.youtube.com/watch?feature=share&v=V3TUEeB0kW0",
        "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R",
        "https://www.youtube.com/embed/V3TUEeB0kW0",
        "https://www.youtube.com/v/V3TUEeB0kW0?version=3",
        "https://www.youtube.com/shorts/V3TUEeB0kW0",
        "V3TUEeB0kW0",
    ],
)
def test_extract_video_id(url):
    assert extract_video_id(url) == "V3TUEeB0kW0"


def test_get_transcript(mock_transcript_api):
    snippet = MagicMock(text="Hello world", start=1.5, duration=2.0)
    mock_transcript_api.fetch.return_value = [snippet]

    transcript = YouTubeClient().get_transcript("V3TUEeB0kW0")

    assert transcript == [TranscriptItem(text="Hello world", offset=1.5, duration=2.0)]
    mock_transcript_api.fetch.assert_called_once_with("V3TUEeB0kW0")


def test_empty_transcript_is_unavailable(mock_transcript_api):
    mock_transcript_api.fetch.return_value = []

    with pytest.raises(NoTranscriptAvailable):
        YouTubeClient().get_transcript("V3TUEeB0kW0")


def test_fetch_failure_is_unavailable(mock_transcript_api):
    mock_transcript_api.fetch.side_effect = RuntimeError("Subtitles are disabled for this video")

    with pytest.raises(NoTranscriptAvailable) as exc_info:
        YouTubeClient().get_transcript("V3TUEeB0kW0")
    assert exc_info.value.status_code == 400


def test_get_video_metadata(mock_transcript_api, mock_youtube):
    metadata = YouTubeClient().get_video_metadata("V3TUEeB0kW0")

    assert metadata == VideoMetadata(title="Test Video", creator="Test Author")
    mock_youtube.assert_called_once_with("https://www.youtube.com/watch?v=V3TUEeB0kW0")


def test_metadata_failure_is_not_fatal(mock_transcript_api, mock_youtube):
    mock_youtube.side_effect = Exception("HTTP Error 429")

    assert YouTubeClient().get_video_metadata("V3TUEeB0kW0") == VideoMetadata()
