"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import patch, MagicMock
from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable

from yt_tldr.models.schemas import TranscriptItem


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    previous = dict(os.environ)

    # Set environment variables for testing
    os.environ["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY", "test_api_key")
    os.environ["MISTRAL_API_KEY"] = os.environ.get("MISTRAL_API_KEY", "test_api_key")
    os.environ["ENVIRONMENT"] = "development"

    yield

    os.environ.clear()
    os.environ.update(previous)


@pytest.fixture
def transcript():
    """Return a short transcript."""
    return [
        TranscriptItem(text="Hello and welcome back", offset=0, duration=2.5),
        TranscriptItem(text="Today we build a bird feeder", offset=5.2, duration=3.0),
        TranscriptItem(text="This video is sponsored by Acme", offset=65, duration=4.0),
        TranscriptItem(text="Thanks for watching", offset=3605, duration=2.0),
    ]


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture
def mock_init_chat_model():
    """Mock init_chat_model; its return_value is the chat model."""
    with patch("yt_tldr.core.providers.init_chat_model") as mock_init_model:
        # Spec'd as runnables so `prompt | model` calls their invoke
        mock_model = MagicMock(spec=BaseChatModel)
        mock_model.with_structured_output.return_value = MagicMock(spec=Runnable)

        # Configure invoke to return a mock response
        mock_response = MagicMock()
        mock_response.content = "Summary of %videotitle%\n-item"
        mock_model.invoke.return_value = mock_response

        mock_init_model.return_value = mock_model

        yield mock_init_model


@pytest.fixture
def sent_prompt():
    """Return a function reading the prompt most recently passed to a mocked runnable."""
    def read(runnable):
        prompt_value = runnable.invoke.call_args.args[0]
        return prompt_value.to_messages()[0].content
    return read
