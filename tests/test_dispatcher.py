"""
Tests for the generation dispatcher and provider error normalization.
"""

import os
import httpx
import pytest
from unittest.mock import MagicMock, patch
from langchain_core.exceptions import OutputParserException
from pydantic import ValidationError

from yt_tldr.core.dispatcher import GenerationDispatcher, ProgressEvent
from yt_tldr.core.providers import resolve_model
from yt_tldr.models.schemas import StructuredSummary, TranscriptItem
from yt_tldr.utils.error_handling import (
    GenerationFailedError,
    MissingCredentialsError,
    ModelNotFoundError,
    ProviderConnectionError,
    SchemaValidationError,
    normalize_provider_error,
)

STRUCTURED = {
    "summary": "A build of %videotitle%.",
    "smartSections": [
        {"timestamp": "0:00", "emoji": "🚀", "title": "Intro"},
        {"timestamp": "1:05", "emoji": "📢", "title": "Acme", "isAd": True},
    ],
}


@pytest.fixture
def progress():
    return MagicMock()


@pytest.fixture
def validation_error():
    """A pydantic ValidationError, as raised by LangChain models and parsers."""
    try:
        TranscriptItem(text="Hello world")
    except ValidationError as e:
        return e


def test_generate_text_reports_progress(mock_init_chat_model, progress):
    model = resolve_model("ollama:llama3.2")
    dispatcher = GenerationDispatcher(progress)

    text = dispatcher.generate_text(model, "prompt")

    assert text == "Summary of %videotitle%\n-item"
    assert [c.args[0] for c in progress.call_args_list] == [ProgressEvent.START, ProgressEvent.SUCCESS]


def test_generate_text_calls_provider_once_on_failure(mock_init_chat_model, progress):
    """Test there is no retry and errors are normalized."""
    chat_model = mock_init_chat_model.return_value
    chat_model.invoke.side_effect = httpx.ConnectError("All connection attempts failed")

    with pytest.raises(ProviderConnectionError) as exc_info:
        GenerationDispatcher(progress).generate_text(resolve_model("llama3.2"), "prompt")

    chat_model.invoke.assert_called_once()
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert progress.call_args_list[-1].args[0] == ProgressEvent.FAILURE


def test_missing_credentials_pass_through(mock_init_chat_model, progress):
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(MissingCredentialsError):
            GenerationDispatcher(progress).generate_text(resolve_model("gemini"), "prompt")
    assert progress.call_args_list[-1].args[0] == ProgressEvent.FAILURE


def test_generate_structured_accepts_instance(mock_init_chat_model):
    structured_llm = mock_init_chat_model.return_value.with_structured_output.return_value
    structured_llm.invoke.return_value = StructuredSummary.model_validate(STRUCTURED)

    result = GenerationDispatcher().generate_structured(resolve_model("gemini"), "prompt")

    assert isinstance(result, StructuredSummary)
    assert result.smart_sections[1].is_ad is True
    mock_init_chat_model.return_value.with_structured_output.assert_called_once_with(StructuredSummary)


def test_generate_structured_validates_dict(mock_init_chat_model):
    structured_llm = mock_init_chat_model.return_value.with_structured_output.return_value
    structured_llm.invoke.return_value = STRUCTURED

    result = GenerationDispatcher().generate_structured(resolve_model("mistral-small-latest"), "prompt")

    assert result.summary == "A build of %videotitle%."
    assert result.smart_sections[0].is_ad is False


@pytest.mark.parametrize(
    "raw",
    [
        None,
        {"smartSections": []},
        {"summary": "x", "smartSections": [{"timestamp": "0:00"}]},
        {"summary": "x", "smartSections": [{"timestamp": "0:00", "emoji": "🚀", "title": "   "}]},
    ],
)
def test_generate_structured_rejects_bad_output(mock_init_chat_model, raw):
    structured_llm = mock_init_chat_model.return_value.with_structured_output.return_value
    structured_llm.invoke.return_value = raw

    with pytest.raises(SchemaValidationError):
        GenerationDispatcher().generate_structured(resolve_model("gemini"), "prompt")


def test_output_parser_errors_become_schema_errors(mock_init_chat_model):
    structured_llm = mock_init_chat_model.return_value.with_structured_output.return_value
    structured_llm.invoke.side_effect = OutputParserException("Invalid json output")

    with pytest.raises(SchemaValidationError):
        GenerationDispatcher().generate_structured(resolve_model("ollama:llama3.2"), "prompt")


def test_section_titles_are_stripped(mock_init_chat_model):
    structured_llm = mock_init_chat_model.return_value.with_structured_output.return_value
    structured_llm.invoke.return_value = {
        "summary": "x",
        "smartSections": [{"timestamp": "0:00", "emoji": "🚀", "title": "  Intro  "}],
    }

    result = GenerationDispatcher().generate_structured(resolve_model("gemini"), "prompt")

    assert result.smart_sections[0].title == "Intro"


def test_validation_errors_while_parsing_become_schema_errors(mock_init_chat_model, validation_error):
    structured_llm = mock_init_chat_model.return_value.with_structured_output.return_value
    structured_llm.invoke.side_effect = validation_error

    with pytest.raises(SchemaValidationError):
        GenerationDispatcher().generate_structured(resolve_model("gemini"), "prompt")


def test_validation_errors_building_the_model_are_generation_failures(mock_init_chat_model, validation_error):
    """Test a pydantic error from the chat model constructor is not reported as a schema error."""
    mock_init_chat_model.side_effect = validation_error

    with pytest.raises(GenerationFailedError) as exc_info:
        GenerationDispatcher().generate_text(resolve_model("llama3.2"), "prompt")
    assert exc_info.value.__cause__ is validation_error

    with pytest.raises(GenerationFailedError):
        GenerationDispatcher().generate_structured(resolve_model("llama3.2"), "prompt")


class StatusError(Exception):
    def __init__(self, message, status_code):
        super().__init__(message)
        self.status_code = status_code


@pytest.mark.parametrize(
    "error, expected",
    [
        (StatusError("model 'phi9' not found, try pulling it first", 404), ModelNotFoundError),
        (Exception("no such model"), ModelNotFoundError),
        (ConnectionError("refused"), ProviderConnectionError),
        (Exception("Failed to connect to Ollama"), ProviderConnectionError),
        (StatusError("forbidden", 403), MissingCredentialsError),
        (Exception("API key not valid. Please pass a valid API key."), MissingCredentialsError),
        (Exception("Resource exhausted"), GenerationFailedError),
    ],
)
def test_normalize_provider_error(error, expected):
    normalized = normalize_provider_error(error, "phi9")

    assert isinstance(normalized, expected)
    assert str(error) in normalized.message


def test_generation_failed_is_a_500():
    error = normalize_provider_error(Exception("boom"), "gemini-2.0-flash")
    assert error.status_code == 500
    assert error.to_dict() == {"error": "generation_failed", "message": "Failed to generate summary: boom"}
