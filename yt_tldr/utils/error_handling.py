"""
Centralized error handling for the application.

Every failure the summary pipeline can surface is a ``SummaryError``. Each
subclass carries a stable ``kind`` and the HTTP status the API layer should
answer with, so callers can present errors without changing their meaning.
"""

from typing import Optional

import httpx
from langchain_core.exceptions import OutputParserException


class SummaryError(Exception):
    """Base class for all summary pipeline errors."""

    kind = "summary_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.kind, "message": self.message}


class NoTranscriptAvailable(SummaryError):
    kind = "no_transcript_available"
    status_code = 400


class InvalidLength(SummaryError, ValueError):
    kind = "invalid_length"
    status_code = 400


class UnsupportedModelError(SummaryError):
    kind = "unsupported_model"
    status_code = 400


class ModelNotFoundError(SummaryError):
    kind = "model_not_found"


class ProviderConnectionError(SummaryError):
    kind = "provider_connection_error"


class MissingCredentialsError(SummaryError):
    kind = "missing_credentials"


class SchemaValidationError(SummaryError):
    kind = "schema_validation_error"


class GenerationFailedError(SummaryError):
    kind = "generation_failed"


_NOT_FOUND_MARKERS = ("not found", "no such model")
_CREDENTIAL_MARKERS = ("api key", "api_key", "unauthorized", "permission denied")


def _status_code_of(error: Exception) -> Optional[int]:
    """Best effort lookup of an HTTP status attached to a provider error."""
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(error, "code", None)
    if status is None:
        response = getattr(error, "response", None)
        status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


def normalize_provider_error(error: Exception, model_name: str) -> SummaryError:
    """
    Map a provider specific exception onto the summary error taxonomy.

    Args:
        error: The exception raised while talking to the provider
        model_name: Concrete model name that was being called

    Returns:
        A SummaryError subclass preserving the original message
    """
    if isinstance(error, SummaryError):
        return error

    message = str(error) or error.__class__.__name__
    lowered = message.lower()
    status = _status_code_of(error)

    if isinstance(error, OutputParserException):
        return SchemaValidationError(f"Structured output did not match the summary schema: {message}")

    if isinstance(error, (ConnectionError, httpx.ConnectError, httpx.ConnectTimeout)):
        return ProviderConnectionError(f"Failed to connect to the provider for model \"{model_name}\": {message}")

    if status == 404 or any(marker in lowered for marker in _NOT_FOUND_MARKERS):
        return ModelNotFoundError(
            f"Model \"{model_name}\" not found. Please check that the model is installed or available: {message}"
        )

    if status in (401, 403) or any(marker in lowered for marker in _CREDENTIAL_MARKERS):
        return MissingCredentialsError(f"Provider rejected the credentials for model \"{model_name}\": {message}")

    if "connect" in lowered:
        return ProviderConnectionError(f"Failed to connect to the provider for model \"{model_name}\": {message}")

    return GenerationFailedError(f"Failed to generate summary: {message}")
