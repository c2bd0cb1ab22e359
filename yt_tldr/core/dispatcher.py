"""
Dispatch of prompts to the resolved model provider.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from yt_tldr.core.providers import PromptInput, get_provider
from yt_tldr.models.schemas import ResolvedModel, StructuredSummary
from yt_tldr.utils.error_handling import SchemaValidationError, normalize_provider_error
from yt_tldr.utils.logger import logging


class ProgressEvent(str, Enum):
    START = "start"
    SUCCESS = "success"
    FAILURE = "failure"


ProgressCallback = Callable[[ProgressEvent, ResolvedModel, Optional[str]], None]


def log_progress(event: ProgressEvent, model: ResolvedModel, detail: Optional[str] = None):
    """Default progress callback writing to the application log."""
    if event == ProgressEvent.START:
        logging.info(f"Generating response with {model.family.value} model {model.model_name}...")
    elif event == ProgressEvent.SUCCESS:
        logging.info(f"Generated response with {model.family.value} model {model.model_name}")
    else:
        logging.error(f"Failed to generate response with {model.family.value} model {model.model_name}: {detail}")


class GenerationDispatcher:
    """Sends prompts to a provider and normalizes whatever goes wrong."""

    def __init__(self, progress: Optional[ProgressCallback] = None, temperature: Optional[float] = None):
        """
        Initialize the dispatcher.

        Args:
            progress: Called on start, success and failure of each generation
            temperature: Sampling temperature override for the provider
        """
        self.progress = progress or log_progress
        self.temperature = temperature

    def generate_text(
        self,
        model: ResolvedModel,
        prompt: PromptInput,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Run a free-form completion.

        Args:
            model: Resolved model to call
            prompt: Full prompt string, or a prompt template filled from ``variables``
            variables: Template variables, including the transcript

        Returns:
            Generated text
        """
        return self._dispatch(model, lambda provider: provider.generate(prompt, variables))

    def generate_structured(
        self,
        model: ResolvedModel,
        prompt: PromptInput,
        schema: Type[BaseModel] = StructuredSummary,
        variables: Optional[Dict[str, Any]] = None,
    ) -> BaseModel:
        """
        Run a completion constrained to ``schema``.

        Raises:
            SchemaValidationError: If the provider output does not conform
        """
        return self._dispatch(
            model,
            lambda provider: _coerce_to_schema(provider.generate_structured(prompt, schema, variables), schema),
        )

    def _dispatch(self, model: ResolvedModel, call: Callable[[Any], Any]) -> Any:
        self.progress(ProgressEvent.START, model, None)
        try:
            provider = get_provider(model, self.temperature)
            result = call(provider)
        except Exception as e:
            error = normalize_provider_error(e, model.model_name)
            self.progress(ProgressEvent.FAILURE, model, str(error))
            if error is e:
                raise
            raise error from e
        self.progress(ProgressEvent.SUCCESS, model, None)
        return result


def _coerce_to_schema(result: Any, schema: Type[BaseModel]) -> BaseModel:
    """Validate raw provider output against the schema."""
    if isinstance(result, schema):
        return result
    if result is None:
        raise SchemaValidationError("Provider returned no structured output")
    if isinstance(result, BaseModel):
        result = result.model_dump(by_alias=True)
    try:
        if isinstance(result, (str, bytes)):
            return schema.model_validate_json(result)
        return schema.model_validate(result)
    except ValidationError as e:
        raise SchemaValidationError(f"Structured output did not match the summary schema: {e}") from e

