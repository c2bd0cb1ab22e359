"""
Module for summarizing transcripts using LLM models.
"""

from typing import Optional, Sequence, Union

from yt_tldr.core.dispatcher import GenerationDispatcher
from yt_tldr.core.formatter import format_structured_summary
from yt_tldr.core.markdown import format_markdown
from yt_tldr.core.prompts import (
    structured_prompt,
    structured_variables,
    summary_prompt,
    summary_variables,
    validate_length,
)
from yt_tldr.core.providers import resolve_model
from yt_tldr.core.transcript import transcript_to_text
from yt_tldr.models.schemas import StructuredSummary, SummaryLength, SummaryRequest, TranscriptItem
from yt_tldr.utils.error_handling import GenerationFailedError
from yt_tldr.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, dispatcher: Optional[GenerationDispatcher] = None):
        """
        Initialize the summarizer.

        Args:
            dispatcher: Dispatcher used for model calls (a default one is created if None)
        """
        self.dispatcher = dispatcher or GenerationDispatcher()

    def summarize(
        self,
        transcript: Sequence[TranscriptItem],
        summary_length: Union[str, SummaryLength],
        model_id: str,
        title: Optional[str] = None,
        creator: Optional[str] = None,
        structured: bool = False,
    ) -> str:
        """
        Summarize a transcript.

        Args:
            transcript: Transcript items in chronological order
            summary_length: "short" or "long"
            model_id: Model identifier, see ``resolve_model``
            title: Video title, substituted for the title placeholder
            creator: Video creator
            structured: Use schema-constrained generation instead of free text

        Returns:
            Markdown summary
        """
        length = validate_length(summary_length)
        model = resolve_model(model_id)
        transcript_text = transcript_to_text(transcript)

        if structured:
            variables = structured_variables(length, transcript_text, title, creator)
            logging.debug(f"Structured prompt for {model.model_name} with {len(transcript_text)} transcript characters")
            result = self.dispatcher.generate_structured(model, structured_prompt, StructuredSummary, variables)
            markdown = format_structured_summary(result, title, creator)
        else:
            variables = dict(summary_variables(length, title, creator), transcript=transcript_text)
            logging.debug(f"Prompt for {model.model_name} with {len(transcript_text)} transcript characters")
            markdown = self.dispatcher.generate_text(model, summary_prompt, variables)

        if not markdown or not markdown.strip():
            raise GenerationFailedError("Failed to generate summary: the model returned an empty response")

        return format_markdown(markdown, title)

    def create_summary(self, request: SummaryRequest) -> str:
        """Summarize from a SummaryRequest."""
        return self.summarize(
            request.transcript,
            request.length,
            request.model_id,
            title=request.title,
            creator=request.creator,
            structured=request.structured,
        )
