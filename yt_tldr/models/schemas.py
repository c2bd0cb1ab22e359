"""
Data models for the YouTube TL;DR summarizer.
"""
import time
from enum import Enum
from typing import Annotated, Optional, List
from pydantic import BaseModel, Field, StringConstraints


class SummaryLength(str, Enum):
    """Accepted summary lengths."""
    SHORT = "short"
    LONG = "long"


class ProviderFamily(str, Enum):
    """Language model backends the summarizer can dispatch to."""
    GEMINI = "gemini"
    OLLAMA = "ollama"
    MISTRAL = "mistral"


class TranscriptItem(BaseModel):
    """One caption line of a video transcript."""
    text: str
    offset: float = Field(ge=0, description="Start of the line in seconds")
    duration: float = Field(ge=0, description="Length of the line in seconds")

    model_config = {"frozen": True}


class VideoMetadata(BaseModel):
    """Title and creator of a video, either of which may be unknown."""
    title: Optional[str] = None
    creator: Optional[str] = None

    model_config = {"frozen": True}


class SummaryRequest(BaseModel):
    """Everything the pipeline needs to summarize one video."""
    transcript: List[TranscriptItem]
    length: SummaryLength = SummaryLength.SHORT
    model_id: str
    title: Optional[str] = None
    creator: Optional[str] = None
    structured: bool = False

    model_config = {"protected_namespaces": ()}


class ResolvedModel(BaseModel):
    """A model identifier resolved to a provider family and concrete model name."""
    family: ProviderFamily
    model_name: str

    model_config = {"frozen": True, "protected_namespaces": ()}


class SmartSection(BaseModel):
    """A timestamped highlight of the video."""
    timestamp: str = Field(description="Start of the section as MM:SS")
    emoji: str = Field(description="A single emoji describing the section")
    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        description="Short title of the section"
    )
    is_ad: bool = Field(default=False, alias="isAd", description="True when the section is an advertisement")

    model_config = {"populate_by_name": True}


class SummaryMetadata(BaseModel):
    """Metadata echoed back by the model."""
    summary_length: SummaryLength = Field(alias="summaryLength")
    video_title: Optional[str] = Field(default=None, alias="videoTitle")

    model_config = {"populate_by_name": True}


class StructuredSummary(BaseModel):
    """Schema-constrained summary of a video transcript."""
    summary: str = Field(description="Short paragraph covering the overall topic and key takeaways")
    smart_sections: List[SmartSection] = Field(
        default_factory=list,
        alias="smartSections",
        description="Major sections of the video in chronological order",
    )
    metadata: Optional[SummaryMetadata] = None

    model_config = {"populate_by_name": True}


class VideoSummary(BaseModel):
    """Model for a finished video summary."""
    video_id: str
    title: Optional[str] = None
    creator: Optional[str] = None
    summary: str
    model: str
    length: SummaryLength
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
