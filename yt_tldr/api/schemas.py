from pydantic import BaseModel, Field
from typing import Optional

from yt_tldr.config import config


class VideoRequest(BaseModel):
    """Model for requesting video summarization."""
    video_id: Optional[str] = Field(default=None, alias="videoId")
    model: str = config.DEFAULT_API_MODEL
    length: str = config.DEFAULT_SUMMARY_LENGTH
    structured: bool = False

    model_config = {"populate_by_name": True}


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    video_id: str = Field(alias="videoId")
    title: Optional[str] = None
    creator: Optional[str] = None
    summary: str

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    status: str = "ok"
