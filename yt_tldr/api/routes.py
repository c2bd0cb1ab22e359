"""
API routes for the YouTube TL;DR summarizer.
"""

from fastapi import APIRouter, HTTPException

from yt_tldr.api.schemas import HealthResponse, SummaryResponse, VideoRequest
from yt_tldr.core.prompts import validate_length
from yt_tldr.main import summarize_youtube_video
from yt_tldr.utils.logger import logging

router = APIRouter(tags=["youtube"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness check."""
    return HealthResponse()


@router.post("/summarize", response_model=SummaryResponse)
def summarize_video(request: VideoRequest):
    """
    Summarize a YouTube video by ID.

    - 400 when the body is malformed, the video ID is missing, the length is
      invalid, the model is unknown or the video has no transcript
    - 500 when the model fails to generate a summary
    """
    if not request.video_id:
        raise HTTPException(status_code=400, detail="No video ID provided")

    length = validate_length(request.length)

    summary = summarize_youtube_video(
        video=request.video_id,
        length=length.value,
        model=request.model,
        structured=request.structured,
    )
    logging.info(f"Summarized video {summary.video_id} with {summary.model}")

    return SummaryResponse(
        video_id=summary.video_id,
        title=summary.title,
        creator=summary.creator,
        summary=summary.summary,
    )
