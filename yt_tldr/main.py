"""
Main entry point for the YouTube TL;DR summarizer.
"""

import sys
import argparse
from typing import Callable, Optional

from rich.console import Console

from yt_tldr.config import config
from yt_tldr.core.dispatcher import GenerationDispatcher, ProgressCallback, ProgressEvent
from yt_tldr.core.prompts import validate_length
from yt_tldr.core.summarizer import TranscriptSummarizer
from yt_tldr.core.youtube import YouTubeClient, extract_video_id
from yt_tldr.models.schemas import VideoMetadata, VideoSummary
from yt_tldr.utils.error_handling import SummaryError
from yt_tldr.utils.logger import logging

console = Console()


def summarize_youtube_video(
    video: str,
    length: str = config.DEFAULT_SUMMARY_LENGTH,
    model: str = config.DEFAULT_CLI_MODEL,
    structured: bool = False,
    progress: Optional[ProgressCallback] = None,
    on_metadata: Optional[Callable[[VideoMetadata], None]] = None,
) -> VideoSummary:
    """
    Fetch a video's transcript and metadata and summarize it.

    Args:
        video: YouTube video URL or ID
        length: "short" or "long"
        model: Model identifier
        structured: Use schema-constrained generation
        progress: Progress callback passed to the dispatcher
        on_metadata: Called with the video metadata as soon as it is fetched

    Returns:
        VideoSummary object

    Raises:
        SummaryError: For invalid input, a missing transcript or a failed generation
    """
    summary_length = validate_length(length)
    video_id = extract_video_id(video)
    client = YouTubeClient()

    logging.info(f"Processing video: {video_id} with model: {model}")
    metadata = client.get_video_metadata(video_id)
    if on_metadata:
        on_metadata(metadata)
    transcript = client.get_transcript(video_id)

    summarizer = TranscriptSummarizer(GenerationDispatcher(progress))
    summary = summarizer.summarize(
        transcript,
        summary_length,
        model,
        title=metadata.title,
        creator=metadata.creator,
        structured=structured,
    )

    return VideoSummary(
        video_id=video_id,
        title=metadata.title,
        creator=metadata.creator,
        summary=summary,
        model=model,
        length=summary_length,
    )


def print_progress(event: ProgressEvent, model, detail: Optional[str] = None):
    """Coloured status lines for the command line."""
    if event == ProgressEvent.START:
        console.print(f"Generating response with {model.family.value} ({model.model_name})...", style="yellow")
    elif event == ProgressEvent.SUCCESS:
        console.print(f"Generated response with {model.family.value}", style="green")
    else:
        console.print(f"Failed to generate response with {model.family.value}: {detail}", style="red")


def print_metadata(metadata: VideoMetadata):
    console.print(f"Video title: {metadata.title or 'Unknown'}", style="cyan")
    console.print(f"Creator: {metadata.creator or 'Unknown'}", style="cyan")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-tldr",
        description="Summarize a YouTube video with timestamped smart sections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "models:\n"
            f"  {config.DEFAULT_CLI_MODEL} (default)\n"
            f"  gemini (uses {config.DEFAULT_GEMINI_MODEL})\n"
            + "".join(f"  {name}\n" for name in config.VALID_GEMINI_MODELS)
            + "".join(f"  {name}\n" for name in config.VALID_MISTRAL_MODELS)
            + "  ollama:<model> for other Ollama models"
        ),
    )
    parser.add_argument("--video", "-v", help="YouTube video URL or ID to summarize")
    parser.add_argument("--length", "-l", default=config.DEFAULT_SUMMARY_LENGTH,
                        help="Summary length: short or long (default: short)")
    parser.add_argument("--model", "-m", default=config.DEFAULT_CLI_MODEL,
                        help="AI model to use")
    parser.add_argument("--structured", action="store_true",
                        help="Use schema-constrained generation")
    return parser


def main(argv=None) -> int:
    """Main function to run the application from command line."""
    args = build_parser().parse_args(argv)

    if not args.video:
        console.print("Please provide a YouTube video URL with --video", style="yellow")
        console.print("Use --help for more information", style="cyan")
        return 0

    length = str(args.length).lower()
    if length not in config.SUMMARY_LENGTHS:
        console.print(f"Invalid length specified: \"{args.length}\"", style="red")
        console.print(f"Valid options are: {', '.join(config.SUMMARY_LENGTHS)}", style="red")
        return 1

    console.print("Fetching transcript from YouTube video...", style="yellow")
    console.print(f"Using summary length: {length}", style="cyan")

    try:
        summary = summarize_youtube_video(
            args.video,
            length=length,
            model=args.model,
            structured=args.structured,
            progress=print_progress,
            on_metadata=print_metadata,
        )
    except SummaryError as e:
        console.print(f"Failed to summarize video: {e}", style="red")
        return 1

    print("\n" + "=" * 80)
    print(summary.summary)
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
