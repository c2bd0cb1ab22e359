"""
Uvicorn launcher for the summarizer API.
"""

import os
import argparse
import uvicorn

from yt_tldr.config import config
from yt_tldr.utils.logger import logging

APP_PATH = "yt_tldr.api.app:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yt-tldr-api", description=f"{config.APP_NAME} API server")
    parser.add_argument("--host", default=config.API_HOST,
                        help=f"Interface to listen on (default: {config.API_HOST}, env API_HOST)")
    parser.add_argument("--port", type=int, default=config.API_PORT,
                        help=f"Port to listen on (default: {config.API_PORT}, env API_PORT)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    return parser


def main(argv=None):
    """Serve the API until interrupted."""
    args = build_parser().parse_args(argv)

    # Warn about missing credentials before the first request does
    config.initialize()

    environment = os.getenv("ENVIRONMENT", "development")
    logging.info(f"Serving {config.APP_NAME} v{config.APP_VERSION} ({environment}) on {args.host}:{args.port}")

    uvicorn.run(
        APP_PATH,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
