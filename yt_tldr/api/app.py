"""
FastAPI application for the YouTube TL;DR summarizer.
"""

import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from yt_tldr.config import config
from yt_tldr.api.routes import router
from yt_tldr.utils.error_handling import SummaryError
from yt_tldr.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for summarizing YouTube videos into markdown with timestamped smart sections",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=config.CORS_METHODS,
    allow_headers=config.CORS_HEADERS,
    max_age=86400,
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(SummaryError)
async def summary_error_handler(request: Request, exc: SummaryError):
    """Translate pipeline errors into their HTTP status."""
    logging.error(f"{exc.kind}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject request bodies of the wrong shape with a 400."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}"
        for error in exc.errors()
    )
    logging.warning(f"Invalid request to {request.url.path}: {problems}")
    return JSONResponse(
        status_code=400,
        content={"error": "invalid_request", "message": f"Invalid request: {problems}"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.exception(f"Server error: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": "internal_error", "message": f"An unexpected error occurred: {str(exc)}"},
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube TL;DR summarizer API",
    }
