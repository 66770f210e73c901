"""FastAPI application — demo service wired with the request timing pipeline."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from timing_log.config import settings
from timing_log.logging_config import setup_logging
from timing_log.middleware.asgi import PipelineMiddleware
from timing_log.middleware.request_timing import RequestTimingLogger
from timing_log.pipeline import MiddlewareChain
from timing_log.routes import health

# Configure logging before anything else
setup_logging()

_logger = logging.getLogger(__name__)


def build_chain() -> MiddlewareChain:
    """Assemble the pipeline stages from settings."""
    return MiddlewareChain(
        [
            RequestTimingLogger(
                settings.access_log_level,
                sink=logging.getLogger(settings.access_logger),
            ),
        ]
    )


app = FastAPI(
    title="Request Timing Log",
    description="Demo service for the request timing middleware",
    version="0.1.0",
)

app.add_middleware(PipelineMiddleware, chain=build_chain())

app.include_router(health.router)


@app.get("/")
async def root():
    return {
        "service": "timing-log",
        "version": "0.1.0",
        "docs": "/docs",
    }


def start():
    """Entry point for running the server directly."""
    import uvicorn

    _logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "timing_log.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    start()
