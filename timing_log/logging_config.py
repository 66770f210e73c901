"""Logging configuration.

Provides JSON or text logging based on the TIMING_LOG_LOG_FORMAT setting.
Access lines are plain positional messages either way; JSON output wraps
them with timestamp, level and logger fields for log aggregation.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from timing_log.config import Settings, settings as default_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure logging for the application.

    Respects TIMING_LOG_LOG_LEVEL and TIMING_LOG_LOG_FORMAT settings.
    """
    settings = settings or default_settings
    log_level = getattr(logging, settings.log_level, logging.INFO)
    root_logger = logging.getLogger()

    # Remove existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(
            JsonFormatter(
                fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
                datefmt="%Y-%m-%dT%H:%M:%S%z",
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # uvicorn's own access log would duplicate ours
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
