"""Error types and best-effort error rendering helpers."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class RequestError(Exception):
    """A handler failure carrying a description and optional detail."""

    def __init__(self, description: str, detail: str | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.detail = detail

    def __str__(self) -> str:
        return self.description


class MissingStartTimeError(RuntimeError):
    """Raised when ``after`` runs without a matching ``before``.

    This means the pipeline is wired incorrectly, so it is never
    treated as a recoverable request failure.
    """


def describe_error(error: BaseException) -> str:
    """Return a human-readable description of ``error``, or "" if it can't be rendered."""
    try:
        description = getattr(error, "description", None)
        if callable(description):
            description = description()
        if description is None:
            description = str(error)
        return str(description)
    except Exception:
        logger.debug("Could not render description for %s", type(error).__name__, exc_info=True)
        return ""


def error_detail(error: BaseException) -> str | None:
    """Return the structured detail of ``error`` if it has one."""
    try:
        detail = getattr(error, "detail", None)
        if callable(detail):
            detail = detail()
        if detail is None:
            return None
        return str(detail) or None
    except Exception:
        logger.debug("Could not render detail for %s", type(error).__name__, exc_info=True)
        return None
