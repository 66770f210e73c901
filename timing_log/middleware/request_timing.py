"""Request timing middleware.

Logs one positional line per completed request:

    <client> [<rfc3339 time>] <METHOD> <path> - <elapsed>ms <status>[: <error>]

The timestamp is taken when the line is emitted, not when the request
arrived, so it trails the request start by the elapsed time.
"""

from __future__ import annotations

import logging
from typing import Protocol

from timing_log.clock import Clock, SystemClock, rfc3339
from timing_log.errors import MissingStartTimeError, describe_error, error_detail
from timing_log.models import Failure, Level, Outcome, RequestContext
from timing_log.pipeline import Middleware

logger = logging.getLogger(__name__)

ACCESS_LOGGER = "timing_log.access"
FAILURE_STATUS = 500
UNKNOWN_STATUS = 0

_NS_PER_MS = 1_000_000


class LogSink(Protocol):
    def log(self, level: int, msg: str) -> None: ...


def effective_level(configured: Level, outcome: Outcome) -> Level:
    """Failures always log at ERROR; successes use the configured level."""
    if isinstance(outcome, Failure):
        return Level.ERROR
    return configured


def response_status(response: object) -> int:
    """Status code of ``response``, or 0 when it doesn't carry one."""
    status = getattr(response, "status_code", None)
    if not isinstance(status, int):
        logger.warning(
            "Response of type %s has no integer status_code; logging status 0",
            type(response).__name__,
        )
        return UNKNOWN_STATUS
    return status


def failure_suffix(error: BaseException) -> str:
    suffix = f": {describe_error(error)}"
    detail = error_detail(error)
    if detail:
        suffix = f"{suffix} {detail}"
    return suffix


def format_access_line(
    ctx: RequestContext,
    timestamp: str,
    elapsed_ms: int,
    status: int,
    suffix: str = "",
) -> str:
    return (
        f"{ctx.remote_addr} [{timestamp}] {ctx.method} {ctx.path}"
        f" - {elapsed_ms}ms {status}{suffix}"
    )


class RequestTimingLogger(Middleware):
    """Middleware that times each request and logs it on completion."""

    def __init__(
        self,
        level: Level | int | str = Level.INFO,
        *,
        sink: LogSink | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._level = Level.parse(level)
        self._sink = sink if sink is not None else logging.getLogger(ACCESS_LOGGER)
        self._clock = clock if clock is not None else SystemClock()

    @property
    def level(self) -> Level:
        return self._level

    def before(self, ctx: RequestContext) -> None:
        ctx.state.start_ns = self._clock.monotonic_ns()

    def after(self, ctx: RequestContext, outcome: Outcome) -> Outcome:
        start_ns = ctx.state.start_ns
        if start_ns is None:
            raise MissingStartTimeError(
                f"No start time recorded for {ctx.method} {ctx.path}; "
                "after() ran without a matching before()"
            )
        ctx.state.start_ns = None

        elapsed_ms = (self._clock.monotonic_ns() - start_ns) // _NS_PER_MS

        if isinstance(outcome, Failure):
            status = FAILURE_STATUS
            suffix = failure_suffix(outcome.error)
        else:
            status = response_status(outcome.response)
            suffix = ""

        line = format_access_line(
            ctx, rfc3339(self._clock.now()), elapsed_ms, status, suffix
        )
        self._emit(effective_level(self._level, outcome), line)
        return outcome

    def _emit(self, level: Level, line: str) -> None:
        try:
            self._sink.log(int(level), line)
        except Exception:
            logger.warning("Failed to emit access log line", exc_info=True)


__all__ = [
    "ACCESS_LOGGER",
    "FAILURE_STATUS",
    "LogSink",
    "RequestTimingLogger",
    "effective_level",
    "failure_suffix",
    "format_access_line",
    "response_status",
]
