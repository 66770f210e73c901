"""timing_log — per-request timing and access logging for middleware pipelines.

Usage::

    from timing_log import Level, MiddlewareChain, RequestContext, RequestTimingLogger

    chain = MiddlewareChain().add(RequestTimingLogger(Level.INFO))
    ctx = RequestContext(remote_addr="127.0.0.1", method="GET", path="/foo")
    outcome = await chain.run(ctx, handler)
"""

from timing_log.errors import MissingStartTimeError, RequestError
from timing_log.middleware.request_timing import RequestTimingLogger, effective_level
from timing_log.models import Failure, Level, Outcome, RequestContext, RequestState, Success
from timing_log.pipeline import Middleware, MiddlewareChain

__version__ = "0.1.0"
__all__ = [
    "Failure",
    "Level",
    "Middleware",
    "MiddlewareChain",
    "MissingStartTimeError",
    "Outcome",
    "RequestContext",
    "RequestError",
    "RequestState",
    "RequestTimingLogger",
    "Success",
    "effective_level",
]
