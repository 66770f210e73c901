"""Middleware chain — runs before/after hooks around a request handler.

Stages see requests in registration order on the way in and in reverse
order on the way out. Every stage whose ``before`` succeeded gets exactly
one ``after`` call, whatever happened downstream.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable
from typing import Any

from timing_log.errors import MissingStartTimeError
from timing_log.models import Failure, Outcome, RequestContext, Success

logger = logging.getLogger(__name__)

# Sync handlers return the response; async ones return an awaitable of it
Handler = Callable[[RequestContext], Any]


class Middleware:
    """Base class for pipeline stages.

    ``before`` signals failure by raising; the handler is then skipped.
    ``after`` receives the outcome produced downstream and returns the
    outcome to hand further up the chain.
    """

    def before(self, ctx: RequestContext) -> None:
        pass

    def after(self, ctx: RequestContext, outcome: Outcome) -> Outcome:
        return outcome


class MiddlewareChain:
    """Ordered list of middleware stages wrapping a handler."""

    def __init__(self, stages: Iterable[Middleware] = ()) -> None:
        self._stages: list[Middleware] = list(stages)

    @property
    def stages(self) -> tuple[Middleware, ...]:
        return tuple(self._stages)

    def add(self, stage: Middleware) -> MiddlewareChain:
        self._stages.append(stage)
        return self

    async def run(self, ctx: RequestContext, handler: Handler) -> Outcome:
        entered = 0
        outcome: Outcome | None = None

        for stage in self._stages:
            try:
                stage.before(ctx)
            except Exception as e:
                logger.debug(
                    "%s.before failed for %s %s: %s",
                    type(stage).__name__, ctx.method, ctx.path, e,
                )
                outcome = Failure(e)
                break
            entered += 1

        if outcome is None:
            outcome = await _call_handler(handler, ctx)

        for stage in reversed(self._stages[:entered]):
            try:
                outcome = stage.after(ctx, outcome)
            except MissingStartTimeError:
                raise
            except Exception as e:
                logger.debug(
                    "%s.after failed for %s %s: %s",
                    type(stage).__name__, ctx.method, ctx.path, e,
                )
                outcome = Failure(e)
        return outcome


async def _call_handler(handler: Handler, ctx: RequestContext) -> Outcome:
    try:
        result = handler(ctx)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        return Failure(e)
    return Success(result)
