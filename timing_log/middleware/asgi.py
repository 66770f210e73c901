"""Starlette adapter — runs a MiddlewareChain around every HTTP request."""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from timing_log.models import Failure, RequestContext
from timing_log.pipeline import MiddlewareChain


def build_context(request: Request) -> RequestContext:
    return RequestContext(
        remote_addr=request.client.host if request.client else "unknown",
        method=request.method.upper(),
        path=request.url.path,
    )


class PipelineMiddleware(BaseHTTPMiddleware):
    """Middleware that drives pipeline stages from Starlette requests.

    The response (or exception) produced by the app is passed back to the
    caller unchanged; stages can only observe it.
    """

    def __init__(self, app: ASGIApp, chain: MiddlewareChain) -> None:
        super().__init__(app)
        self.chain = chain

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        ctx = build_context(request)
        request.state.pipeline = ctx

        async def handler(_: RequestContext) -> Response:
            return await call_next(request)

        outcome = await self.chain.run(ctx, handler)
        if isinstance(outcome, Failure):
            raise outcome.error
        return outcome.response
