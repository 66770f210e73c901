"""Health check and demo routes."""

from __future__ import annotations

import asyncio
import time

from fastapi import APIRouter
from pydantic import BaseModel

from timing_log.errors import RequestError

router = APIRouter(tags=["health"])

_start_time = time.time()


class HealthResponse(BaseModel):
    status: str
    uptime_seconds: float


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check for the service."""
    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 1),
    )


@router.get("/slow/{delay_ms}")
async def slow(delay_ms: int):
    """Sleep for ``delay_ms`` milliseconds, then respond."""
    await asyncio.sleep(max(delay_ms, 0) / 1000)
    return {"delay_ms": delay_ms}


@router.get("/fail")
async def fail():
    """Always fails; exercises the failure path of the access log."""
    raise RequestError("boom", detail="demo failure")
