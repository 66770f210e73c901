"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from timing_log.models import RequestContext

WALL_TIME = datetime(2014, 7, 1, 22, 34, 6, tzinfo=timezone(timedelta(hours=-7)))


class FakeClock:
    """Manually advanced clock for deterministic timing tests."""

    def __init__(self, start_ns: int = 1_000_000_000, wall: datetime = WALL_TIME) -> None:
        self.ns = start_ns
        self.wall = wall

    def monotonic_ns(self) -> int:
        return self.ns

    def now(self) -> datetime:
        return self.wall

    def advance(self, ms: int = 0, ns: int = 0) -> None:
        self.ns += ms * 1_000_000 + ns


@dataclass
class FakeResponse:
    status_code: int = 200


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return MagicMock()


@pytest.fixture
def ctx():
    return RequestContext(remote_addr="127.0.0.1", method="GET", path="/foo")
