"""Time sources used for request timing."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def monotonic_ns(self) -> int: ...

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock: ``time.monotonic_ns`` plus local wall-clock time."""

    def monotonic_ns(self) -> int:
        return time.monotonic_ns()

    def now(self) -> datetime:
        return datetime.now().astimezone()


def rfc3339(moment: datetime) -> str:
    """Render an aware datetime as RFC3339 with second precision.

    A zero UTC offset is rendered as ``Z``.
    """
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
