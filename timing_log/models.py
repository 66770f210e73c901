"""Core data types passed through the request pipeline."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, Field


class Level(enum.IntEnum):
    """Log severity, ordered. Values match the stdlib ``logging`` levels."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def parse(cls, value: Level | int | str) -> Level:
        """Coerce a Level, numeric level or level name into a Level."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARN":
                name = "WARNING"
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        return cls(value)


class RequestState(BaseModel):
    """Per-request state written by pipeline stages.

    Owned by exactly one RequestContext and discarded with it.
    """

    start_ns: int | None = Field(
        default=None, description="Monotonic timestamp taken when timing started"
    )


class RequestContext(BaseModel):
    remote_addr: str = "unknown"
    method: str
    path: str
    state: RequestState = Field(default_factory=RequestState)


class HasStatus(Protocol):
    status_code: int


@dataclass(frozen=True)
class Success:
    response: HasStatus

    @property
    def status_code(self) -> int:
        return self.response.status_code


@dataclass(frozen=True)
class Failure:
    error: BaseException


Outcome = Success | Failure
