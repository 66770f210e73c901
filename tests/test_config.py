"""Tests for settings and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError
from pythonjsonlogger.json import JsonFormatter

from timing_log.config import Settings
from timing_log.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("TIMING_LOG_PORT", "9001")
    monkeypatch.setenv("TIMING_LOG_LOG_FORMAT", "JSON")
    monkeypatch.setenv("TIMING_LOG_ACCESS_LOG_LEVEL", "warn")

    s = Settings()

    assert s.port == 9001
    assert s.log_format == "json"
    assert s.access_log_level == "WARNING"


@pytest.mark.parametrize(
    "field,value",
    [("log_level", "LOUD"), ("log_format", "xml"), ("access_log_level", "never")],
)
def test_settings_reject_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_setup_logging_json(restore_root_logger):
    setup_logging(Settings(log_format="json", log_level="debug"))

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.DEBUG


def test_setup_logging_text(restore_root_logger):
    setup_logging(Settings(log_format="text"))

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
