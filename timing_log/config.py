"""Service configuration — loaded from environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings

from timing_log.models import Level


class Settings(BaseSettings):
    """Application settings, loaded from environment variables.

    All settings are prefixed with TIMING_LOG_ (e.g., TIMING_LOG_LOG_FORMAT).
    """

    # API
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"
    access_log_level: str = "INFO"      # level for successful requests
    access_logger: str = "timing_log.access"

    model_config = {"env_prefix": "TIMING_LOG_"}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"log_level must be one of {valid}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in {"text", "json"}:
            raise ValueError("log_format must be 'text' or 'json'")
        return v.lower()

    @field_validator("access_log_level")
    @classmethod
    def validate_access_log_level(cls, v: str) -> str:
        return Level.parse(v).name


settings = Settings()
