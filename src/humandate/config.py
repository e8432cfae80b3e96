"""Application configuration via environment variables with HUMANDATE_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from humandate.models.config import (
    DEFAULT_LANGUAGE,
    DEFAULT_PATTERN,
    DEFAULT_RELATIVE_WINDOW_DAYS,
    DEFAULT_TWO_DIGIT_PIVOT,
)


class Settings(BaseSettings):
    """Default configuration for parsers, formatters and the HTTP adapter.

    All settings are read from environment variables prefixed with
    ``HUMANDATE_``. Values are only defaults: every parser and formatter can
    be reconfigured after construction.
    """

    model_config = SettingsConfigDict(env_prefix="HUMANDATE_")

    # ── Parsing ─────────────────────────────────────────────────────────────
    default_language: str = DEFAULT_LANGUAGE
    # Two-digit years below the pivot land in the 2000s, the rest in the 1900s
    two_digit_pivot: int = Field(default=DEFAULT_TWO_DIGIT_PIVOT, ge=0, le=100)

    # ── Formatting ──────────────────────────────────────────────────────────
    default_pattern: str = DEFAULT_PATTERN
    relative_window_days: int = Field(default=DEFAULT_RELATIVE_WINDOW_DAYS, ge=0)

    # ── Logging ─────────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = True

    # ── API ─────────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
