"""Per-instance configuration for parsers and formatters."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from humandate.models.language import Language

DEFAULT_LANGUAGE = "es"
DEFAULT_PATTERN = "dd/MM/yyyy"
DEFAULT_TWO_DIGIT_PIVOT = 50
DEFAULT_RELATIVE_WINDOW_DAYS = 7


class ParserConfig(BaseModel):
    """State owned by a single ``DateParser``.

    ``today`` of None means the wall-clock date at parse time.
    """

    model_config = ConfigDict(validate_assignment=True)

    language: Language
    today: date | None = None
    two_digit_pivot: int = Field(default=DEFAULT_TWO_DIGIT_PIVOT, ge=0, le=100)


class FormatterConfig(BaseModel):
    """State owned by a single ``DateFormatter``."""

    model_config = ConfigDict(validate_assignment=True)

    pattern: str = DEFAULT_PATTERN
    language: Language
    today: date | None = None
    relative_window_days: int = Field(default=DEFAULT_RELATIVE_WINDOW_DAYS, ge=0)
