"""Date formatting: fixed patterns and human phrases."""

from __future__ import annotations

from datetime import date

import structlog

from humandate.config import Settings
from humandate.errors import require
from humandate.formatting.human import render_human
from humandate.formatting.pattern import DatePattern
from humandate.languages.registry import LanguageRegistry, get_registry
from humandate.models.config import (
    DEFAULT_LANGUAGE,
    DEFAULT_PATTERN,
    DEFAULT_RELATIVE_WINDOW_DAYS,
    FormatterConfig,
)
from humandate.models.language import Language

logger = structlog.get_logger(__name__)


class DateFormatter:
    """Renders dates as ``dd/MM/yyyy``-style text or as localized phrases.

    Both ``format`` and ``format_human`` return None for a None date and
    never fail for a real one.
    """

    def __init__(
        self,
        pattern: str = DEFAULT_PATTERN,
        language: Language | str = DEFAULT_LANGUAGE,
        *,
        today: date | None = None,
        relative_window_days: int = DEFAULT_RELATIVE_WINDOW_DAYS,
        registry: LanguageRegistry | None = None,
    ):
        self._registry = registry or get_registry()
        self._pattern = DatePattern(require(pattern, "pattern"))
        self._config = FormatterConfig(
            pattern=pattern,
            language=self._registry.resolve(require(language, "language")),
            today=today,
            relative_window_days=relative_window_days,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, registry: LanguageRegistry | None = None) -> "DateFormatter":
        settings = settings or Settings()
        return cls(
            settings.default_pattern,
            settings.default_language,
            relative_window_days=settings.relative_window_days,
            registry=registry,
        )

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def pattern(self) -> str:
        return self._config.pattern

    def set_pattern(self, pattern: str) -> "DateFormatter":
        """Replace the fixed pattern.

        Raises:
            InvalidPatternError: the pattern cannot be compiled; the previous
                pattern stays active.
        """
        compiled = DatePattern(require(pattern, "pattern"))
        self._pattern = compiled
        self._config.pattern = pattern
        logger.debug("pattern_changed", pattern=pattern)
        return self

    @property
    def language(self) -> Language:
        return self._config.language

    def set_language(self, language: Language | str) -> "DateFormatter":
        resolved = self._registry.resolve(language)
        self._config.language = resolved
        logger.debug("language_changed", component="formatter", language=resolved.code)
        return self

    @property
    def today(self) -> date | None:
        return self._config.today

    def set_today(self, today: date | None) -> "DateFormatter":
        self._config.today = today
        return self

    def reference_date(self) -> date:
        return self._config.today or date.today()

    def format(self, value: date | None) -> str | None:
        """Render *value* with the fixed pattern."""
        if value is None:
            return None
        return self._pattern.render(value, self._config.language.rules)

    def format_human(self, value: date | None) -> str | None:
        """Render *value* as a phrase in the active language.

        Dates close to the reference date become "today", "in 3 days" and so
        on; anything further away is spelled out with the month name.
        """
        if value is None:
            return None
        return render_human(
            value,
            self._config.language,
            self.reference_date(),
            self._config.relative_window_days,
        )
