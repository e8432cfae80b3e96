"""Natural-language date parser."""

from __future__ import annotations

from datetime import date

import structlog

from humandate.config import Settings
from humandate.errors import require
from humandate.languages.registry import LanguageRegistry, get_registry
from humandate.models.config import DEFAULT_LANGUAGE, DEFAULT_TWO_DIGIT_PIVOT, ParserConfig
from humandate.models.language import Language
from humandate.models.result import ParsedDate
from humandate.parsing.grammars import classify, resolve

logger = structlog.get_logger(__name__)


class DateParser:
    """Resolves human-typed strings such as ``"hoy"``, ``"+2s"``, ``"1/4/12"``
    or ``"0405"`` to calendar dates.

    ``parse`` never raises for bad input: anything it cannot resolve, including
    ``None`` and blank strings, yields ``None``. Configuration errors (an
    unknown language code, a ``None`` argument) do raise.

    Instances hold a small mutable configuration and are not meant to be
    reconfigured from several threads at once.
    """

    def __init__(
        self,
        language: Language | str = DEFAULT_LANGUAGE,
        *,
        today: date | None = None,
        two_digit_pivot: int = DEFAULT_TWO_DIGIT_PIVOT,
        registry: LanguageRegistry | None = None,
    ):
        self._registry = registry or get_registry()
        self._config = ParserConfig(
            language=self._registry.resolve(require(language, "language")),
            today=today,
            two_digit_pivot=two_digit_pivot,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, registry: LanguageRegistry | None = None) -> "DateParser":
        settings = settings or Settings()
        return cls(
            settings.default_language,
            two_digit_pivot=settings.two_digit_pivot,
            registry=registry,
        )

    # --- configuration ---

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def language(self) -> Language:
        return self._config.language

    def set_language(self, language: Language | str) -> "DateParser":
        """Switch the active language; accepts a ``Language`` or a code.

        Raises:
            UnsupportedLanguageError: *language* is an unknown code.
        """
        resolved = self._registry.resolve(language)
        self._config.language = resolved
        logger.debug("language_changed", component="parser", language=resolved.code)
        return self

    @property
    def today(self) -> date | None:
        return self._config.today

    def set_today(self, today: date | None) -> "DateParser":
        """Pin the reference date; None goes back to the wall clock."""
        self._config.today = today
        return self

    @property
    def two_digit_pivot(self) -> int:
        return self._config.two_digit_pivot

    def set_two_digit_pivot(self, pivot: int) -> "DateParser":
        self._config.two_digit_pivot = pivot
        return self

    def reference_date(self) -> date:
        """The date relative expressions are resolved against."""
        return self._config.today or date.today()

    # --- parsing ---

    def parse(self, text: str | None) -> date | None:
        """Resolve *text* to a date, or None when it is not recognisable."""
        result = self.parse_detailed(text)
        return result.value if result is not None else None

    def parse_detailed(self, text: str | None) -> ParsedDate | None:
        """Like ``parse`` but also reports which grammar matched."""
        if not isinstance(text, str):
            return None
        stripped = text.strip()
        if not stripped:
            return None

        rules = self._config.language.rules
        grammar = classify(stripped, rules)
        if grammar is None:
            logger.debug("date_unparseable", text=stripped, language=self._config.language.code, reason="no_grammar")
            return None

        value = resolve(grammar, stripped, rules, self.reference_date(), self._config.two_digit_pivot)
        if value is None:
            logger.debug(
                "date_unparseable",
                text=stripped,
                language=self._config.language.code,
                grammar=grammar.value,
                reason="invalid_components",
            )
            return None

        logger.debug("date_parsed", text=stripped, grammar=grammar.value, value=value.isoformat())
        return ParsedDate(value=value, original_string=stripped, grammar=grammar)
