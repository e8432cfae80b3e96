"""Bidirectional text <-> date conversion for UI adapters.

A ``HumanDateConverter`` keeps a parser and a formatter in step: one language
and one pattern drive both directions, so a text field can display a date and
read back whatever the user types.
"""

from __future__ import annotations

from datetime import date

from humandate.errors import require
from humandate.formatting.formatter import DateFormatter
from humandate.languages.registry import LanguageRegistry, get_registry
from humandate.models.config import DEFAULT_LANGUAGE, DEFAULT_PATTERN
from humandate.models.language import Language
from humandate.parsing.parser import DateParser


class HumanDateConverter:
    def __init__(
        self,
        language: Language | str = DEFAULT_LANGUAGE,
        pattern: str = DEFAULT_PATTERN,
        *,
        registry: LanguageRegistry | None = None,
    ):
        require(language, "language")
        require(pattern, "pattern")
        registry = registry or get_registry()
        self._parser = DateParser(language, registry=registry)
        self._formatter = DateFormatter(pattern, language, registry=registry)

    @classmethod
    def es(cls) -> "HumanDateConverter":
        return cls("es", DEFAULT_PATTERN)

    @classmethod
    def en(cls) -> "HumanDateConverter":
        return cls("en", DEFAULT_PATTERN)

    @classmethod
    def que(cls) -> "HumanDateConverter":
        return cls("que", DEFAULT_PATTERN)

    @property
    def parser(self) -> DateParser:
        return self._parser

    @property
    def formatter(self) -> DateFormatter:
        return self._formatter

    @property
    def language(self) -> Language:
        return self._parser.language

    @property
    def pattern(self) -> str:
        return self._formatter.pattern

    def with_language(self, language: Language | str) -> "HumanDateConverter":
        # Resolve once so a bad code leaves both halves untouched
        self._parser.set_language(language)
        self._formatter.set_language(self._parser.language)
        return self

    def with_pattern(self, pattern: str) -> "HumanDateConverter":
        self._formatter.set_pattern(pattern)
        return self

    def to_string(self, value: date | None) -> str | None:
        """Format *value*; None stays None."""
        return self._formatter.format(value)

    def from_string(self, text: str | None) -> date | None:
        """Parse *text*; blank or unrecognisable input gives None."""
        return self._parser.parse(text)
