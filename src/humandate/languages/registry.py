"""Lookup and registration of supported languages by code."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache

import structlog

from humandate.errors import InvalidArgumentError, UnsupportedLanguageError, require
from humandate.languages.tables import build_default_languages
from humandate.models.language import Language

logger = structlog.get_logger(__name__)


class LanguageRegistry:
    """Maps language codes to immutable ``Language`` records.

    Codes are matched case-insensitively. Registration is meant to happen at
    startup; lookups afterwards are read-only.
    """

    def __init__(self, languages: Iterable[Language] = ()):
        self._languages: dict[str, Language] = {}
        for language in languages:
            self.register(language)

    def register(self, language: Language) -> Language:
        """Add *language*, replacing any entry with the same code."""
        require(language, "language")
        replaced = language.code in self._languages
        self._languages[language.code] = language
        logger.debug("language_registered", code=language.code, replaced=replaced)
        return language

    def get(self, code: str) -> Language:
        """Return the language registered under *code*.

        Raises:
            UnsupportedLanguageError: no language uses that code.
        """
        if code is None:
            raise InvalidArgumentError("language code must not be None")
        key = code.strip().lower()
        try:
            return self._languages[key]
        except KeyError:
            raise UnsupportedLanguageError(code, self.codes()) from None

    def resolve(self, language: Language | str) -> Language:
        """Accept either a ``Language`` or a code and return a ``Language``."""
        require(language, "language")
        if isinstance(language, Language):
            return language
        return self.get(language)

    def codes(self) -> list[str]:
        return list(self._languages)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().lower() in self._languages

    def __iter__(self) -> Iterator[Language]:
        return iter(list(self._languages.values()))

    def __len__(self) -> int:
        return len(self._languages)


@lru_cache(maxsize=1)
def get_registry() -> LanguageRegistry:
    """Process-wide registry pre-populated with Spanish, English and Quechua."""
    return LanguageRegistry(build_default_languages())


def es() -> Language:
    return get_registry().get("es")


def en() -> Language:
    return get_registry().get("en")


def que() -> Language:
    return get_registry().get("que")
