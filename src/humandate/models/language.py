"""Immutable per-language tables.

A ``Language`` bundles the lookup tables the parser needs (``LanguageRules``)
with the templates the formatter uses for human phrases (``HumanPhrasing``).
Instances are frozen and safe to share between any number of parsers and
formatters.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from humandate.languages.normalization import normalize_token

DEFAULT_SEPARATORS: tuple[str, ...] = (".", "-", "·", "/")


class TimeUnit(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class LanguageRules(BaseModel):
    """Keyword, unit-suffix and month-name tables for one language.

    All lookups are case-insensitive and accent-insensitive.
    """

    model_config = ConfigDict(frozen=True)

    today: tuple[str, ...]
    tomorrow: tuple[str, ...]
    yesterday: tuple[str, ...]
    unit_suffixes: Mapping[str, TimeUnit]
    month_names: tuple[str, ...]
    separators: tuple[str, ...] = DEFAULT_SEPARATORS

    _keyword_offsets: dict[str, int] = PrivateAttr(default_factory=dict)
    _units: dict[str, TimeUnit] = PrivateAttr(default_factory=dict)
    _months: dict[str, int] = PrivateAttr(default_factory=dict)
    _separator_re: re.Pattern | None = PrivateAttr(default=None)

    @field_validator("unit_suffixes", mode="after")
    @classmethod
    def _freeze_suffixes(cls, value: Mapping[str, TimeUnit]) -> Mapping[str, TimeUnit]:
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_tables(self) -> "LanguageRules":
        keywords: list[str] = []
        for group_name in ("today", "tomorrow", "yesterday"):
            group = getattr(self, group_name)
            if not group:
                raise ValueError(f"at least one {group_name} keyword is required")
            keywords.extend(normalize_token(k) for k in group)
        if any(not k for k in keywords):
            raise ValueError("keywords must not be blank")
        duplicates = sorted({k for k in keywords if keywords.count(k) > 1})
        if duplicates:
            raise ValueError(f"ambiguous keywords: {', '.join(duplicates)}")

        suffixes = [normalize_token(s) for s in self.unit_suffixes]
        for suffix in suffixes:
            if len(suffix) != 1 or not suffix.isalpha():
                raise ValueError(f"unit suffix must be a single letter, got {suffix!r}")
        if len(set(suffixes)) != len(suffixes):
            raise ValueError("unit suffixes collide after normalization")
        missing = set(TimeUnit) - set(self.unit_suffixes.values())
        if missing:
            names = ", ".join(sorted(u.value for u in missing))
            raise ValueError(f"no unit suffix for: {names}")

        if len(self.month_names) != 12:
            raise ValueError(f"exactly 12 month names are required, got {len(self.month_names)}")
        months = [normalize_token(m) for m in self.month_names]
        if len(set(months)) != 12:
            raise ValueError("month names must be unique")

        for sep in self.separators:
            if len(sep) != 1 or sep.isalnum() or sep in "+":
                raise ValueError(f"invalid date separator {sep!r}")
        return self

    def model_post_init(self, __context) -> None:
        for offset, group in ((0, self.today), (1, self.tomorrow), (-1, self.yesterday)):
            for keyword in group:
                self._keyword_offsets[normalize_token(keyword)] = offset
        self._units = {normalize_token(s): unit for s, unit in self.unit_suffixes.items()}
        self._months = {normalize_token(m): i for i, m in enumerate(self.month_names, start=1)}
        self._separator_re = re.compile("|".join(re.escape(sep) for sep in self.separators))

    @property
    def separator_pattern(self) -> re.Pattern:
        """Regex splitting a delimited date on any of the separators."""
        return self._separator_re

    def keyword_offset(self, token: str) -> int | None:
        """Day offset for a today/tomorrow/yesterday keyword, or None."""
        return self._keyword_offsets.get(normalize_token(token))

    def is_today(self, token: str) -> bool:
        return self.keyword_offset(token) == 0

    def is_tomorrow(self, token: str) -> bool:
        return self.keyword_offset(token) == 1

    def is_yesterday(self, token: str) -> bool:
        return self.keyword_offset(token) == -1

    def unit_for(self, suffix: str) -> TimeUnit | None:
        return self._units.get(normalize_token(suffix))

    def month_name(self, index: int) -> str:
        """Month name for a 1-based month index."""
        if not 1 <= index <= 12:
            raise IndexError(f"month index out of range: {index}")
        return self.month_names[index - 1]

    def month_index(self, name: str) -> int | None:
        return self._months.get(normalize_token(name))


class HumanPhrasing(BaseModel):
    """Templates for human-readable output.

    ``days_ahead`` and ``days_ago`` receive ``{n}``; ``full_date`` receives
    ``{day}``, ``{ordinal}``, ``{month}`` and ``{year}``.
    """

    model_config = ConfigDict(frozen=True)

    today: str
    tomorrow: str
    yesterday: str
    days_ahead: str
    days_ago: str
    full_date: str
    ordinal_suffixes: Mapping[int, str] = Field(default_factory=dict)
    ordinal_default: str = ""

    @field_validator("ordinal_suffixes", mode="after")
    @classmethod
    def _freeze_suffixes(cls, value: Mapping[int, str]) -> Mapping[int, str]:
        return MappingProxyType(dict(value))

    def ordinal(self, day: int) -> str:
        """Day number with its ordinal suffix (``19`` -> ``19th`` in English)."""
        if self.ordinal_suffixes and 11 <= day % 100 <= 13:
            return f"{day}{self.ordinal_default}"
        return f"{day}{self.ordinal_suffixes.get(day % 10, self.ordinal_default)}"


class Language(BaseModel):
    """A supported language, identified by its code (``es``, ``en``, ``que``)."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    rules: LanguageRules
    phrasing: HumanPhrasing

    @field_validator("code")
    @classmethod
    def _normalize_code(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("language code cannot be empty")
        return v

    def __str__(self) -> str:
        return self.code
