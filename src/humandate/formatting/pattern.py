"""Compiled fixed date patterns such as ``dd/MM/yyyy``.

Supported fields: ``d``/``dd`` (day), ``M``/``MM`` (month number), ``MMM``
(abbreviated month name), ``MMMM`` (month name), ``y`` (year), ``yy``
(two-digit year), ``yyyy`` (zero-padded year). Text inside single quotes is
literal and ``''`` is a quote. Any other ASCII letter is rejected; every
other character is copied through.
"""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

from humandate.errors import InvalidPatternError, require
from humandate.models.language import LanguageRules

_FIELD_WIDTHS: dict[str, tuple[int, ...]] = {
    "d": (1, 2),
    "M": (1, 2, 3, 4),
    "y": (1, 2, 4),
}


class _Field(NamedTuple):
    letter: str
    width: int


def compile_pattern(pattern: str) -> list[str | _Field]:
    """Split *pattern* into literal strings and field tokens."""
    if not pattern:
        raise InvalidPatternError(pattern, "pattern is empty")

    tokens: list[str | _Field] = []
    literal: list[str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "'":
            if pattern.startswith("''", i):
                literal.append("'")
                i += 2
                continue
            end = i + 1
            quoted: list[str] = []
            while True:
                if end >= len(pattern):
                    raise InvalidPatternError(pattern, "unterminated quoted text")
                if pattern[end] == "'":
                    if pattern.startswith("''", end):
                        quoted.append("'")
                        end += 2
                        continue
                    break
                quoted.append(pattern[end])
                end += 1
            literal.extend(quoted)
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            run = 1
            while i + run < len(pattern) and pattern[i + run] == ch:
                run += 1
            widths = _FIELD_WIDTHS.get(ch)
            if widths is None:
                raise InvalidPatternError(pattern, f"unsupported field letter {ch!r}")
            if run not in widths:
                raise InvalidPatternError(pattern, f"unsupported width {run} for field {ch!r}")
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(_Field(ch, run))
            i += run
        else:
            literal.append(ch)
            i += 1
    if literal:
        tokens.append("".join(literal))
    return tokens


class DatePattern:
    """A validated pattern that renders dates with a language's month names."""

    def __init__(self, pattern: str):
        self.pattern = require(pattern, "pattern")
        self._tokens = compile_pattern(pattern)

    def render(self, value: date, rules: LanguageRules) -> str:
        parts: list[str] = []
        for token in self._tokens:
            if isinstance(token, str):
                parts.append(token)
            else:
                parts.append(_render_field(token, value, rules))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"DatePattern({self.pattern!r})"


def _render_field(field: _Field, value: date, rules: LanguageRules) -> str:
    if field.letter == "d":
        return f"{value.day:0{field.width}d}"
    if field.letter == "M":
        if field.width <= 2:
            return f"{value.month:0{field.width}d}"
        name = rules.month_name(value.month)
        return name[:3] if field.width == 3 else name
    if field.width == 2:
        return f"{value.year % 100:02d}"
    return f"{value.year:0{field.width}d}"
