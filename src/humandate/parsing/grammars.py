"""The ordered input grammars.

``classify`` picks the single grammar whose shape the input has; the matching
resolver then either produces a date or None. A string is never handed to a
second grammar once one has claimed it.
"""

from __future__ import annotations

import re
from datetime import date

from humandate.models.language import LanguageRules, TimeUnit
from humandate.models.result import Grammar
from humandate.parsing.calendar import build_date, expand_year, shift

_OFFSET_RE = re.compile(r"([+-])([0-9]+)([^\W\d_]?)")
_DIGITS_RE = re.compile(r"[0-9]+")


def _is_digits(text: str) -> bool:
    return bool(_DIGITS_RE.fullmatch(text))


def classify(text: str, rules: LanguageRules) -> Grammar | None:
    """Return the grammar owning *text* (already trimmed), or None."""
    if rules.keyword_offset(text) is not None:
        return Grammar.KEYWORD
    if _OFFSET_RE.fullmatch(text):
        return Grammar.RELATIVE_OFFSET
    if text == "0":
        return Grammar.BARE_ZERO
    if any(sep in text for sep in rules.separators):
        return Grammar.DELIMITED
    if _is_digits(text):
        return Grammar.COMPACT
    return None


def resolve_keyword(text: str, rules: LanguageRules, today: date) -> date | None:
    offset = rules.keyword_offset(text)
    if offset is None:
        return None
    return shift(today, offset, TimeUnit.DAY)


def resolve_offset(text: str, rules: LanguageRules, today: date) -> date | None:
    """``+4d``, ``-1m``, ``+2`` (days when no unit letter is given)."""
    match = _OFFSET_RE.fullmatch(text)
    if not match:
        return None
    sign, digits, suffix = match.groups()
    unit = rules.unit_for(suffix) if suffix else TimeUnit.DAY
    if unit is None:
        return None
    amount = int(digits)
    if sign == "-":
        amount = -amount
    return shift(today, amount, unit)


def resolve_delimited(text: str, rules: LanguageRules, today: date, pivot: int) -> date | None:
    """``d.M``, ``d/M/yy``, ``dd·MM·yyyy`` and mixes of the separators."""
    parts = rules.separator_pattern.split(text)
    if not 1 <= len(parts) <= 3:
        return None
    if not all(_is_digits(p) for p in parts):
        return None

    day_part = parts[0]
    month_part = parts[1] if len(parts) > 1 else None
    year_part = parts[2] if len(parts) > 2 else None

    if len(day_part) > 2 or (month_part is not None and len(month_part) > 2):
        return None
    month = int(month_part) if month_part is not None else today.month
    if year_part is None:
        year = today.year
    else:
        year = expand_year(year_part, pivot)
        if year is None:
            return None
    return build_date(year, month, int(day_part))


def resolve_compact(text: str, today: date, pivot: int) -> date | None:
    """Undelimited digits, interpreted by length.

    1-2: day. 3-4: ``DMM``/``DDMM`` (the last two digits are the month).
    6: ``DDMMYY``. 8: ``DDMMYYYY``.
    """
    if not _is_digits(text):
        return None
    length = len(text)
    if length <= 2:
        return build_date(today.year, today.month, int(text))
    if length in (3, 4):
        return build_date(today.year, int(text[-2:]), int(text[:-2]))
    if length in (6, 8):
        year = expand_year(text[4:], pivot)
        if year is None:
            return None
        return build_date(year, int(text[2:4]), int(text[:2]))
    return None


def resolve(grammar: Grammar, text: str, rules: LanguageRules, today: date, pivot: int) -> date | None:
    """Dispatch *text* to the resolver for *grammar*."""
    if grammar is Grammar.KEYWORD:
        return resolve_keyword(text, rules, today)
    if grammar is Grammar.RELATIVE_OFFSET:
        return resolve_offset(text, rules, today)
    if grammar is Grammar.BARE_ZERO:
        return today
    if grammar is Grammar.DELIMITED:
        return resolve_delimited(text, rules, today, pivot)
    return resolve_compact(text, today, pivot)
