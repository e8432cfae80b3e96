"""Localized human phrases for dates."""

from __future__ import annotations

from datetime import date

from humandate.models.language import Language


def render_human(value: date, language: Language, today: date, window_days: int) -> str:
    """Phrase *value* relative to *today* when within *window_days*, else as a full date."""
    phrasing = language.phrasing
    delta = (value - today).days
    if abs(delta) <= window_days:
        if delta == 0:
            return phrasing.today
        if delta == 1:
            return phrasing.tomorrow
        if delta == -1:
            return phrasing.yesterday
        if delta > 0:
            return phrasing.days_ahead.format(n=delta)
        return phrasing.days_ago.format(n=-delta)

    return phrasing.full_date.format(
        day=value.day,
        ordinal=phrasing.ordinal(value.day),
        month=language.rules.month_name(value.month),
        year=value.year,
    )
