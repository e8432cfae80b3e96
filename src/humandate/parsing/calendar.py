"""Calendar arithmetic used while resolving parsed components."""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date

from dateutil.relativedelta import relativedelta

from humandate.models.language import TimeUnit


def shift(reference: date, amount: int, unit: TimeUnit) -> date | None:
    """Move *reference* by *amount* units.

    Month and year shifts clamp the day to the last day of the target month
    (Jan 31 + 1 month = Feb 28/29). Returns None when the result falls
    outside the representable date range.
    """
    try:
        if unit is TimeUnit.DAY:
            delta = relativedelta(days=amount)
        elif unit is TimeUnit.WEEK:
            delta = relativedelta(weeks=amount)
        elif unit is TimeUnit.MONTH:
            delta = relativedelta(months=amount)
        else:
            delta = relativedelta(years=amount)
        return reference + delta
    except (OverflowError, ValueError):
        return None


def expand_year(digits: str, pivot: int) -> int | None:
    """Turn a 1-2 or 4 digit year string into a full year.

    Short years below *pivot* land in the 2000s, the rest in the 1900s.
    """
    if len(digits) in (1, 2):
        short = int(digits)
        return (2000 if short < pivot else 1900) + short
    if len(digits) == 4:
        return int(digits)
    return None


def build_date(year: int, month: int, day: int) -> date | None:
    """Return the date, or None if any component is out of range."""
    if not MINYEAR <= year <= MAXYEAR:
        return None
    if not 1 <= month <= 12:
        return None
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)
