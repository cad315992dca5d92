"""Working-day calculator: converts a date range into chargeable vacation days."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

logger = logging.getLogger(__name__)

DateInput = date | datetime | str | None

# date.weekday(): Monday == 0 ... Saturday == 5, Sunday == 6.
_WEEKEND_DAYS = frozenset({5, 6})


def parse_date(value: DateInput) -> date | None:
    """Coerce a date-like value to a calendar date, or None if it cannot be parsed.

    Datetimes lose their time of day so DST shifts cannot move the count.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip()[:10])
    except (AttributeError, ValueError):
        return None


def is_weekend(day: date) -> bool:
    return day.weekday() in _WEEKEND_DAYS


def count_weekend_days(start_date: date, end_date: date) -> int:
    """Count Saturdays and Sundays in the inclusive range."""
    weekend_days = 0
    current_date = start_date
    one_day = timedelta(days=1)
    while current_date <= end_date:
        if is_weekend(current_date):
            weekend_days += 1
        current_date += one_day
    return weekend_days


def compute_chargeable_days(
    start_date: DateInput,
    end_date: DateInput,
    exclude_weekends: bool = True,
) -> int:
    """Return the number of vacation days charged for the inclusive range.

    Unparseable input and inverted ranges yield 0 rather than raising.
    The weekend is always Saturday and Sunday.
    """
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None or end is None:
        logger.warning("Invalid date range for day calculation: start=%r end=%r", start_date, end_date)
        return 0

    days = (end - start).days + 1
    if days <= 0:
        return 0

    if exclude_weekends:
        days -= count_weekend_days(start, end)

    return max(0, days)
