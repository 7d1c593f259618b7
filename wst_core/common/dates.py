# wst_core/common/dates.py
from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta
from typing import Iterator


def add_months(anchor: date, months_delta: int) -> date:
    """
    Calendar-month arithmetic. The day is clamped to the target month's length
    (Jan 31 + 1 month -> Feb 28/29).
    """
    months_since_year_zero = anchor.year * 12 + (anchor.month - 1) + months_delta
    next_year = months_since_year_zero // 12
    next_month = months_since_year_zero % 12 + 1
    last_day = monthrange(next_year, next_month)[1]
    return date(next_year, next_month, min(anchor.day, last_day))


def add_years(anchor: date, years_delta: int) -> date:
    return add_months(anchor, years_delta * 12)


def previous_month(*, month: int, year: int) -> tuple[int, int]:
    if month == 1:
        return 12, year - 1
    return month - 1, year


def month_bounds(*, month: int, year: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, monthrange(year, month)[1])


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
