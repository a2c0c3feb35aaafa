"""Range walking over calendar buckets.

Bucket keys identify one week, month or fortnight. The walkers below are
generators that step from a start key to an end key (both inclusive) and yield
a new key on every step, so a walk can be restarted by calling the function
again and no yielded value is ever modified afterwards.

Week keys carry the *grouping* year: ISO week 1 can begin in late December and
is filed under the following year (see ``grouping_year``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from .date import (
    FORTNIGHTS_PER_YEAR,
    DateLike,
    days_between,
    first_day_of_week,
    fortnight_of,
    iso_week_of,
    last_day_of_week,
    to_date,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class WeekKey:
    year: int  # grouping year
    week: int


@dataclass(frozen=True, order=True)
class MonthKey:
    year: int
    month: int


@dataclass(frozen=True, order=True)
class MonthFortnightKey:
    year: int
    month: int
    fortnight: int  # 1 -> days 1-15, 2 -> days 16-end


@dataclass(frozen=True, order=True)
class YearFortnightKey:
    year: int
    fortnight: int  # 0..24


# ==================== YEAR-BOUNDARY CORRECTION ====================


def grouping_year(d: DateLike) -> int:
    """
    Year under which the ISO week of a date is grouped.

    Rules:
        - ISO week 1 falling in December belongs to the next year
        - ISO week 52/53 falling in January belongs to the previous year
        - Otherwise the calendar year

    Examples:
        >>> grouping_year(date(2024, 12, 30))  # Monday of ISO week 1 of 2025
        2025

        >>> grouping_year(date(2021, 1, 1))  # still ISO week 53 of 2020
        2020
    """
    d = to_date(d)
    week = iso_week_of(d)
    if week == 1 and d.month == 12:
        return d.year + 1
    if week >= 52 and d.month == 1:
        return d.year - 1
    return d.year


def week_key_of(d: DateLike) -> WeekKey:
    return WeekKey(grouping_year(d), iso_week_of(d))


def month_key_of(d: DateLike) -> MonthKey:
    d = to_date(d)
    return MonthKey(d.year, d.month)


def year_fortnight_key_of(d: DateLike) -> YearFortnightKey:
    return YearFortnightKey(to_date(d).year, fortnight_of(d))


# ==================== WALKERS ====================


def iter_days(date_start: DateLike, date_end: DateLike) -> Iterator[date]:
    """
    Yield every day from date_start to date_end inclusive.

    Produces exactly days_between(date_start, date_end) + 1 dates, or nothing
    when date_end is before date_start.

    Examples:
        >>> list(iter_days("2024-02-28", "2024-03-01"))
        [datetime.date(2024, 2, 28), datetime.date(2024, 2, 29), datetime.date(2024, 3, 1)]
    """
    date_start = to_date(date_start)
    date_end = to_date(date_end)
    if date_end < date_start:
        return

    for step in range(days_between(date_start, date_end) + 1):
        yield date_start + timedelta(days=step)


def iter_weeks(start: WeekKey, end: WeekKey) -> Iterator[WeekKey]:
    """
    Yield week keys from start to end inclusive.

    Walks Mondays in 7-day steps from the Monday of ``start`` while the Monday
    is before the Sunday of ``end``. The key of each Monday is re-derived with
    the year-boundary correction, so a week 1 starting in December is yielded
    under the following year.

    Raises:
        InvalidCalendarInput: If either key is not an existing ISO week
    """
    monday_start = first_day_of_week(start.week, start.year)
    sunday_end = last_day_of_week(end.week, end.year)
    logger.debug("Walking weeks from %s to %s", monday_start, sunday_end)

    step = 0
    while True:
        monday = monday_start + timedelta(weeks=step)
        if monday >= sunday_end:
            break
        yield week_key_of(monday)
        step += 1


def iter_months(start: MonthKey, end: MonthKey) -> Iterator[MonthKey]:
    """Yield month keys from start to end inclusive, rolling December into January."""
    month_start = date(start.year, start.month, 1)
    month_end = date(end.year, end.month, 1)

    step = 0
    while True:
        current = month_start + relativedelta(months=step)
        if current > month_end:
            break
        yield MonthKey(current.year, current.month)
        step += 1


def iter_month_fortnights(start: MonthFortnightKey, end: MonthFortnightKey) -> Iterator[MonthFortnightKey]:
    """Yield fortnight 1, then 2, of each month from start to end inclusive."""
    for month in iter_months(MonthKey(start.year, start.month), MonthKey(end.year, end.month)):
        for fortnight in (1, 2):
            key = MonthFortnightKey(month.year, month.month, fortnight)
            if start <= key <= end:
                yield key


def iter_year_fortnights(start: YearFortnightKey, end: YearFortnightKey) -> Iterator[YearFortnightKey]:
    """
    Yield year-relative fortnight keys from start to end inclusive.

    After index 24 the walk continues at index 0 of the next year.

    Examples:
        >>> [(k.year, k.fortnight) for k in iter_year_fortnights(YearFortnightKey(2023, 23), YearFortnightKey(2024, 1))]
        [(2023, 23), (2023, 24), (2024, 0), (2024, 1)]
    """
    year, fortnight = start.year, start.fortnight
    while (year, fortnight) <= (end.year, end.fortnight):
        yield YearFortnightKey(year, fortnight)
        fortnight += 1
        if fortnight >= FORTNIGHTS_PER_YEAR:
            fortnight = 0
            year += 1
