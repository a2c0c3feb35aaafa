"""Grouping of date ranges into calendar buckets.

Each entry point walks the buckets (weeks, fortnights, months) touched by a
date range and assembles them, grouped by year, into one of several output
shapes picked by a format flag:

- BucketFormat.BY_BUCKET_MAP (0): {year: {unit: None, ...}, ...}
- BucketFormat.BY_YEAR_LIST (1): {year: [unit, ...], ...}
- BucketFormat.RECORD_LIST (2): [{"year", unit, "first_day", "last_day", "data"}, ...]

Fortnights use FortnightFormat instead (month-relative or year-relative).
Unrecognized format values fall back to code 0 rather than raising.

Records are fresh dicts with ``data`` set to None, ready for the caller to fill.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date
from enum import IntEnum
from itertools import groupby
from typing import Any, TypeVar

from .date import (
    FORTNIGHT_DAYS,
    DateLike,
    day_of_month,
    day_of_year,
    days_in_year,
    first_day_of_month,
    first_day_of_week,
    last_day_of_month,
    last_day_of_week,
    to_date,
)
from .exceptions import InvalidRange
from .walker import (
    MonthFortnightKey,
    MonthKey,
    WeekKey,
    YearFortnightKey,
    iter_days,
    iter_month_fortnights,
    iter_months,
    iter_weeks,
    iter_year_fortnights,
    month_key_of,
    week_key_of,
    year_fortnight_key_of,
)

logger = logging.getLogger(__name__)

Record = dict[str, Any]
GroupedResult = dict[int, dict[int, None]] | dict[int, list[int]] | list[Record]

_F = TypeVar("_F", bound=IntEnum)


class BucketFormat(IntEnum):
    """
    Output shapes for week and month grouping.

    Integer codes are kept so that plain ints select the same shape.
    """

    BY_BUCKET_MAP = 0  # {year: {unit: None}}
    BY_YEAR_LIST = 1  # {year: [unit, ...]}
    RECORD_LIST = 2  # [{"year", unit, "first_day", "last_day", "data"}]


class FortnightFormat(IntEnum):
    """Fortnight flavours for fortnight grouping."""

    MONTH_RELATIVE = 0  # days 1-15 and 16-end of each month
    YEAR_RELATIVE = 1  # consecutive 15-day slices of the year, index 0-24


def resolve_format(value: Any, format_cls: type[_F]) -> _F:
    """
    Map a format member, integer code or member name to a format member.

    Anything unrecognized resolves to the member with code 0.

    Examples:
        >>> resolve_format(2, BucketFormat)
        <BucketFormat.RECORD_LIST: 2>

        >>> resolve_format("by_year_list", BucketFormat)
        <BucketFormat.BY_YEAR_LIST: 1>

        >>> resolve_format(99, BucketFormat)
        <BucketFormat.BY_BUCKET_MAP: 0>
    """
    if isinstance(value, format_cls):
        return value
    if isinstance(value, str):
        member = format_cls.__members__.get(value.upper())
        if member is not None:
            return member
    else:
        try:
            return format_cls(value)
        except ValueError:
            pass

    default = format_cls(0)
    logger.debug("Unrecognized %s %r, using %s", format_cls.__name__, value, default.name)
    return default


def _is_forward(date_start: date, date_end: date, strict: bool) -> bool:
    """Return True when the range holds at least one day.

    Raises InvalidRange for a backwards range in strict mode; otherwise a
    backwards range is treated as empty.
    """
    if date_start <= date_end:
        return True
    if strict:
        raise InvalidRange(date_start, date_end)
    logger.debug("End date %s is before start date %s, returning empty result", date_end, date_start)
    return False


def _record(year: int, unit: str, value: int, first_day: date, last_day: date) -> Record:
    return {"year": year, unit: value, "first_day": first_day, "last_day": last_day, "data": None}


def _slot(first_day: date, last_day: date) -> Record:
    return {"first_day": first_day, "last_day": last_day, "data": None}


def _assemble(
    keys: Iterable[WeekKey] | Iterable[MonthKey],
    output_format: BucketFormat,
    unit: str,
    bounds: Callable[[Any], tuple[date, date]],
) -> GroupedResult:
    """Fold (year, unit) keys into the requested shape."""
    match output_format:
        case BucketFormat.BY_YEAR_LIST:
            by_year: dict[int, list[int]] = {}
            for key in keys:
                by_year.setdefault(key.year, []).append(getattr(key, unit))
            return by_year

        case BucketFormat.RECORD_LIST:
            records: list[Record] = []
            for key in keys:
                first_day, last_day = bounds(key)
                records.append(_record(key.year, unit, getattr(key, unit), first_day, last_day))
            return records

        case _:
            by_bucket: dict[int, dict[int, None]] = {}
            for key in keys:
                by_bucket.setdefault(key.year, {})[getattr(key, unit)] = None
            return by_bucket


def _empty(output_format: BucketFormat) -> GroupedResult:
    return [] if output_format is BucketFormat.RECORD_LIST else {}


# ==================== DAYS ====================


def get_days_between_dates(date_start: DateLike, date_end: DateLike, *, strict: bool = False) -> list[date]:
    """
    List every day from date_start to date_end inclusive.

    Args:
        date_start: Start date (date/datetime object or ISO format string)
        date_end: End date, inclusive
        strict: Raise InvalidRange instead of returning [] when date_end < date_start

    Examples:
        >>> get_days_between_dates("2024-02-27", "2024-03-01")
        [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    """
    date_start = to_date(date_start)
    date_end = to_date(date_end)
    if not _is_forward(date_start, date_end, strict):
        return []
    return list(iter_days(date_start, date_end))


# ==================== WEEKS ====================


def _week_bounds(key: WeekKey) -> tuple[date, date]:
    return first_day_of_week(key.week, key.year), last_day_of_week(key.week, key.year)


def get_weeks_between_dates_by_year(
    date_start: DateLike,
    date_end: DateLike,
    output_format: BucketFormat | int = BucketFormat.BY_BUCKET_MAP,
    *,
    strict: bool = False,
) -> GroupedResult:
    """
    Group the ISO weeks touched by a date range by year.

    Weeks are filed under their grouping year: an ISO week 1 that starts in
    late December belongs to the following year.

    Args:
        date_start: Start date (date/datetime object or ISO format string)
        date_end: End date, inclusive
        output_format: BucketFormat member or code; unknown values select BY_BUCKET_MAP
        strict: Raise InvalidRange instead of returning an empty result when date_end < date_start

    Returns:
        {year: {week: None}}, {year: [week, ...]} or a list of week records

    Examples:
        >>> get_weeks_between_dates_by_year("2024-12-16", "2025-01-12", 1)
        {2024: [51, 52], 2025: [1, 2]}

        >>> get_weeks_between_dates_by_year("2024-12-31", "2025-01-05", BucketFormat.RECORD_LIST)
        [{'year': 2025, 'week': 1, 'first_day': date(2024, 12, 30), 'last_day': date(2025, 1, 5), 'data': None}]
    """
    fmt = resolve_format(output_format, BucketFormat)
    date_start = to_date(date_start)
    date_end = to_date(date_end)
    if not _is_forward(date_start, date_end, strict):
        return _empty(fmt)

    keys = iter_weeks(week_key_of(date_start), week_key_of(date_end))
    return _assemble(keys, fmt, "week", _week_bounds)


# ==================== FORTNIGHTS ====================


def _month_fortnight_bounds(key: MonthFortnightKey) -> tuple[date, date]:
    if key.fortnight == 1:
        return first_day_of_month(key.month, key.year), day_of_month(FORTNIGHT_DAYS, key.month, key.year)
    return day_of_month(FORTNIGHT_DAYS + 1, key.month, key.year), last_day_of_month(key.month, key.year)


def _year_fortnight_bounds(key: YearFortnightKey) -> tuple[date, date]:
    # The last slice stops at December 31st instead of spilling into the next year
    last_ordinal = min((key.fortnight + 1) * FORTNIGHT_DAYS, days_in_year(key.year))
    return day_of_year(key.fortnight * FORTNIGHT_DAYS + 1, key.year), day_of_year(last_ordinal, key.year)


def _month_fortnights(date_start: date, date_end: date) -> list[Record]:
    keys = iter_month_fortnights(
        MonthFortnightKey(date_start.year, date_start.month, 1),
        MonthFortnightKey(date_end.year, date_end.month, 2),
    )
    entries: list[Record] = []
    for (year, month), month_keys in groupby(keys, key=lambda k: (k.year, k.month)):
        entries.append(
            {
                "year": year,
                "month": month,
                "fortnight": {key.fortnight: _slot(*_month_fortnight_bounds(key)) for key in month_keys},
            }
        )
    return entries


def _year_fortnights(date_start: date, date_end: date) -> list[Record]:
    keys = iter_year_fortnights(year_fortnight_key_of(date_start), year_fortnight_key_of(date_end))
    return [_record(key.year, "fortnight", key.fortnight, *_year_fortnight_bounds(key)) for key in keys]


def get_fortnights_between_dates_by_year(
    date_start: DateLike,
    date_end: DateLike,
    output_format: FortnightFormat | int = FortnightFormat.MONTH_RELATIVE,
    *,
    strict: bool = False,
) -> list[Record]:
    """
    List the fortnights touched by a date range.

    Month-relative (format 0) entries cover whole months, each split into
    fortnight 1 (days 1-15) and fortnight 2 (day 16 to month end):

        {"year": 2024, "month": 1, "fortnight": {1: {"first_day", "last_day", "data"}, 2: {...}}}

    Year-relative (format 1) entries are 15-day slices indexed 0-24 from
    January 1st; slice 24 ends on December 31st:

        {"year": 2024, "fortnight": 0, "first_day": ..., "last_day": ..., "data": None}

    Args:
        date_start: Start date (date/datetime object or ISO format string)
        date_end: End date, inclusive
        output_format: FortnightFormat member or code; unknown values select MONTH_RELATIVE
        strict: Raise InvalidRange instead of returning [] when date_end < date_start
    """
    fmt = resolve_format(output_format, FortnightFormat)
    date_start = to_date(date_start)
    date_end = to_date(date_end)
    if not _is_forward(date_start, date_end, strict):
        return []

    match fmt:
        case FortnightFormat.YEAR_RELATIVE:
            return _year_fortnights(date_start, date_end)
        case _:
            return _month_fortnights(date_start, date_end)


# ==================== MONTHS ====================


def _month_bounds(key: MonthKey) -> tuple[date, date]:
    return first_day_of_month(key.month, key.year), last_day_of_month(key.month, key.year)


def get_months_between_dates_by_year(
    date_start: DateLike,
    date_end: DateLike,
    output_format: BucketFormat | int = BucketFormat.BY_BUCKET_MAP,
    *,
    strict: bool = False,
) -> GroupedResult:
    """
    Group the months touched by a date range by year.

    Args:
        date_start: Start date (date/datetime object or ISO format string)
        date_end: End date, inclusive
        output_format: BucketFormat member or code; unknown values select BY_BUCKET_MAP
        strict: Raise InvalidRange instead of returning an empty result when date_end < date_start

    Returns:
        {year: {month: None}}, {year: [month, ...]} or a list of month records

    Examples:
        >>> get_months_between_dates_by_year("2023-11-15", "2024-02-10", 1)
        {2023: [11, 12], 2024: [1, 2]}

        >>> get_months_between_dates_by_year("2024-02-10", "2024-02-20", 2)
        [{'year': 2024, 'month': 2, 'first_day': date(2024, 2, 1), 'last_day': date(2024, 2, 29), 'data': None}]
    """
    fmt = resolve_format(output_format, BucketFormat)
    date_start = to_date(date_start)
    date_end = to_date(date_end)
    if not _is_forward(date_start, date_end, strict):
        return _empty(fmt)

    keys = iter_months(month_key_of(date_start), month_key_of(date_end))
    return _assemble(keys, fmt, "month", _month_bounds)
