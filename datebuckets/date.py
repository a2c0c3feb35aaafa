"""Calendar primitives.

Pure helpers converting between (year, month, day), (year, ISO week),
(year, ordinal day) and absolute instants. Every function returns a new value
and never hands back the object it was given.

Key functions:
- to_date / to_instant: Normalize DateLike input to a date or a pendulum instant
- days_between / hours_between / weeks_between: Distances between two dates
- first_day_of_month / last_day_of_month / day_of_month / day_of_year: Date constructors
- first_day_of_week / last_day_of_week / days_of_week: ISO week boundaries
- first_day_of_quarter / last_day_of_quarter / quarter_of: Quarter boundaries
- fortnight_of / month_fortnight_of: Fortnight indexes of a date
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, UTC, date, datetime, timedelta

import pendulum

from .exceptions import InvalidCalendarInput

DateLike = str | date | datetime

FORTNIGHT_DAYS = 15
FORTNIGHTS_PER_YEAR = 25


def to_date(d: DateLike) -> date:
    """Convert DateLike input to date object."""
    if isinstance(d, date) and not isinstance(d, datetime):
        return d
    if isinstance(d, datetime):
        return d.date()
    # String input - parse as ISO format
    return datetime.fromisoformat(d).date()


def to_date_iso_str(d: DateLike) -> str:
    """Convert DateLike input to ISO date string (YYYY-MM-DD)."""
    return to_date(d).isoformat()


def to_instant(d: DateLike) -> pendulum.DateTime:
    """Convert DateLike input to an absolute pendulum instant.

    Plain dates become midnight UTC. Naive datetimes and ISO strings without an
    offset are read as UTC; aware datetimes keep their offset.

    Examples:
        >>> to_instant(date(2024, 1, 15))
        DateTime(2024, 1, 15, 0, 0, 0, tzinfo=Timezone('UTC'))

        >>> to_instant("2024-01-15T12:30:00")
        DateTime(2024, 1, 15, 12, 30, 0, tzinfo=Timezone('UTC'))
    """
    if isinstance(d, datetime):
        return pendulum.instance(d)
    if isinstance(d, date):
        return pendulum.datetime(d.year, d.month, d.day)
    return pendulum.instance(datetime.fromisoformat(d))


def _plain(d: date) -> date:
    # pendulum.Date -> datetime.date
    return date(d.year, d.month, d.day)


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidCalendarInput(f"year must be in {MINYEAR}..{MAXYEAR}, got {year}")


def _check_month(month: int, year: int) -> None:
    _check_year(year)
    if not 1 <= month <= 12:
        raise InvalidCalendarInput(f"month must be in 1..12, got {month}")


def days_in_year(year: int) -> int:
    """Number of days in the year (365 or 366)."""
    _check_year(year)
    return 366 if pendulum.date(year, 1, 1).is_leap_year() else 365


# ==================== DISTANCES ====================


def add_days(value: DateLike, n: int) -> date | datetime:
    """Return a new value shifted by exactly n * 24 hours.

    Dates stay dates and datetimes stay datetimes; strings are parsed to dates.
    Aware datetimes are shifted in UTC and converted back to their own tzinfo,
    so crossing a DST change still moves the instant by 24 hours per day.

    Examples:
        >>> add_days(date(2024, 2, 28), 1)
        datetime.date(2024, 2, 29)

        >>> add_days(datetime(2024, 1, 1, 10, 0), -2)
        datetime.datetime(2023, 12, 30, 10, 0)
    """
    if isinstance(value, str):
        value = to_date(value)
    if isinstance(value, datetime) and value.tzinfo is not None:
        return (value.astimezone(UTC) + timedelta(days=n)).astimezone(value.tzinfo)
    return value + timedelta(days=n)


def days_between(date_start: DateLike, date_end: DateLike) -> int:
    """
    Calendar-day difference between two dates.

    The result is absolute, so argument order does not matter. The time of day
    is ignored: 23:00 on one day to 01:00 on the next is 1 day.

    Args:
        date_start: First date (date/datetime object or ISO format string)
        date_end: Second date (date/datetime object or ISO format string)

    Returns:
        Number of calendar days between the two values

    Examples:
        >>> days_between("2024-02-27", "2024-03-01")
        3

        >>> days_between(date(2024, 3, 1), date(2024, 2, 27))
        3
    """
    return to_instant(date_start).diff(to_instant(date_end)).in_days()


def weeks_between(date_start: DateLike, date_end: DateLike) -> int:
    """Count whole weeks between two dates (days_between // 7)."""
    return days_between(date_start, date_end) // 7


def hours_between(date_start: DateLike, date_end: DateLike) -> float:
    """
    Elapsed hours from date_start to date_end.

    Negative when date_end is before date_start.

    Examples:
        >>> hours_between(datetime(2024, 1, 1), datetime(2024, 1, 2, 6))
        30.0

        >>> hours_between("2024-01-02", "2024-01-01")
        -24.0
    """
    return (to_instant(date_end).timestamp() - to_instant(date_start).timestamp()) / 3600


# ==================== ACCESSORS ====================


def year_of(d: DateLike) -> int:
    return to_date(d).year


def month_of(d: DateLike) -> int:
    return to_date(d).month


def ordinal_day_of(d: DateLike) -> int:
    """Day of the year, 1 for January 1st."""
    return to_date(d).timetuple().tm_yday


def iso_week_of(d: DateLike) -> int:
    """ISO week number; week 1 is the week holding the year's first Thursday."""
    return to_date(d).isocalendar().week


def quarter_of(d: DateLike) -> int:
    """Quarter of the year (1-4)."""
    return (to_date(d).month - 1) // 3 + 1


def fortnight_of(d: DateLike) -> int:
    """Year-relative fortnight index (0-24) of consecutive 15-day slices."""
    return (ordinal_day_of(d) - 1) // FORTNIGHT_DAYS


def month_fortnight_of(d: DateLike) -> int:
    """Month-relative fortnight: 1 for days 1-15, 2 for day 16 onward."""
    return 1 if to_date(d).day <= FORTNIGHT_DAYS else 2


# ==================== MONTHS AND YEARS ====================


def first_day_of_month(month: int, year: int) -> date:
    _check_month(month, year)
    return date(year, month, 1)


def last_day_of_month(month: int, year: int) -> date:
    """
    Last day of a month, leap years included.

    Raises:
        InvalidCalendarInput: If month is not in 1..12

    Examples:
        >>> last_day_of_month(2, 2024)
        datetime.date(2024, 2, 29)

        >>> last_day_of_month(2, 2023)
        datetime.date(2023, 2, 28)
    """
    _check_month(month, year)
    return _plain(pendulum.date(year, month, 1).end_of("month"))


def day_of_month(day: int, month: int, year: int) -> date:
    """Build a date, failing with InvalidCalendarInput when the day does not exist."""
    _check_month(month, year)
    try:
        return date(year, month, day)
    except ValueError as err:
        raise InvalidCalendarInput(f"day {day} is not valid for {year:04d}-{month:02d}") from err


def day_of_year(ordinal_day: int, year: int) -> date:
    """
    Date of the given day of the year (1 = January 1st).

    Raises:
        InvalidCalendarInput: If ordinal_day is outside 1..days_in_year(year)

    Examples:
        >>> day_of_year(60, 2024)
        datetime.date(2024, 2, 29)

        >>> day_of_year(60, 2023)
        datetime.date(2023, 3, 1)
    """
    length = days_in_year(year)
    if not 1 <= ordinal_day <= length:
        raise InvalidCalendarInput(f"ordinal day must be in 1..{length} for {year}, got {ordinal_day}")
    return date(year, 1, 1) + timedelta(days=ordinal_day - 1)


# ==================== QUARTERS ====================


def _quarter_first_month(quarter: int, year: int) -> int:
    _check_year(year)
    if not 1 <= quarter <= 4:
        raise InvalidCalendarInput(f"quarter must be in 1..4, got {quarter}")
    return (quarter - 1) * 3 + 1  # 1, 4, 7, or 10


def first_day_of_quarter(quarter: int, year: int) -> date:
    month = _quarter_first_month(quarter, year)
    return _plain(pendulum.date(year, month, 1).start_of("month"))


def last_day_of_quarter(quarter: int, year: int) -> date:
    month = _quarter_first_month(quarter, year)
    return _plain(pendulum.date(year, month + 2, 1).end_of("month"))


# ==================== ISO WEEKS ====================


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in the year (52 or 53)."""
    _check_year(year)
    # December 28th always falls in the last ISO week of its year
    return pendulum.date(year, 12, 28).week_of_year


def first_day_of_week(week: int, year: int) -> date:
    """
    Monday of an ISO week.

    Week 1 may start in late December of the previous year.

    Args:
        week: ISO week number (1..weeks_in_year(year))
        year: ISO year

    Returns:
        Monday of the week

    Raises:
        InvalidCalendarInput: If week is not a week of that ISO year

    Examples:
        >>> first_day_of_week(1, 2025)
        datetime.date(2024, 12, 30)

        >>> first_day_of_week(53, 2020)
        datetime.date(2020, 12, 28)
    """
    total = weeks_in_year(year)
    if not 1 <= week <= total:
        raise InvalidCalendarInput(f"week must be in 1..{total} for {year}, got {week}")
    # January 4th always falls in ISO week 1
    monday = pendulum.date(year, 1, 4).start_of("week").add(weeks=week - 1)
    return _plain(monday)


def last_day_of_week(week: int, year: int) -> date:
    """Sunday of an ISO week.

    Raises:
        InvalidCalendarInput: If the week does not exist or ends after date.max
    """
    monday = first_day_of_week(week, year)
    try:
        return monday + timedelta(days=6)
    except OverflowError as err:
        raise InvalidCalendarInput(f"week {week} of {year} ends after {date.max}") from err


def days_of_week(week: int, year: int) -> list[date]:
    """All seven days of an ISO week, Monday to Sunday."""
    sunday = last_day_of_week(week, year)
    return [sunday - timedelta(days=6 - i) for i in range(7)]
