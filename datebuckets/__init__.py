"""
datebuckets

Calendar arithmetic and date-range bucketing. Splits a date range into days,
ISO weeks, fortnights or months grouped by year, in map, list or record shapes
ready to be filled with report data.
"""

from .buckets import (
    BucketFormat,
    FortnightFormat,
    get_days_between_dates,
    get_fortnights_between_dates_by_year,
    get_months_between_dates_by_year,
    get_weeks_between_dates_by_year,
    resolve_format,
)
from .date import (
    DateLike,
    add_days,
    day_of_month,
    day_of_year,
    days_between,
    days_in_year,
    days_of_week,
    first_day_of_month,
    first_day_of_quarter,
    first_day_of_week,
    fortnight_of,
    hours_between,
    iso_week_of,
    last_day_of_month,
    last_day_of_quarter,
    last_day_of_week,
    month_fortnight_of,
    month_of,
    ordinal_day_of,
    quarter_of,
    to_date,
    to_date_iso_str,
    to_instant,
    weeks_between,
    weeks_in_year,
    year_of,
)
from .exceptions import DateBucketsError, InvalidCalendarInput, InvalidRange
from .walker import (
    MonthFortnightKey,
    MonthKey,
    WeekKey,
    YearFortnightKey,
    grouping_year,
    iter_days,
    iter_month_fortnights,
    iter_months,
    iter_weeks,
    iter_year_fortnights,
    week_key_of,
)

__version__ = "0.1.0"
__all__ = [
    # Input helpers
    "DateLike",
    "to_date",
    "to_date_iso_str",
    "to_instant",
    # Calendar primitives
    "add_days",
    "days_between",
    "weeks_between",
    "hours_between",
    "days_in_year",
    "year_of",
    "month_of",
    "ordinal_day_of",
    "iso_week_of",
    "quarter_of",
    "fortnight_of",
    "month_fortnight_of",
    "first_day_of_month",
    "last_day_of_month",
    "day_of_month",
    "day_of_year",
    "first_day_of_quarter",
    "last_day_of_quarter",
    "weeks_in_year",
    "first_day_of_week",
    "last_day_of_week",
    "days_of_week",
    # Keys and walkers
    "WeekKey",
    "MonthKey",
    "MonthFortnightKey",
    "YearFortnightKey",
    "grouping_year",
    "week_key_of",
    "iter_days",
    "iter_weeks",
    "iter_months",
    "iter_month_fortnights",
    "iter_year_fortnights",
    # Grouping
    "BucketFormat",
    "FortnightFormat",
    "resolve_format",
    "get_days_between_dates",
    "get_weeks_between_dates_by_year",
    "get_fortnights_between_dates_by_year",
    "get_months_between_dates_by_year",
    # Errors
    "DateBucketsError",
    "InvalidCalendarInput",
    "InvalidRange",
]
