"""Exception hierarchy for datebuckets.

Hierarchy:
    DateBucketsError
    ├── InvalidCalendarInput  (malformed day/week/month/quarter/year combination)
    └── InvalidRange          (end date before start date, strict mode only)

Both concrete errors are also ``ValueError`` so callers that already guard date
parsing with ``except ValueError`` keep working.
"""


class DateBucketsError(Exception):
    """Base class for all datebuckets errors."""


class InvalidCalendarInput(DateBucketsError, ValueError):
    """A calendar component is out of range for the given year or month."""


class InvalidRange(DateBucketsError, ValueError):
    """The end of a requested range lies before its start."""

    def __init__(self, date_start, date_end):
        self.date_start = date_start
        self.date_end = date_end
        super().__init__(f"End date {date_end} is before start date {date_start}")
