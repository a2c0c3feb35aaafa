from __future__ import annotations

from datetime import date, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from datebuckets import (
    days_between,
    fortnight_of,
    get_days_between_dates,
    get_fortnights_between_dates_by_year,
    get_months_between_dates_by_year,
    get_weeks_between_dates_by_year,
    grouping_year,
)

DATES = st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31))

# Forward ranges up to a little over two years long
RANGES = st.tuples(DATES, st.integers(min_value=0, max_value=800)).map(
    lambda t: (t[0], t[0] + timedelta(days=t[1]))
)


def _days(date_start: date, date_end: date) -> list[date]:
    return [date_start + timedelta(days=i) for i in range((date_end - date_start).days + 1)]


def _assert_contiguous(records: list[dict]) -> None:
    """Every record is non-empty and starts the day after the previous one ends."""
    for record in records:
        assert record["first_day"] <= record["last_day"]
    for prev, nxt in zip(records, records[1:], strict=False):
        assert nxt["first_day"] == prev["last_day"] + timedelta(days=1)


@given(DATES, DATES)
def test_days_between_symmetric_and_non_negative(a, b):
    assert days_between(a, b) >= 0
    assert days_between(a, b) == days_between(b, a) == abs((b - a).days)


@given(DATES)
def test_grouping_year_is_iso_year(d):
    assert grouping_year(d) == d.isocalendar().year


@settings(deadline=None)
@given(RANGES)
def test_daily_walk_is_inclusive(bounds):
    date_start, date_end = bounds
    days = get_days_between_dates(date_start, date_end)
    assert len(days) == days_between(date_start, date_end) + 1
    assert days == _days(date_start, date_end)


@settings(deadline=None, max_examples=50)
@given(RANGES)
def test_week_records_cover_range_exactly_once(bounds):
    date_start, date_end = bounds
    records = get_weeks_between_dates_by_year(date_start, date_end, 2)

    keys = [(r["year"], r["week"]) for r in records]
    assert keys == sorted(set(keys))  # strictly increasing, no duplicates
    reference = {(d.isocalendar().year, d.isocalendar().week) for d in _days(date_start, date_end)}
    assert set(keys) == reference

    _assert_contiguous(records)
    assert records[0]["first_day"] <= date_start
    assert records[-1]["last_day"] >= date_end
    assert all(r["data"] is None for r in records)


@settings(deadline=None, max_examples=50)
@given(RANGES)
def test_week_shapes_agree(bounds):
    date_start, date_end = bounds
    records = get_weeks_between_dates_by_year(date_start, date_end, 2)
    by_year = get_weeks_between_dates_by_year(date_start, date_end, 1)
    by_bucket = get_weeks_between_dates_by_year(date_start, date_end, 0)

    flattened = [(year, week) for year, weeks in by_year.items() for week in weeks]
    assert flattened == [(r["year"], r["week"]) for r in records]
    assert {year: list(weeks) for year, weeks in by_bucket.items()} == by_year
    assert list(by_year) == sorted(by_year)  # grouping years never go backwards


@settings(deadline=None, max_examples=50)
@given(RANGES)
def test_month_records_bound_range(bounds):
    date_start, date_end = bounds
    records = get_months_between_dates_by_year(date_start, date_end, 2)

    assert [(r["year"], r["month"]) for r in records] == sorted({(d.year, d.month) for d in _days(date_start, date_end)})
    _assert_contiguous(records)
    assert records[0]["first_day"] <= date_start
    assert records[-1]["last_day"] >= date_end


@settings(deadline=None, max_examples=50)
@given(RANGES)
def test_year_fortnights_cover_range_exactly_once(bounds):
    date_start, date_end = bounds
    records = get_fortnights_between_dates_by_year(date_start, date_end, 1)

    keys = [(r["year"], r["fortnight"]) for r in records]
    assert keys == sorted({(d.year, fortnight_of(d)) for d in _days(date_start, date_end)})
    _assert_contiguous(records)
    assert records[0]["first_day"] <= date_start <= records[0]["last_day"]
    assert records[-1]["first_day"] <= date_end <= records[-1]["last_day"]


@settings(deadline=None, max_examples=50)
@given(RANGES)
def test_month_fortnights_split_each_month(bounds):
    date_start, date_end = bounds
    entries = get_fortnights_between_dates_by_year(date_start, date_end, 0)

    slots = [entry["fortnight"][i] for entry in entries for i in (1, 2)]
    _assert_contiguous(slots)
    for entry in entries:
        assert entry["fortnight"][1]["first_day"].day == 1
        assert entry["fortnight"][1]["last_day"].day == 15
        assert entry["fortnight"][2]["first_day"].day == 16


@settings(deadline=None)
@given(RANGES, st.integers().filter(lambda n: n not in (0, 1, 2)))
def test_unknown_format_matches_default(bounds, code):
    date_start, date_end = bounds
    assert get_months_between_dates_by_year(date_start, date_end, code) == get_months_between_dates_by_year(
        date_start, date_end, 0
    )
