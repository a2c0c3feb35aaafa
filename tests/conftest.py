from __future__ import annotations

from datetime import date, timedelta

import pytest


@pytest.fixture(scope="session")
def year_boundary_dates() -> dict[str, date]:
    """Dates around ISO year boundaries.

    - 2020 has 53 ISO weeks; 2021-01-01..03 still belong to 2020-W53
    - 2024-12-30 is the Monday of 2025-W01
    """
    return {
        "w53_monday": date(2020, 12, 28),
        "w53_in_january": date(2021, 1, 2),
        "w01_2021_monday": date(2021, 1, 4),
        "w01_2025_monday": date(2024, 12, 30),
        "w01_2025_in_december": date(2024, 12, 31),
        "w52_2024_sunday": date(2024, 12, 29),
    }


@pytest.fixture()
def daterange_factory():
    """Build inclusive lists of dates for reference comparisons."""

    def make(date_start: date, date_end: date) -> list[date]:
        return [date_start + timedelta(days=i) for i in range((date_end - date_start).days + 1)]

    return make
