from datetime import date, datetime

import pytest

from attendance_tracker.common.datetime_utils import (
    day_bounds,
    hours_between,
    last_day_of_month,
    last_n_days,
    month_bounds,
    range_bounds,
    round_hours,
)


def test_day_bounds_inclusive_millisecond_range():
    bounds = day_bounds(datetime(2026, 3, 11, 14, 5, 33))

    assert bounds.start == datetime(2026, 3, 11, 0, 0, 0)
    assert bounds.end == datetime(2026, 3, 11, 23, 59, 59, 999000)
    assert datetime(2026, 3, 11, 23, 59, 59, 999000) in bounds
    assert datetime(2026, 3, 12, 0, 0, 0) not in bounds


def test_day_bounds_accepts_plain_date():
    assert day_bounds(date(2026, 1, 1)).start == datetime(2026, 1, 1)


@pytest.mark.parametrize(
    "month, year, last",
    [(1, 2026, 31), (2, 2024, 29), (2, 2026, 28), (4, 2026, 30), (12, 2025, 31)],
)
def test_last_day_of_month(month, year, last):
    assert last_day_of_month(month, year).day == last


def test_month_bounds_end_at_last_second_of_month():
    bounds = month_bounds(12, 2025)

    assert bounds.start == datetime(2025, 12, 1)
    assert bounds.end == datetime(2025, 12, 31, 23, 59, 59)


def test_range_bounds_covers_both_end_days():
    bounds = range_bounds(date(2026, 3, 1), date(2026, 3, 3))

    assert datetime(2026, 3, 3, 18, 0) in bounds
    assert datetime(2026, 3, 4) not in bounds


def test_last_n_days_oldest_first():
    days = last_n_days(date(2026, 3, 2), 3)

    assert days == [date(2026, 2, 28), date(2026, 3, 1), date(2026, 3, 2)]


def test_hours_between_rounds_to_two_places():
    assert hours_between(datetime(2026, 3, 11, 9, 0), datetime(2026, 3, 11, 12, 30)) == 3.5
    assert hours_between(datetime(2026, 3, 11, 9, 45), datetime(2026, 3, 11, 17, 0)) == 7.25
    # 20 minutes = 0.3333..h
    assert hours_between(datetime(2026, 3, 11, 9, 0), datetime(2026, 3, 11, 9, 20)) == 0.33


def test_round_hours_is_half_up():
    assert round_hours(0.125) == 0.13
    assert round_hours(2.675) == 2.68
    assert round_hours(0.0) == 0.0


def test_month_bounds_for_last_representable_month():
    bounds = month_bounds(12, 9999)

    assert bounds.end == datetime(9999, 12, 31, 23, 59, 59)
