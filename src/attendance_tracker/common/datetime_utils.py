from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

_TWO_PLACES = Decimal("0.01")


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Local wall-clock time."""

    def now(self) -> datetime:
        return now_local()


@dataclass(frozen=True)
class DayRange:
    """Inclusive [start, end] datetime window."""

    start: datetime
    end: datetime

    def __contains__(self, value: datetime) -> bool:
        return self.start <= value <= self.end


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(value: date) -> datetime:
    return datetime(value.year, value.month, value.day)


def day_bounds(value: date) -> DayRange:
    """Bounds of a calendar day: [00:00:00.000, 23:59:59.999].

    The upper bound keeps millisecond precision so it matches stored
    timestamps exactly; queries must treat it as inclusive.
    """
    start = start_of_day(value)
    end = start.replace(hour=23, minute=59, second=59, microsecond=999000)
    return DayRange(start=start, end=end)


def last_day_of_month(month: int, year: int) -> date:
    """Day 0 of the following month, i.e. the day before its 1st."""
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def month_bounds(month: int, year: int) -> DayRange:
    """Bounds of a month: [day 1 00:00:00, last day 23:59:59]."""
    start = datetime(year, month, 1)
    end = datetime.combine(last_day_of_month(month, year), datetime.min.time()).replace(
        hour=23, minute=59, second=59
    )
    return DayRange(start=start, end=end)


def range_bounds(start_date: date, end_date: date) -> DayRange:
    return DayRange(start=day_bounds(start_date).start, end=day_bounds(end_date).end)


def last_n_days(reference: date, n: int) -> list[date]:
    """The n calendar days ending on reference, oldest first."""
    return [reference - timedelta(days=offset) for offset in range(n - 1, -1, -1)]


def round_hours(value: float) -> float:
    """Round half-up to 2 decimal places."""
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def hours_between(start: datetime, end: datetime) -> float:
    seconds = Decimal(repr((end - start).total_seconds()))
    return float((seconds / Decimal(3600)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
