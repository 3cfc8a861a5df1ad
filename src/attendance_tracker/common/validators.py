from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_month_year(month: Optional[int], year: Optional[int]) -> Optional[tuple[int, int]]:
    """Validate an optional (month, year) pair.

    Returns None unless both are given; a month window only applies when the
    caller supplies both values.
    """
    if month is None or year is None:
        return None
    month, year = int(month), int(year)
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    if not 1 <= year <= 9999:
        raise ValidationError("year is out of range")
    return month, year


def require_iso_date(value: str, field_name: str) -> date:
    try:
        return parse_iso_date(require_non_empty(value, field_name))
    except ValueError as exc:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from exc


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise ValidationError("startDate must not be after endDate")
    return start, end
