"""Status derivation for check-in and check-out events.

Both functions are pure: they only look at the timestamps they are given.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import hours_between
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .factory import AttendanceStrategyFactory

_DEFAULT_FACTORY = AttendanceStrategyFactory()


def classify_on_check_in(
    check_in_time: datetime,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> AttendanceStatus:
    factory = factory or _DEFAULT_FACTORY
    strategy = factory.for_checkin(check_in_time=check_in_time)
    return strategy.decide_checkin(check_in_time=check_in_time).status


def classify_on_check_out(
    check_in_time: datetime,
    check_out_time: datetime,
    current_status: AttendanceStatus,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> tuple[AttendanceStatus, float]:
    """Return the post-checkout status and worked hours (2 decimals)."""
    if check_out_time < check_in_time:
        raise ValidationError("Check-out time cannot be earlier than check-in time")

    factory = factory or _DEFAULT_FACTORY
    total_hours = hours_between(check_in_time, check_out_time)
    strategy = factory.for_checkout(total_hours=total_hours)
    decision = strategy.decide_checkout(total_hours=total_hours, current=current_status)
    return decision.status, total_hours
