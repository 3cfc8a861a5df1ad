from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """On-time check-in, checkout keeps the check-in status."""

    def decide_checkin(self, *, check_in_time: datetime) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, total_hours: float, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current)
