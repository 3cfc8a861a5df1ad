from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time

from ..core.constants import HALF_DAY_HOURS, LATE_AFTER
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    late_after: time = field(default=LATE_AFTER)
    half_day_hours: float = HALF_DAY_HOURS

    def is_late(self, check_in_time: datetime) -> bool:
        # Minute granularity: 09:30:59 still counts as on time.
        cutoff = self.late_after
        return check_in_time.hour > cutoff.hour or (
            check_in_time.hour == cutoff.hour and check_in_time.minute > cutoff.minute
        )

    def for_checkin(self, *, check_in_time: datetime) -> AttendanceStrategy:
        if self.is_late(check_in_time):
            return LateStrategy()
        return PresentStrategy()

    def for_checkout(self, *, total_hours: float) -> AttendanceStrategy:
        if total_hours < self.half_day_hours:
            return HalfDayStrategy()
        return PresentStrategy()
