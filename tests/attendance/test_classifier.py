from datetime import datetime

import pytest

from attendance_tracker.attendance.classifier import classify_on_check_in, classify_on_check_out
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.core.exceptions import PreconditionFailed


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 11, hour, minute)


def test_check_in_at_915_is_present():
    assert classify_on_check_in(at(9, 15)) is AttendanceStatus.PRESENT


def test_check_in_at_945_is_late():
    assert classify_on_check_in(at(9, 45)) is AttendanceStatus.LATE


def test_check_in_exactly_at_930_is_not_late():
    assert classify_on_check_in(datetime(2026, 3, 11, 9, 30, 0, 0)) is AttendanceStatus.PRESENT


def test_short_day_becomes_half_day():
    status, hours = classify_on_check_out(at(9, 0), at(12, 30), AttendanceStatus.PRESENT)

    assert status is AttendanceStatus.HALF_DAY
    assert hours == 3.5


def test_half_day_overrides_late():
    status, _ = classify_on_check_out(at(9, 45), at(11, 0), AttendanceStatus.LATE)

    assert status is AttendanceStatus.HALF_DAY


def test_full_day_keeps_late_status():
    status, hours = classify_on_check_out(at(9, 45), at(17, 0), AttendanceStatus.LATE)

    assert status is AttendanceStatus.LATE
    assert hours == 7.25


def test_exactly_four_hours_is_not_half_day():
    status, hours = classify_on_check_out(at(9, 0), at(13, 0), AttendanceStatus.PRESENT)

    assert status is AttendanceStatus.PRESENT
    assert hours == 4.0


def test_checkout_before_checkin_is_rejected():
    with pytest.raises(PreconditionFailed):
        classify_on_check_out(at(12, 0), at(11, 0), AttendanceStatus.PRESENT)
