from __future__ import annotations

import csv
import io
from datetime import date, datetime

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.core.exceptions import NoRecordsFound, NotFound, ValidationError
from attendance_tracker.reports.service import render_csv


@pytest.fixture
def seeded(attendance_repo):
    def add(employee_ref, day, status, check_in=None, check_out=None, hours=0.0):
        return attendance_repo.save(
            AttendanceRecord(
                record_id=None,
                employee_ref=employee_ref,
                day=datetime(day.year, day.month, day.day),
                check_in_time=check_in,
                check_out_time=check_out,
                status=status,
                total_hours=hours,
            )
        )

    add(2, date(2026, 3, 2), AttendanceStatus.PRESENT, datetime(2026, 3, 2, 9), datetime(2026, 3, 2, 17), 8.0)
    add(2, date(2026, 3, 3), AttendanceStatus.LATE, datetime(2026, 3, 3, 9, 45), datetime(2026, 3, 3, 17), 7.25)
    add(3, date(2026, 3, 3), AttendanceStatus.HALF_DAY, datetime(2026, 3, 3, 9), datetime(2026, 3, 3, 12, 30), 3.5)
    add(4, date(2026, 3, 3), AttendanceStatus.ABSENT)
    add(2, date(2026, 2, 27), AttendanceStatus.PRESENT, datetime(2026, 2, 27, 9), datetime(2026, 2, 27, 17), 8.0)
    add(99, date(2026, 3, 4), AttendanceStatus.PRESENT)
    return attendance_repo


def test_employee_summary_defaults_to_current_month(container, seeded):
    s = container.report_service.get_summary(2)

    assert (s.month, s.year) == (3, 2026)
    assert (s.present, s.late, s.half_day, s.absent) == (1, 1, 0, 0)
    assert s.total_hours == 15.25


def test_summary_rejects_month_zero(container, seeded):
    with pytest.raises(ValidationError):
        container.report_service.get_summary(2, month=0, year=2026)


def test_org_summary_for_explicit_month(container, seeded):
    s = container.report_service.get_summary(None, month=2, year=2026)

    assert (s.month, s.year, s.present) == (2, 2026, 1)
    assert s.total_hours == 8.0


def test_summary_is_stable_across_calls(container, seeded):
    assert container.report_service.get_summary(None) == container.report_service.get_summary(None)


def test_org_summary_breakdowns(container, seeded):
    s = container.report_service.get_org_summary()

    assert s.total_records == 5
    assert (s.present, s.late, s.half_day, s.absent) == (2, 1, 1, 1)
    assert s.total_hours == 18.75
    assert s.by_department["Engineering"].present == 1
    assert s.by_department["Engineering"].late == 1
    assert s.by_department["Engineering"].half_day == 1
    assert s.by_department["Sales"].absent == 1
    assert s.by_department["Unknown"].present == 1
    assert s.by_employee["EMP001"].name == "Alice Johnson"
    assert s.by_employee["EMP001"].present == 1
    assert s.by_employee["Unknown"].present == 1


def test_list_attendance_filters(container, seeded):
    by_code = container.report_service.list_attendance(employee_code="EMP001")
    by_day = container.report_service.list_attendance(day=date(2026, 3, 3))
    by_status = container.report_service.list_attendance(status=AttendanceStatus.ABSENT)

    assert len(by_code) == 3
    assert by_code[0].employee.employee_id == "EMP001"
    assert {l.record.employee_ref for l in by_day} == {2, 3, 4}
    assert [l.record.employee_ref for l in by_status] == [4]


def test_list_attendance_unknown_employee_is_empty(container, seeded):
    assert container.report_service.list_attendance(employee_code="NOPE") == []


def test_list_attendance_unknown_employee_identity_is_none(container, seeded):
    [listing] = container.report_service.list_attendance(day=date(2026, 3, 4))

    assert listing.employee is None


def test_employee_attendance_unbounded_with_month_window(container, seeded):
    assert len(container.report_service.get_employee_attendance(2)) == 3
    assert len(container.report_service.get_employee_attendance(2, month=2, year=2026)) == 1


def test_today_overview(container, clock, attendance_repo):
    clock.set(datetime(2026, 3, 11, 11, 0))
    container.attendance_service.check_in(2)
    attendance_repo.save(
        AttendanceRecord(None, 3, datetime(2026, 3, 11), None, None, AttendanceStatus.ABSENT)
    )

    o = container.report_service.today_overview()

    assert o.date == date(2026, 3, 11)
    assert o.total_employees == 5
    assert (o.present, o.absent, o.late) == (1, 1, 1)
    assert (o.checked_in, o.checked_out) == (1, 0)
    assert [e.employee_id for e in o.absent_employees] == ["EMP002", "EMP003", "EMP004", "EMP005"]
    assert len(o.attendance) == 2


def test_export_range_rows(container, seeded):
    rows = container.report_service.export_range(date(2026, 3, 3), date(2026, 3, 3))

    assert len(rows) == 3
    absent = next(r for r in rows if r.status == "absent")
    assert absent.employee_id == "EMP003"
    assert absent.check_in_time == "N/A"
    assert absent.check_out_time == "N/A"
    assert absent.total_hours == 0
    late = next(r for r in rows if r.status == "late")
    assert late.date == "2026-03-03"
    assert late.check_in_time == "2026-03-03 09:45:00"
    assert late.total_hours == 7.25


def test_export_range_unknown_identity_is_na(container, seeded):
    [row] = container.report_service.export_range(date(2026, 3, 4), date(2026, 3, 4))

    assert (row.employee_id, row.name, row.department) == ("N/A", "N/A", "N/A")


def test_export_range_for_one_employee(container, seeded):
    rows = container.report_service.export_range(date(2026, 2, 1), date(2026, 3, 31), "EMP001")

    assert [r.date for r in rows] == ["2026-03-03", "2026-03-02", "2026-02-27"]


def test_export_unknown_employee(container, seeded):
    with pytest.raises(NotFound):
        container.report_service.export_range(date(2026, 3, 1), date(2026, 3, 31), "NOPE")


def test_export_empty_range(container, seeded):
    with pytest.raises(NoRecordsFound):
        container.report_service.export_range(date(2025, 1, 1), date(2025, 1, 31))


def test_export_inverted_range(container, seeded):
    with pytest.raises(ValidationError):
        container.report_service.export_range(date(2026, 3, 31), date(2026, 3, 1))


def test_render_csv_has_human_headers(container, seeded):
    rows = container.report_service.export_range(date(2026, 3, 2), date(2026, 3, 2))

    parsed = list(csv.reader(io.StringIO(render_csv(rows))))

    assert parsed[0] == [
        "Date",
        "Employee ID",
        "Name",
        "Department",
        "Check In Time",
        "Check Out Time",
        "Status",
        "Total Hours",
    ]
    assert parsed[1][:3] == ["2026-03-02", "EMP001", "Alice Johnson"]
    assert parsed[1][-2:] == ["present", "8.0"]
