from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import DayRange
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedIn
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "record_id, employee_ref, record_date, check_in_time, check_out_time, status, total_hours"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        employee_ref=int(r["employee_ref"]),
        day=r["record_date"],
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        status=AttendanceStatus(r["status"]),
        total_hours=float(r.get("total_hours") or 0),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_one(self, employee_ref: int, day_range: DayRange) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_ref=%s AND record_date BETWEEN %s AND %s
                """,
                (int(employee_ref), day_range.start, day_range.end),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def find_many(
        self,
        *,
        employee_ref: Optional[int] = None,
        day_range: Optional[DayRange] = None,
        status: Optional[AttendanceStatus] = None,
        limit: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_ref is not None:
            clauses.append("employee_ref=%s")
            params.append(int(employee_ref))
        if day_range is not None:
            clauses.append("record_date BETWEEN %s AND %s")
            params.extend([day_range.start, day_range.end])
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        limit_sql = ""
        if limit is not None:
            limit_sql = "LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                {where}
                ORDER BY record_date DESC, record_id DESC
                {limit_sql}
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def record_check_in(
        self,
        employee_ref: int,
        *,
        day: datetime,
        check_in_time: datetime,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            # The unique key makes the placeholder insert a no-op when the row
            # exists; the row lock serialises concurrent check-ins.
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records(employee_ref, record_date, status)
                VALUES(%s,%s,%s)
                """,
                (int(employee_ref), day, AttendanceStatus.ABSENT.value),
            )
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_ref=%s AND record_date=%s
                FOR UPDATE
                """,
                (int(employee_ref), day),
            )
            existing = _to_record(fetchone(cur))
            if existing.check_in_time is not None:
                raise AlreadyCheckedIn()

            cur.execute(
                """
                UPDATE attendance_records
                SET check_in_time=%s, status=%s
                WHERE record_id=%s
                """,
                (check_in_time, status.value, existing.record_id),
            )
            return AttendanceRecord(
                record_id=existing.record_id,
                employee_ref=existing.employee_ref,
                day=existing.day,
                check_in_time=check_in_time,
                check_out_time=existing.check_out_time,
                status=status,
                total_hours=existing.total_hours,
            )

    def record_check_out(
        self,
        record_id: int,
        *,
        check_out_time: datetime,
        total_hours: float,
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, total_hours=%s, status=%s
                WHERE record_id=%s AND check_out_time IS NULL
                """,
                (check_out_time, total_hours, status.value, int(record_id)),
            )
            return cur.rowcount > 0

    def mark_absent(self, employee_ref: int, *, day: datetime) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records(employee_ref, record_date, status)
                VALUES(%s,%s,%s)
                """,
                (int(employee_ref), day, AttendanceStatus.ABSENT.value),
            )
            if cur.rowcount == 0:
                return None
            return AttendanceRecord(
                record_id=int(cur.lastrowid),
                employee_ref=int(employee_ref),
                day=day,
                check_in_time=None,
                check_out_time=None,
                status=AttendanceStatus.ABSENT,
            )

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records
                    (employee_ref, record_date, check_in_time, check_out_time, status, total_hours)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    record_id=LAST_INSERT_ID(record_id),
                    check_in_time=VALUES(check_in_time),
                    check_out_time=VALUES(check_out_time),
                    status=VALUES(status),
                    total_hours=VALUES(total_hours)
                """,
                (
                    int(record.employee_ref),
                    record.day,
                    record.check_in_time,
                    record.check_out_time,
                    record.status.value,
                    record.total_hours,
                ),
            )
            return AttendanceRecord(
                record_id=int(cur.lastrowid),
                employee_ref=record.employee_ref,
                day=record.day,
                check_in_time=record.check_in_time,
                check_out_time=record.check_out_time,
                status=record.status,
                total_hours=record.total_hours,
            )

    def clear(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records")
            return int(cur.rowcount)
