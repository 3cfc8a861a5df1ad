from __future__ import annotations

from datetime import date

from flask import Blueprint, Flask, jsonify, request

from ..common.serialization import to_json
from ..common.validators import require_iso_date
from ..common.web import current_employee_ref, login_required, manager_required
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..reports.service import render_csv


def _optional_int_arg(name: str) -> int | None:
    value = request.args.get(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ValidationError(f"{name} must be an integer") from exc


def _month_year_args() -> tuple[int | None, int | None]:
    return _optional_int_arg("month"), _optional_int_arg("year")


def _optional_date_arg(name: str) -> date | None:
    value = request.args.get(name)
    return require_iso_date(value, name) if value else None


def _optional_status_arg() -> AttendanceStatus | None:
    value = request.args.get("status")
    if not value:
        return None
    try:
        return AttendanceStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown status: {value}") from exc


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("attendance", __name__, url_prefix="/api/attendance")

    @bp.route("/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        result = container.attendance_service.check_in(current_employee_ref())
        return jsonify({"message": "Checked in successfully", "attendance": to_json(result)})

    @bp.route("/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        result = container.attendance_service.check_out(current_employee_ref())
        return jsonify({"message": "Checked out successfully", "attendance": to_json(result)})

    @bp.route("/my-history", methods=["GET"], endpoint="my_history")
    @login_required
    def my_history():
        month, year = _month_year_args()
        records = container.attendance_service.get_history(current_employee_ref(), month, year)
        return jsonify(to_json(list(records)))

    @bp.route("/my-summary", methods=["GET"], endpoint="my_summary")
    @login_required
    def my_summary():
        month, year = _month_year_args()
        return jsonify(to_json(container.report_service.get_summary(current_employee_ref(), month, year)))

    @bp.route("/today", methods=["GET"], endpoint="today")
    @login_required
    def today():
        return jsonify(to_json(container.attendance_service.get_today_status(current_employee_ref())))

    @bp.route("/all", methods=["GET"], endpoint="all_attendance")
    @manager_required
    def all_attendance():
        month, year = _month_year_args()
        rows = container.report_service.list_attendance(
            employee_code=request.args.get("employeeId") or None,
            day=_optional_date_arg("date"),
            status=_optional_status_arg(),
            month=month,
            year=year,
        )
        return jsonify(to_json(rows))

    @bp.route("/employee/<int:employee_ref>", methods=["GET"], endpoint="employee_attendance")
    @manager_required
    def employee_attendance(employee_ref: int):
        month, year = _month_year_args()
        return jsonify(to_json(container.report_service.get_employee_attendance(employee_ref, month, year)))

    @bp.route("/summary", methods=["GET"], endpoint="team_summary")
    @manager_required
    def team_summary():
        month, year = _month_year_args()
        return jsonify(to_json(container.report_service.get_org_summary(month, year)))

    @bp.route("/export", methods=["GET"], endpoint="export")
    @manager_required
    def export():
        start = require_iso_date(request.args.get("startDate", ""), "startDate")
        end = require_iso_date(request.args.get("endDate", ""), "endDate")
        rows = container.report_service.export_range(start, end, request.args.get("employeeId") or None)

        filename = f"attendance_export_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            render_csv(rows).encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @bp.route("/today-status", methods=["GET"], endpoint="today_status")
    @manager_required
    def today_status():
        return jsonify(to_json(container.report_service.today_overview()))

    @bp.route("/mark-absent", methods=["POST"], endpoint="mark_absent")
    @manager_required
    def mark_absent():
        day = _optional_date_arg("date")
        created = container.attendance_service.mark_absentees(day)
        return jsonify({"marked": len(created), "records": to_json(created)})

    app.register_blueprint(bp)
