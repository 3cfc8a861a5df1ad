from __future__ import annotations

from flask import Blueprint, Flask, jsonify

from ..common.serialization import to_json
from ..common.web import current_employee_ref, login_required, manager_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")

    @bp.route("/employee", methods=["GET"], endpoint="employee")
    @login_required
    def employee():
        return jsonify(to_json(container.dashboard_service.employee_dashboard(current_employee_ref())))

    @bp.route("/manager", methods=["GET"], endpoint="manager")
    @manager_required
    def manager():
        return jsonify(to_json(container.dashboard_service.manager_dashboard()))

    app.register_blueprint(bp)
