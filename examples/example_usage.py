"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

import importlib

from config import get_settings_module

from attendance_tracker.common.serialization import to_json
from attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(to_json(container.report_service.get_summary(employee_ref=None)))
    print(to_json(container.dashboard_service.manager_dashboard()))


if __name__ == "__main__":
    main()
