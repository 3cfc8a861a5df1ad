from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from attendance_tracker.container import build_container
from attendance_tracker.database.seed import DEMO_EMPLOYEES, seed_demo_data

logger = logging.getLogger("seed_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))

    created = seed_demo_data(container)
    logger.info("Seeded %d employees and %d attendance records", len(DEMO_EMPLOYEES), created)


if __name__ == "__main__":
    main()
