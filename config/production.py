import os

from config.config import AUTO_INIT_DB, AUTO_SEED_DB, DB_CONFIG, LOG_LEVEL  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
