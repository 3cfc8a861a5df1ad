from config.config import DB_CONFIG, LOG_LEVEL  # noqa: F401

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
