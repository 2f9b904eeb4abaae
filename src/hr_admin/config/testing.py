import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_admin_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Tests run against the in-memory key-value store unless told otherwise.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")
STORAGE_FILE = None

WORKFLOW_PAGE_SIZE = 5

AUTO_INIT_DB = False
AUTO_SEED_DB = False
