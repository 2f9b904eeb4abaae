import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_admin"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "mysql" or "memory" (JSON blobs per record kind, optionally mirrored to STORAGE_FILE)
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_FILE = os.getenv("STORAGE_FILE") or None

WORKFLOW_PAGE_SIZE = int(os.getenv("WORKFLOW_PAGE_SIZE", "5"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also insert the default records on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
