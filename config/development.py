import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_ledger"),
}

# mysql | memory
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")

# Which field of a device record carries the marker: time | status
MARKER_MODE = os.getenv("MARKER_MODE", "time")
# non_empty | present_only; unset = derived from MARKER_MODE
COUNTING_POLICY = os.getenv("COUNTING_POLICY") or None
# numeric | text
ID_SORT = os.getenv("ID_SORT", "numeric")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
