import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test_db"),
    "pool_size": 2,
    "connection_timeout": 2,
    "query_timeout": 2,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

EXPOSE_ERROR_DETAILS = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
