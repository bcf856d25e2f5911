import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5")),
    "query_timeout": int(os.getenv("DB_QUERY_TIMEOUT", "10")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

EXPOSE_ERROR_DETAILS = bool(int(os.getenv("EXPOSE_ERROR_DETAILS", "0")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
