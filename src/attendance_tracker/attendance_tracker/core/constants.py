"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ATTENDANCE_TABLE = "attendance"

DEFAULT_POOL_SIZE = 5
DEFAULT_CONNECTION_TIMEOUT_SECONDS = 5
DEFAULT_QUERY_TIMEOUT_SECONDS = 10

DEFAULT_RECENT_LIMIT = 5

# MySQL server error ER_NO_SUCH_TABLE
MYSQL_ERR_NO_SUCH_TABLE = 1146
