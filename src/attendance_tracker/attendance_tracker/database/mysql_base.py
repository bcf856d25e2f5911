from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.constants import MYSQL_ERR_NO_SUCH_TABLE
from ..core.exceptions import SchemaNotInitializedError, StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def translate_mysql_error(e: mysql.connector.Error, *, action: str) -> StorageError:
    """Map a driver error onto the storage error taxonomy."""
    if getattr(e, "errno", None) == MYSQL_ERR_NO_SUCH_TABLE:
        return SchemaNotInitializedError("Database not initialized", details=str(e))
    return StorageError(f"Failed to {action}", details=str(e))


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, action: str = "access database", dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _safe_rollback(conn)
        logger.error("Database error while trying to %s: %s", action, e)
        raise translate_mysql_error(e, action=action) from e
    except Exception:
        _safe_rollback(conn)
        raise
    finally:
        conn.close()


def _safe_rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error as e:
        logger.warning("Rollback failed: %s", e)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
