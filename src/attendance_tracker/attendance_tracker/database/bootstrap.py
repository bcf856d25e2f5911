from __future__ import annotations

import logging

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection, DBConfig
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)


def ensure_database_exists(config: DBConfig) -> None:
    """Create the configured database if the server does not have it yet."""
    try:
        conn = mysql.connector.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            connection_timeout=config.connection_timeout,
            use_pure=True,
        )
    except mysql.connector.Error as e:
        raise StorageError("Database server unavailable", details=str(e)) from e

    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
        logger.info("Database %s is ready", config.database)
    finally:
        conn.close()


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, action="list tables", dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
