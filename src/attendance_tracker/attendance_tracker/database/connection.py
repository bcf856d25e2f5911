from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling

from ..core.constants import (
    DEFAULT_CONNECTION_TIMEOUT_SECONDS,
    DEFAULT_POOL_SIZE,
    DEFAULT_QUERY_TIMEOUT_SECONDS,
)
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    connection_timeout: int = DEFAULT_CONNECTION_TIMEOUT_SECONDS
    query_timeout: int = DEFAULT_QUERY_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_db")),
            pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
            connection_timeout=int(db_config.get("connection_timeout", DEFAULT_CONNECTION_TIMEOUT_SECONDS)),
            query_timeout=int(db_config.get("query_timeout", DEFAULT_QUERY_TIMEOUT_SECONDS)),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Pooled MySQL connection factory.

    Created once by the container and passed to every repository. The pool is
    opened lazily on first use so the app can start (and report unhealthy)
    while the database is down. Each checkout applies the query timeouts,
    because the pool resets session variables when a connection is returned.
    """

    def __init__(self, config: DBConfig, *, pool_name: str = "attendance_pool"):
        self._config = config
        self._pool_name = pool_name
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._lock:
            if self._pool is None:
                logger.info("Opening MySQL pool (%s, size=%d)", self._config.describe(), self._config.pool_size)
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=self._pool_name,
                    pool_size=self._config.pool_size,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                    connection_timeout=self._config.connection_timeout,
                    autocommit=False,
                )
            return self._pool

    def connect(self):
        try:
            conn = self._get_pool().get_connection()
        except mysql.connector.Error as e:
            raise StorageError("Database unavailable", details=str(e)) from e

        timeout = int(self._config.query_timeout)
        try:
            cur = conn.cursor()
            try:
                cur.execute("SET SESSION max_execution_time = %s", (timeout * 1000,))
                cur.execute("SET SESSION innodb_lock_wait_timeout = %s", (max(timeout, 1),))
            finally:
                cur.close()
        except mysql.connector.Error as e:
            conn.close()
            raise StorageError("Database unavailable", details=str(e)) from e
        return conn
