from __future__ import annotations

import mysql.connector
import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import SchemaNotInitializedError, StorageError
from src.attendance_tracker.attendance_tracker.database.mysql_base import db_cursor, escape_like


class FakeCursor:
    def __init__(self, error=None):
        self._error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self._error is not None:
            raise self._error

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, error=None):
        self.cursor_obj = FakeCursor(error)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def test_success_commits_and_returns_connection():
    conn = FakeConnection()

    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed
    assert conn.closed
    assert cur.closed


def test_missing_table_is_translated():
    err = mysql.connector.errors.ProgrammingError(msg="Table 'attendance_db.attendance' doesn't exist", errno=1146)
    conn = FakeConnection(err)

    with pytest.raises(SchemaNotInitializedError):
        with db_cursor(FakeFactory(conn), action="read records") as (_, cur):
            cur.execute("SELECT * FROM attendance")

    assert conn.rolled_back
    assert conn.closed


def test_driver_error_becomes_storage_error_with_details():
    err = mysql.connector.errors.OperationalError(msg="Query execution was interrupted", errno=3024)
    conn = FakeConnection(err)

    with pytest.raises(StorageError) as exc:
        with db_cursor(FakeFactory(conn), action="search records") as (_, cur):
            cur.execute("SELECT 1")

    assert str(exc.value) == "Failed to search records"
    assert "interrupted" in exc.value.details
    assert not isinstance(exc.value, SchemaNotInitializedError)


def test_escape_like_neutralizes_wildcards():
    assert escape_like("50%_a\\b") == "50\\%\\_a\\\\b"
