"""SQLite implementation of DatabaseService."""

import sqlite3
from contextlib import contextmanager
from typing import Iterator

from ticketdb.service import DatabaseService
from ticketdb.types import Params, ParamsList, Row


class SQLiteDatabaseService(DatabaseService):
    """SQLite backend using stdlib sqlite3."""

    placeholder = "?"
    errors = (sqlite3.Error,)

    def __init__(self, db_path: str):
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._in_transaction = False

    def connect(self) -> None:
        self._conn = sqlite3.connect(self._db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected. Call connect() first.")
        return self._conn

    def _get_conn(self) -> sqlite3.Connection:
        conn = self._require_conn()
        if not self._in_transaction:
            raise RuntimeError(
                "No active transaction. Wrap calls in a `with service.transaction():` block."
            )
        return conn

    @contextmanager
    def transaction(self) -> Iterator[None]:
        conn = self._require_conn()
        self._in_transaction = True
        try:
            yield
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._in_transaction = False

    def execute(self, sql: str, params: Params | None = None) -> list[Row]:
        cursor = self._get_conn().execute(sql, params or ())
        if cursor.description is None:
            return []
        return [dict(row) for row in cursor.fetchall()]

    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        self._get_conn().executemany(sql, params_list)

    def execute_ddl(self, sql: str) -> None:
        conn = self._require_conn()
        conn.executescript(sql)
        conn.commit()

    def batch_insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        if not rows:
            return
        cols = ", ".join(columns)
        placeholders = ", ".join("?" for _ in columns)
        self.execute_many(f"INSERT INTO {table} ({cols}) VALUES ({placeholders})", rows)
