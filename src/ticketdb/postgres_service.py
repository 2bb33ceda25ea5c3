"""PostgreSQL implementation of DatabaseService."""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
import psycopg2.extras

from ticketdb.service import DatabaseService
from ticketdb.types import Params, ParamsList, Row


class PostgresDatabaseService(DatabaseService):
    """PostgreSQL backend using psycopg2."""

    placeholder = "%s"
    errors = (psycopg2.Error,)

    def __init__(self, dsn: str):
        self._dsn = dsn
        self._conn = None
        self._in_transaction = False

    def connect(self) -> None:
        self._conn = psycopg2.connect(self._dsn)
        self._conn.autocommit = False

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _require_conn(self):
        if self._conn is None:
            raise RuntimeError("Not connected. Call connect() first.")
        return self._conn

    def _get_conn(self):
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
        with self._get_conn().cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
            cur.execute(sql, params or ())
            if cur.description is None:
                return []
            return [dict(row) for row in cur.fetchall()]

    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        with self._get_conn().cursor() as cur:
            psycopg2.extras.execute_batch(cur, sql, params_list)

    def execute_ddl(self, sql: str) -> None:
        conn = self._require_conn()
        try:
            with conn.cursor() as cur:
                for statement in sql.split(";"):
                    statement = statement.strip()
                    if statement:
                        cur.execute(statement)
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def batch_insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        if not rows:
            return
        cols = ", ".join(columns)
        placeholders = ", ".join("%s" for _ in columns)
        self.execute_many(f"INSERT INTO {table} ({cols}) VALUES ({placeholders})", rows)
