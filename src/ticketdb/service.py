"""Abstract DatabaseService interface."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from ticketdb.types import Params, ParamsList, Row


class DatabaseService(ABC):
    """Database-agnostic interface used by the ingestion pipeline.

    One long-lived connection per service: connect() opens it, close()
    releases it. Writes happen inside transaction() blocks.
    """

    placeholder = "?"
    # driver exceptions raised by this backend
    errors: tuple[type[Exception], ...] = ()

    @abstractmethod
    def connect(self) -> None:
        """Open the connection."""

    @abstractmethod
    def close(self) -> None:
        """Close the connection. Safe to call more than once."""

    @abstractmethod
    def execute(self, sql: str, params: Params | None = None) -> list[Row]:
        """Execute a single SQL statement and return rows as dicts."""

    @abstractmethod
    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        """Execute a SQL statement for each parameter set."""

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Context manager: commits on success, rolls back on error."""

    @abstractmethod
    def execute_ddl(self, sql: str) -> None:
        """Execute DDL statements (DROP/CREATE TABLE, CREATE INDEX, etc.)."""

    @abstractmethod
    def batch_insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        """Insert multiple rows into a table."""

    def drop_table(self, table: str) -> None:
        """Drop a table; a missing table is not an error."""
        self.execute_ddl(f"DROP TABLE IF EXISTS {table}")
