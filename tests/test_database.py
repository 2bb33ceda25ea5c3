"""Tests for DatabaseService (SQLite backend)."""

import pytest

from ticketdb import SQLiteDatabaseService, create_service


class TestCreateService:
    def test_sqlite_url(self, tmp_path):
        service = create_service(f"sqlite:///{tmp_path / 'x.db'}")
        assert isinstance(service, SQLiteDatabaseService)

    def test_unsupported_scheme(self):
        with pytest.raises(ValueError, match="Unsupported database URL scheme"):
            create_service("mongodb://localhost:27017")


class TestDatabaseService:
    def test_execute_ddl_and_insert(self, db_service):
        db_service.execute_ddl("CREATE TABLE t (id INTEGER PRIMARY KEY, name TEXT)")
        with db_service.transaction():
            db_service.execute("INSERT INTO t (id, name) VALUES (?, ?)", (1, "alice"))
            rows = db_service.execute("SELECT * FROM t")
        assert rows == [{"id": 1, "name": "alice"}]

    def test_batch_insert(self, db_service):
        db_service.execute_ddl("CREATE TABLE t (id INTEGER PRIMARY KEY, val TEXT)")
        with db_service.transaction():
            db_service.batch_insert("t", ["id", "val"], [(1, "x"), (2, "y")])
            rows = db_service.execute("SELECT * FROM t ORDER BY id")
        assert [r["val"] for r in rows] == ["x", "y"]

    def test_batch_insert_empty_rows(self, db_service):
        db_service.execute_ddl("CREATE TABLE t (id INTEGER PRIMARY KEY, val TEXT)")
        with db_service.transaction():
            db_service.batch_insert("t", ["id", "val"], [])
            rows = db_service.execute("SELECT * FROM t")
        assert rows == []

    def test_transaction_rollback_on_error(self, db_service):
        db_service.execute_ddl("CREATE TABLE t (id INTEGER PRIMARY KEY, val TEXT)")
        with pytest.raises(ValueError):
            with db_service.transaction():
                db_service.execute("INSERT INTO t (id, val) VALUES (?, ?)", (1, "x"))
                raise ValueError("simulated failure")

        with db_service.transaction():
            rows = db_service.execute("SELECT * FROM t")
        assert rows == []

    def test_requires_transaction(self, db_service):
        with pytest.raises(RuntimeError, match="No active transaction"):
            db_service.execute("SELECT 1")

    def test_requires_connection(self, tmp_path):
        service = create_service(f"sqlite:///{tmp_path / 'x.db'}")
        with pytest.raises(RuntimeError, match="Not connected"):
            with service.transaction():
                pass

    def test_drop_table_is_idempotent(self, db_service):
        db_service.drop_table("missing")
        db_service.execute_ddl("CREATE TABLE t (id INTEGER)")
        db_service.drop_table("t")
        with db_service.transaction():
            rows = db_service.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        assert rows == []

    def test_close_twice(self, db_service):
        db_service.close()
        db_service.close()
