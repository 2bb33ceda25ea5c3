"""Shared test fixtures."""

from pathlib import Path

import pytest

from ticketdb import create_service

HEADER = ["Ticket", "Status", "Priority", "Created", "Assigned", "Description"]


@pytest.fixture
def db_service(tmp_path):
    """Provide a fresh, connected SQLite DatabaseService for each test."""
    db_path = tmp_path / "test.db"
    service = create_service(f"sqlite:///{db_path}")
    service.connect()
    yield service
    service.close()


@pytest.fixture
def corpus(tmp_path):
    """A factory writing CSV files into an empty corpus directory."""
    directory = tmp_path / "corpus"
    directory.mkdir()

    def write(name: str, rows: list[list[str]], header: list[str] = HEADER) -> Path:
        lines = [",".join(header)] + [",".join(row) for row in rows]
        path = directory / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    write.directory = directory
    return write

