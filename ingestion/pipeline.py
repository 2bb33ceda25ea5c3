"""One full migration run: corpus directory in, tickets table out."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ingestion.config import Settings, validate_table_name
from ingestion.discovery import SourceFile, discover_files
from ingestion.errors import ConfigurationError, DateParseError, SourceReadError
from ingestion.loader import load_records, reset_table
from ingestion.reader import numbered_rows
from ingestion.records import TicketRecord
from ingestion.schema import TICKETS_TABLE
from ticketdb import DatabaseService, create_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileResult:
    name: str
    snapshot_date: datetime
    rows: int


@dataclass
class MigrationResult:
    files: list[FileResult] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return sum(f.rows for f in self.files)


def build_records(source: SourceFile) -> list[TicketRecord]:
    """Parse a file and tag every row with the file's snapshot date.

    A bad Created value raises DateParseError naming the file and line; an
    undecodable or unreadable file raises SourceReadError.
    """
    records = []
    try:
        for line, row in numbered_rows(source.path):
            try:
                records.append(TicketRecord.from_row(row, source.snapshot_date, source.name))
            except DateParseError as e:
                raise DateParseError(e.value, source=str(source.path), line=line) from e
    except OSError as e:
        raise SourceReadError(f"Cannot read {source.path}: {e}") from e
    return records


def migrate(
    service: DatabaseService,
    corpus_dir: str | Path,
    table: str = TICKETS_TABLE,
) -> MigrationResult:
    """Replace the table's contents with every row of every CSV in corpus_dir.

    The service must already be connected. Files are loaded in name order,
    each in its own transaction; a failure stops the run and leaves the
    files before it in place.
    """
    validate_table_name(table)
    sources = discover_files(corpus_dir)
    reset_table(service, table)

    result = MigrationResult()
    next_seq = 1
    for source in sources:
        logger.info(
            "Processing %s with snapshot date %s", source.name, source.snapshot_date.isoformat()
        )
        records = build_records(source)
        inserted = load_records(service, table, records, start_seq=next_seq)
        next_seq += inserted
        if inserted:
            logger.info("Inserted %d rows from %s", inserted, source.name)
        else:
            logger.info("No rows in %s", source.name)
        result.files.append(FileResult(source.name, source.snapshot_date, inserted))

    logger.info(
        "Migration completed: %d rows from %d files", result.total_rows, len(result.files)
    )
    return result


def open_service(db_url: str) -> DatabaseService:
    """Create and connect the store for db_url.

    An unsupported URL or a store that cannot be reached raises
    ConfigurationError, before any data is touched.
    """
    try:
        service = create_service(db_url)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    try:
        service.connect()
    except service.errors as e:
        raise ConfigurationError(f"Cannot connect to the ticket store: {e}") from e
    return service


def run(settings: Settings) -> MigrationResult:
    """Connect, migrate, and always close the connection."""
    service = open_service(settings.db_url)
    try:
        return migrate(service, settings.source_dir, settings.table)
    finally:
        service.close()
