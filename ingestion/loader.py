"""Writes ticket records into the store, one transaction per file."""

import json
import logging
from typing import Sequence

from ingestion.errors import LoadError
from ingestion.records import TicketRecord
from ingestion.schema import TICKET_COLUMNS, table_ddl
from ticketdb import DatabaseService

logger = logging.getLogger(__name__)


def reset_table(service: DatabaseService, table: str) -> None:
    """Drop the table if present and create it empty.

    A missing table is fine; any other store error raises LoadError.
    """
    try:
        service.drop_table(table)
        logger.info("Dropped existing table %s", table)
        service.execute_ddl(table_ddl(table))
    except service.errors as e:
        raise LoadError(f"Could not reset table {table}: {e}") from e


def record_to_row(record: TicketRecord, load_seq: int) -> tuple:
    """Serialize a record into a tuple matching TICKET_COLUMNS."""
    return (
        load_seq,
        record.ticket,
        record.status,
        record.priority,
        record.created.isoformat() if record.created else None,
        record.snapshot_date.isoformat(),
        record.source_file,
        json.dumps(record.extra, sort_keys=True),
    )


def load_records(
    service: DatabaseService,
    table: str,
    records: Sequence[TicketRecord],
    start_seq: int = 1,
) -> int:
    """Insert one file's records in a single transaction.

    Returns the number of rows written. An empty sequence is a no-op.
    Raises LoadError if the store rejects the write; the transaction is
    rolled back and nothing from this batch is kept.
    """
    if not records:
        return 0
    rows = [record_to_row(record, start_seq + i) for i, record in enumerate(records)]
    try:
        with service.transaction():
            service.batch_insert(table, TICKET_COLUMNS, rows)
    except Exception as e:
        raise LoadError(f"Bulk insert of {len(rows)} rows into {table} failed: {e}") from e
    return len(rows)
