"""Latest snapshot per ticket, as consumed by the dashboard.

Filters apply to each ticket's latest snapshot only, so a ticket that was
Open last week and is Closed now does not show up under status=["Open"].
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Sequence

from ingestion.config import validate_table_name
from ingestion.records import TicketRecord
from ingestion.schema import TICKETS_TABLE
from ticketdb import DatabaseService, Row

logger = logging.getLogger(__name__)

SORT_KEYS: dict[str, Callable[[TicketRecord], Any]] = {
    "snapshot_date": lambda r: r.snapshot_date,
    "created": lambda r: r.created,
    "ticket": lambda r: r.ticket,
    "status": lambda r: r.status,
    "priority": lambda r: r.priority,
}


def _to_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(str(value))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def row_to_record(row: Row) -> TicketRecord:
    """Rebuild a TicketRecord from a tickets table row."""
    fields = {"Ticket": row["ticket"], "Status": row["status"], "Priority": row["priority"]}
    fields.update(json.loads(row["extra"] or "{}"))
    return TicketRecord(
        fields=fields,
        snapshot_date=_to_datetime(row["snapshot_date"]),
        created=_to_datetime(row["created"]),
        source_file=row["source_file"],
        load_seq=row["load_seq"],
    )


def latest_per_ticket(records: Iterable[TicketRecord]) -> list[TicketRecord]:
    """Keep the record with the greatest snapshot_date for each ticket.

    Records must arrive in load order. On equal snapshot dates the
    earliest-loaded record wins. Output follows first appearance of each
    ticket.
    """
    latest: dict[str, TicketRecord] = {}
    for record in records:
        current = latest.get(record.ticket)
        if current is None or record.snapshot_date > current.snapshot_date:
            latest[record.ticket] = record
    return list(latest.values())


def sort_records(
    records: Sequence[TicketRecord],
    sort_by: str = "snapshot_date",
    descending: bool = True,
) -> list[TicketRecord]:
    """Sort by a known key or any raw column. Missing values always go last."""
    key = SORT_KEYS.get(sort_by) or (lambda r: r.fields.get(sort_by))
    present = [r for r in records if key(r) is not None]
    missing = [r for r in records if key(r) is None]
    return sorted(present, key=key, reverse=descending) + missing


def fetch_latest_tickets(
    service: DatabaseService,
    table: str = TICKETS_TABLE,
    status: Sequence[str] | None = None,
    priority: Sequence[str] | None = None,
    sort_by: str = "snapshot_date",
    descending: bool = True,
) -> list[TicketRecord]:
    """Latest snapshot of every ticket, optionally filtered by status/priority."""
    validate_table_name(table)
    with service.transaction():
        rows = service.execute(f"SELECT * FROM {table} ORDER BY load_seq")

    tickets = latest_per_ticket(row_to_record(row) for row in rows)
    if status:
        tickets = [t for t in tickets if t.status in status]
    if priority:
        tickets = [t for t in tickets if t.priority in priority]

    logger.info("Found %d tickets (from %d snapshot rows)", len(tickets), len(rows))
    return sort_records(tickets, sort_by, descending)


def count_rows(service: DatabaseService, table: str = TICKETS_TABLE) -> int:
    validate_table_name(table)
    with service.transaction():
        rows = service.execute(f"SELECT COUNT(*) AS cnt FROM {table}")
    return int(rows[0]["cnt"])


def sample_rows(
    service: DatabaseService, table: str = TICKETS_TABLE, size: int = 5
) -> list[TicketRecord]:
    """Up to `size` random snapshot rows."""
    validate_table_name(table)
    with service.transaction():
        rows = service.execute(
            f"SELECT * FROM {table} ORDER BY RANDOM() LIMIT {service.placeholder}", (size,)
        )
    return [row_to_record(row) for row in rows]
