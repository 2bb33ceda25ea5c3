"""Tickets table schema."""

TICKETS_TABLE = "tickets"

TICKET_COLUMNS = [
    "load_seq",
    "ticket",
    "status",
    "priority",
    "created",
    "snapshot_date",
    "source_file",
    "extra",
]

_TABLE_DDL = """
CREATE TABLE {table} (
    load_seq      INTEGER     NOT NULL,
    ticket        TEXT        NOT NULL,
    status        TEXT        NOT NULL,
    priority      TEXT        NOT NULL,
    created       TIMESTAMPTZ,
    snapshot_date TIMESTAMPTZ NOT NULL,
    source_file   TEXT,
    extra         TEXT        NOT NULL
);
CREATE INDEX idx_{table}_ticket ON {table}(ticket);
CREATE INDEX idx_{table}_snapshot ON {table}(snapshot_date);
"""


def table_ddl(table: str = TICKETS_TABLE) -> str:
    return _TABLE_DDL.format(table=table)
