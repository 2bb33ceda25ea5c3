"""TicketRecord: one CSV row of one snapshot, with normalized dates."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ingestion.dates import normalize_date

TICKET = "Ticket"
STATUS = "Status"
PRIORITY = "Priority"
CREATED = "Created"
SNAPSHOT_DATE = "SnapshotDate"


@dataclass
class TicketRecord:
    """A ticket row. `fields` keeps every raw column except Created."""

    fields: dict[str, str]
    snapshot_date: datetime
    created: datetime | None = None
    source_file: str | None = None
    load_seq: int | None = field(default=None, compare=False)

    @property
    def ticket(self) -> str:
        return self.fields.get(TICKET, "")

    @property
    def status(self) -> str:
        return self.fields.get(STATUS, "")

    @property
    def priority(self) -> str:
        return self.fields.get(PRIORITY, "")

    @property
    def extra(self) -> dict[str, str]:
        """Columns outside the required Ticket/Status/Priority set."""
        return {k: v for k, v in self.fields.items() if k not in (TICKET, STATUS, PRIORITY)}

    @classmethod
    def from_row(
        cls,
        row: dict[str, str],
        snapshot_date: datetime,
        source_file: str | None = None,
    ) -> "TicketRecord":
        """Build a record from a raw row. Raises DateParseError on a bad Created value."""
        fields = {k: v for k, v in row.items() if k != CREATED}
        return cls(
            fields=fields,
            snapshot_date=snapshot_date,
            created=normalize_date(row.get(CREATED)),
            source_file=source_file,
        )

    def to_document(self) -> dict[str, Any]:
        """Flat view: raw columns plus Created and SnapshotDate as ISO strings."""
        doc: dict[str, Any] = dict(self.fields)
        doc[CREATED] = self.created.isoformat() if self.created else None
        doc[SNAPSHOT_DATE] = self.snapshot_date.isoformat()
        return doc
