"""Read side of the tickets table: latest snapshot per ticket."""

from analytics.latest import (
    count_rows,
    fetch_latest_tickets,
    latest_per_ticket,
    sample_rows,
    sort_records,
)

__all__ = [
    "count_rows",
    "fetch_latest_tickets",
    "latest_per_ticket",
    "sample_rows",
    "sort_records",
]
