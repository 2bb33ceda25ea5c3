"""CLI: report how many snapshot rows are stored and show a few at random.

Usage:
    python -m scripts.check_tickets [--db-url sqlite:///data.db] [--table tickets] [--samples 5]
"""

import argparse
import logging
import sys

from analytics import count_rows, sample_rows
from ingestion import IngestionError, Settings
from ingestion.pipeline import open_service

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect the tickets table")
    parser.add_argument("--db-url", help="Database URL")
    parser.add_argument("--table", help="Tickets table name")
    parser.add_argument("--samples", type=int, default=5, help="Number of random rows to show")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env().override(db_url=args.db_url, table=args.table)
        service = open_service(settings.db_url)
    except IngestionError as e:
        logger.error("%s", e)
        return 1

    try:
        total = count_rows(service, settings.table)
        if total == 0:
            logger.info("The %r table is empty.", settings.table)
            return 0
        samples = sample_rows(service, settings.table, args.samples)
        logger.info("Found %d rows. Showing %d random samples:", total, len(samples))
        for record in samples:
            print(
                f"Ticket={record.ticket} Status={record.status} "
                f"Created={record.created.isoformat() if record.created else None} "
                f"SnapshotDate={record.snapshot_date.isoformat()}"
            )
    except service.errors as e:
        logger.error("Could not read table %r: %s", settings.table, e)
        return 1
    finally:
        service.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
