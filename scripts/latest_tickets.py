"""CLI: print the latest snapshot of every ticket as JSON.

Usage:
    python -m scripts.latest_tickets [--status Open Pending] [--priority High] [--sort-by created] [--ascending]
"""

import argparse
import json
import logging
import sys

from analytics import fetch_latest_tickets
from ingestion import IngestionError, Settings
from ingestion.pipeline import open_service

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Latest snapshot per ticket")
    parser.add_argument("--db-url", help="Database URL")
    parser.add_argument("--table", help="Tickets table name")
    parser.add_argument("--status", nargs="+", help="Keep only these statuses")
    parser.add_argument("--priority", nargs="+", help="Keep only these priorities")
    parser.add_argument("--sort-by", default="snapshot_date", help="Sort key or column name")
    parser.add_argument("--ascending", action="store_true", help="Sort ascending")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env().override(db_url=args.db_url, table=args.table)
        service = open_service(settings.db_url)
    except IngestionError as e:
        logger.error("%s", e)
        return 1

    try:
        tickets = fetch_latest_tickets(
            service,
            settings.table,
            status=args.status,
            priority=args.priority,
            sort_by=args.sort_by,
            descending=not args.ascending,
        )
    except service.errors as e:
        logger.error("Could not read table %r: %s", settings.table, e)
        return 1
    finally:
        service.close()

    json.dump([t.to_document() for t in tickets], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
