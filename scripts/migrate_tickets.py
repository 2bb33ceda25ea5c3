"""CLI entry point for the ticket snapshot migration.

Usage:
    python -m scripts.migrate_tickets [--source-dir ticketCorpus] [--db-url sqlite:///data.db] [--table tickets]

Defaults come from TICKETS_SOURCE_DIR, TICKETS_DB_URL and TICKETS_TABLE.
"""

import argparse
import logging
import sys

from ingestion import IngestionError, Settings, run

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load ticket snapshot CSVs into the database")
    parser.add_argument("--source-dir", help="Directory of snapshot CSV files")
    parser.add_argument("--db-url", help="Database URL (sqlite:/// or postgresql://)")
    parser.add_argument("--table", help="Target table name")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env().override(args.source_dir, args.db_url, args.table)
        logger.info("Corpus path: %s", settings.source_dir.resolve())
        result = run(settings)
    except IngestionError as e:
        logger.error("Migration failed: %s", e)
        return 1
    logger.info("Done. %d rows from %d files.", result.total_rows, len(result.files))
    return 0


if __name__ == "__main__":
    sys.exit(main())
