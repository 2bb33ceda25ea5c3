"""Corpus discovery: pick the CSV snapshot files and date each one."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from ingestion.errors import CorpusNotFoundError

logger = logging.getLogger(__name__)

CSV_SUFFIX = ".csv"
_DATE_IN_NAME = re.compile(r"(\d{4}-\d{2}-\d{2})")


@dataclass(frozen=True)
class SourceFile:
    path: Path
    snapshot_date: datetime
    snapshot_from_filename: bool = True

    @property
    def name(self) -> str:
        return self.path.name


def snapshot_date_from_name(name: str) -> datetime | None:
    """Return midnight UTC of the first valid YYYY-MM-DD in a filename, if any."""
    for candidate in _DATE_IN_NAME.findall(name):
        try:
            day = datetime.strptime(candidate, "%Y-%m-%d")
        except ValueError:
            continue
        return day.replace(tzinfo=timezone.utc)
    return None


def _snapshot_for(path: Path) -> SourceFile:
    snapshot = snapshot_date_from_name(path.name)
    if snapshot is not None:
        return SourceFile(path, snapshot)

    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    logger.warning(
        "Could not parse date from filename %r. Using file modification date as "
        "snapshot date: %s",
        path.name,
        mtime.isoformat(),
    )
    return SourceFile(path, mtime, snapshot_from_filename=False)


def discover_files(directory: str | Path) -> list[SourceFile]:
    """List the CSV files of a corpus directory, sorted by name.

    Raises CorpusNotFoundError when the directory is missing or unreadable.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise CorpusNotFoundError(f"Cannot read corpus directory {directory}: {e}") from e

    logger.info("Searching for CSV files in %s (%d entries)", directory, len(entries))
    files = [
        _snapshot_for(path)
        for path in entries
        if path.suffix.lower() == CSV_SUFFIX and path.is_file()
    ]
    logger.info("Found %d CSV files", len(files))
    return files
