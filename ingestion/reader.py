"""Streaming CSV row reader."""

import csv
import logging
from pathlib import Path
from typing import BinaryIO, Iterator

from ingestion.errors import SourceReadError

logger = logging.getLogger(__name__)


def _decoded_lines(f: BinaryIO, file_path: str | Path) -> Iterator[str]:
    for number, raw in enumerate(f, start=1):
        try:
            yield raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise SourceReadError(f"{file_path} line {number} is not valid UTF-8: {e}") from e


def _is_empty_line(row: list[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def numbered_rows(file_path: str | Path) -> Iterator[tuple[int, dict[str, str]]]:
    """Yield (line number, row) pairs, the row keyed by the trimmed header.

    Empty and whitespace-only lines are skipped; a line of bare delimiters
    is still a row. Short rows are padded with empty strings and cells
    beyond the header are dropped. The file stays open until the generator
    is exhausted or closed. Raises SourceReadError on bytes that are not
    UTF-8.
    """
    with open(file_path, "rb") as f:
        reader = csv.reader(_decoded_lines(f, file_path))
        header = next(reader, None)
        if header is None:
            return
        fieldnames = [name.strip() for name in header]
        width = len(fieldnames)

        for row in reader:
            if _is_empty_line(row):
                continue
            if len(row) > width:
                logger.debug(
                    "%s line %d: dropping %d extra cells", file_path, reader.line_num, len(row) - width
                )
            cells = row[:width] + [""] * (width - len(row))
            yield reader.line_num, {
                name: cell.strip() for name, cell in zip(fieldnames, cells) if name
            }


def read_rows(file_path: str | Path) -> Iterator[dict[str, str]]:
    """Yield the data rows of a CSV file; see numbered_rows."""
    for _, row in numbered_rows(file_path):
        yield row
