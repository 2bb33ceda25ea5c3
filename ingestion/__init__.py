"""CSV ticket-snapshot ingestion: discovery, parsing, date normalization, loading."""

from ingestion.config import Settings
from ingestion.dates import normalize_date
from ingestion.discovery import SourceFile, discover_files
from ingestion.errors import (
    ConfigurationError,
    CorpusNotFoundError,
    DateParseError,
    IngestionError,
    LoadError,
    SourceReadError,
)
from ingestion.pipeline import MigrationResult, migrate, open_service, run
from ingestion.reader import read_rows
from ingestion.records import TicketRecord

__all__ = [
    "Settings",
    "SourceFile",
    "TicketRecord",
    "MigrationResult",
    "IngestionError",
    "ConfigurationError",
    "CorpusNotFoundError",
    "DateParseError",
    "LoadError",
    "SourceReadError",
    "discover_files",
    "read_rows",
    "normalize_date",
    "migrate",
    "open_service",
    "run",
]
