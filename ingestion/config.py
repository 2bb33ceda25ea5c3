"""Runtime settings for the ticket pipeline, read from the environment."""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from ingestion.errors import ConfigurationError

DEFAULT_SOURCE_DIR = "ticketCorpus"
DEFAULT_DB_URL = "sqlite:///ticketing_analytics.db"
DEFAULT_TABLE = "tickets"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_table_name(table: str) -> str:
    """Table names are interpolated into SQL, so only plain identifiers pass."""
    if not _IDENTIFIER.match(table):
        raise ConfigurationError(f"Invalid table name: {table!r}")
    return table


@dataclass(frozen=True)
class Settings:
    source_dir: Path
    db_url: str
    table: str = DEFAULT_TABLE

    def __post_init__(self):
        validate_table_name(self.table)
        if not self.db_url:
            raise ConfigurationError("Database URL must not be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from TICKETS_SOURCE_DIR, TICKETS_DB_URL and TICKETS_TABLE."""
        env = os.environ if environ is None else environ
        return cls(
            source_dir=Path(env.get("TICKETS_SOURCE_DIR", DEFAULT_SOURCE_DIR)),
            db_url=env.get("TICKETS_DB_URL", DEFAULT_DB_URL),
            table=env.get("TICKETS_TABLE", DEFAULT_TABLE),
        )

    def override(
        self,
        source_dir: str | Path | None = None,
        db_url: str | None = None,
        table: str | None = None,
    ) -> "Settings":
        """Return a copy with any non-None argument replacing the current value."""
        return Settings(
            source_dir=Path(source_dir) if source_dir is not None else self.source_dir,
            db_url=db_url if db_url is not None else self.db_url,
            table=table if table is not None else self.table,
        )
