"""Error taxonomy for the ticket ingestion pipeline.

Every error here is fatal for the run: nothing is retried, and the
pipeline closes the store connection before the error reaches the caller.
"""


class IngestionError(RuntimeError):
    """Base class for fatal ingestion failures."""


class ConfigurationError(IngestionError):
    """Invalid settings (bad table name, missing values)."""


class CorpusNotFoundError(IngestionError):
    """The corpus directory is missing or cannot be listed."""


class DateParseError(IngestionError, ValueError):
    """A date string matched none of the known formats or fallbacks."""

    def __init__(self, value: str, source: str | None = None, line: int | None = None):
        self.value = value
        self.source = source
        self.line = line
        message = f"Unparseable date {value!r}"
        if source is not None:
            message += f" in {source}"
            if line is not None:
                message += f" (line {line})"
        super().__init__(message)


class SourceReadError(IngestionError):
    """A corpus file could not be read or decoded."""


class LoadError(IngestionError):
    """A bulk write into the store failed."""
