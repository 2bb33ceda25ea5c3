"""Date normalization for ticket CSV values.

Values are tried against a fixed list of formats seen in the ticket
exports, in order, and the first one that parses wins. Anything else goes
through ISO-8601 and then dateparser. A value nothing can parse raises
DateParseError; it is never stored as null.
"""

import logging
from datetime import datetime, timezone

import dateparser

from ingestion.errors import DateParseError

logger = logging.getLogger(__name__)

# (strptime format, uses a two-digit year)
KNOWN_FORMATS: tuple[tuple[str, bool], ...] = (
    ("%d-%b-%y", True),  # 31-Dec-23
    ("%Y-%m-%d", False),  # 2023-12-31
    ("%m/%d/%y", True),  # 12/31/23
)

DATEPARSER_SETTINGS = {
    # no relative-time parser: "now" or "yesterday" would depend on the clock
    "PARSERS": ["custom-formats", "absolute-time"],
    "STRICT_PARSING": True,
    "TIMEZONE": "UTC",
    "TO_TIMEZONE": "UTC",
    "RETURN_AS_TIMEZONE_AWARE": True,
}

_MISSING = {"", "nan"}


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_known_format(value: str) -> datetime | None:
    """Try KNOWN_FORMATS in order. Two-digit years always land in 2000-2099."""
    for fmt, two_digit_year in KNOWN_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if two_digit_year:
            # strptime maps 69-99 to the 1900s; both centuries agree on leap years here
            parsed = parsed.replace(year=2000 + parsed.year % 100)
        return parsed.replace(tzinfo=timezone.utc)
    return None


def parse_flexible(value: str) -> datetime | None:
    """Last-resort parse: ISO-8601 first, then dateparser."""
    try:
        return _as_utc(datetime.fromisoformat(value))
    except ValueError:
        pass
    parsed = dateparser.parse(value, languages=["en"], settings=DATEPARSER_SETTINGS)
    if parsed is None:
        return None
    logger.debug("Parsed %r with dateparser as %s", value, parsed.isoformat())
    return _as_utc(parsed)


def is_missing(value: str | None) -> bool:
    return value is None or value.strip().lower() in _MISSING


def normalize_date(value: str | None) -> datetime | None:
    """Normalize a raw date string to an aware UTC datetime.

    Empty, absent and "nan" values mean "no date recorded" and return None.
    Raises DateParseError when every strategy fails.
    """
    if is_missing(value):
        return None
    text = value.strip()
    parsed = parse_known_format(text)
    if parsed is None:
        parsed = parse_flexible(text)
    if parsed is None:
        raise DateParseError(value)
    return parsed
