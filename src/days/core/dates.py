"""Pure date handling - strict YYYY-MM-DD parsing and day arithmetic."""

import re
from datetime import date

from .errors import DateParseError

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(text: str) -> date:
    """
    Parse a date in strict YYYY-MM-DD form.

    Exactly ten characters, three numeric components separated by '-'.
    Single-digit months or days are rejected, as is any date that does not
    exist on the calendar (2023-02-30, 2023-13-01, 0000-01-01).

    Raises:
        DateParseError: if the text is malformed or the date is invalid
    """
    if not _DATE_PATTERN.fullmatch(text):
        raise DateParseError(text)

    year, month, day = (int(part) for part in text.split("-"))
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateParseError(text, str(e)) from e


def format_date(d: date) -> str:
    """Render a date as zero-padded YYYY-MM-DD."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def days_between(earlier: date, later: date) -> int:
    """Signed number of days from earlier to later (negative if later is before)."""
    return later.toordinal() - earlier.toordinal()
