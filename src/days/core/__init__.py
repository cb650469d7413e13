"""Functional core - pure business logic with no I/O."""

from .dates import parse_date, format_date, days_between
from .events import Event, Row, format_event, format_line, relative_phrase
from .errors import (
    DaysError,
    DateParseError,
    RowLoadError,
    MissingArgumentError,
    InvalidCommandError,
    SetupError,
)
from .filters import FilterSpec
from .grammar import OptionPair, tokenize, build_filter, parse_filter
from .listing import Listing
from .store import EventStore, Removal

__all__ = [
    # Dates
    "parse_date",
    "format_date",
    "days_between",
    # Events
    "Event",
    "Row",
    "format_event",
    "format_line",
    "relative_phrase",
    # Errors
    "DaysError",
    "DateParseError",
    "RowLoadError",
    "MissingArgumentError",
    "InvalidCommandError",
    "SetupError",
    # Filtering
    "FilterSpec",
    "OptionPair",
    "tokenize",
    "build_filter",
    "parse_filter",
    # Listing
    "Listing",
    # Store
    "EventStore",
    "Removal",
]
