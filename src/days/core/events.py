"""Event value type and display formatting."""

from dataclasses import dataclass
from datetime import date

from .dates import days_between, format_date, parse_date


@dataclass(frozen=True)
class Row:
    """One raw stored record, all fields as text."""

    date: str
    category: str = ""
    description: str = ""


@dataclass(frozen=True)
class Event:
    """A dated, categorized log entry. An empty category means uncategorized."""

    date: date
    category: str
    description: str

    @classmethod
    def from_row(cls, row: Row) -> "Event":
        """Build an event from a stored row. Raises DateParseError on a bad date."""
        return cls(
            date=parse_date(row.date),
            category=row.category,
            description=row.description,
        )

    def to_row(self) -> Row:
        return Row(format_date(self.date), self.category, self.description)


def format_event(event: Event) -> str:
    """Format an event as '<date>: <description> (<category>)'."""
    return f"{format_date(event.date)}: {event.description} ({event.category})"


def relative_phrase(delta: int) -> str:
    """Describe a day offset: 'today', 'N days ago' or 'in N days'."""
    if delta < 0:
        return f"{abs(delta)} days ago"
    if delta > 0:
        return f"in {delta} days"
    return "today"


def format_line(event: Event, reference: date) -> str:
    """Full listing line for an event relative to the reference date."""
    delta = days_between(reference, event.date)
    return f"{format_event(event)} - {relative_phrase(delta)}"
