"""EventStore - ordered events backed by a RecordFile."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterator

from .errors import DateParseError, RowLoadError
from .events import Event, Row

if TYPE_CHECKING:
    from days.ports.record_file import RecordFile

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    """A stored row and its parsed event, or None if the row did not parse."""

    row: Row
    event: Event | None


@dataclass
class Removal:
    """Outcome of remove_where."""

    kept: list[Event] = field(default_factory=list)
    removed: list[Event] = field(default_factory=list)
    dry_run: bool = False


class EventStore:
    """
    Events in file order.

    Rows with unparseable dates are left out of `events` but remembered, so
    a rewrite puts them back exactly where they were.
    """

    def __init__(self, records: "RecordFile", entries: list[_Entry] | None = None):
        self.records = records
        self._entries = entries or []
        self.skipped: list[RowLoadError] = []

    @classmethod
    def load(cls, records: "RecordFile") -> "EventStore":
        """Read all rows; bad dates are reported and skipped, not fatal."""
        entries = []
        skipped = []
        for index, row in enumerate(records.read_rows()):
            try:
                event = Event.from_row(row)
            except DateParseError:
                error = RowLoadError(index, row.date)
                logger.warning(str(error))
                skipped.append(error)
                event = None
            entries.append(_Entry(row, event))

        store = cls(records, entries)
        store.skipped = skipped
        logger.debug(f"Loaded {len(store)} events ({len(skipped)} skipped)")
        return store

    @property
    def events(self) -> list[Event]:
        return [entry.event for entry in self._entries if entry.event is not None]

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def __len__(self) -> int:
        return sum(1 for entry in self._entries if entry.event is not None)

    def append(self, event: Event) -> None:
        """Add an event at the end and persist just that record."""
        row = event.to_row()
        self.records.append_row(row)
        self._entries.append(_Entry(row, event))

    def remove_where(self, predicate: Callable[[Event], bool], dry_run: bool = False) -> Removal:
        """
        Remove every event matching predicate.

        With dry_run, nothing is persisted or changed; the result still
        lists what would have been removed.
        """
        result = Removal(dry_run=dry_run)
        remaining = []
        for entry in self._entries:
            if entry.event is not None and predicate(entry.event):
                result.removed.append(entry.event)
                continue
            if entry.event is not None:
                result.kept.append(entry.event)
            remaining.append(entry)

        if dry_run or not result.removed:
            return result

        self.records.write_rows([entry.row for entry in remaining])
        self._entries = remaining
        logger.debug(f"Removed {len(result.removed)} events")
        return result
