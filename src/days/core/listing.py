"""Listing - filtered, formatted event lines relative to a reference date."""

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Sequence

from .dates import days_between
from .events import Event, format_line
from .filters import FilterSpec


@dataclass(frozen=True)
class Listing:
    """
    Lines for the events that pass a filter, in store order.

    Iterating starts a fresh pass every time; nothing is cached between
    passes.
    """

    events: Sequence[Event]
    spec: FilterSpec
    reference: date

    def entries(self) -> Iterator[tuple[Event, int]]:
        """Matching events with their day offset from the reference date."""
        for event in self.events:
            if self.spec.matches(event):
                yield event, days_between(self.reference, event.date)

    def __iter__(self) -> Iterator[str]:
        for event, _ in self.entries():
            yield format_line(event, self.reference)
