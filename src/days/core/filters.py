"""Event predicates and their AND-composition.

Pure functions - no I/O. Each factory returns a predicate over Event;
FilterSpec combines any number of them with logical AND.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable

from .events import Event

Predicate = Callable[[Event], bool]


def date_equals(target: date) -> Predicate:
    return lambda event: event.date == target


def date_before(bound: date) -> Predicate:
    """Events strictly before the bound."""
    return lambda event: event.date < bound


def date_after(bound: date) -> Predicate:
    """Events strictly after the bound."""
    return lambda event: event.date > bound


def category_in(categories: Iterable[str]) -> Predicate:
    wanted = frozenset(categories)
    return lambda event: event.category in wanted


def category_excluded(categories: Iterable[str]) -> Predicate:
    unwanted = frozenset(categories)
    return lambda event: event.category not in unwanted


def no_category() -> Predicate:
    return lambda event: event.category == ""


def today(reference: date) -> Predicate:
    """Events whose offset from the reference date is zero."""
    return date_equals(reference)


def match_nothing() -> Predicate:
    """Rejects every event. Used when a filter parameter is unusable."""
    return lambda event: False


@dataclass(frozen=True)
class FilterSpec:
    """A conjunction of predicates. With no predicates, every event matches."""

    predicates: tuple[Predicate, ...] = ()

    def matches(self, event: Event) -> bool:
        return all(predicate(event) for predicate in self.predicates)

    def also(self, predicate: Predicate) -> "FilterSpec":
        """Return a new spec that additionally requires predicate."""
        return FilterSpec(self.predicates + (predicate,))


def split_categories(text: str) -> list[str]:
    """Split a comma-separated category list. Items are kept verbatim."""
    return text.split(",")
