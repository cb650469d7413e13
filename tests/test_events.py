"""Tests for the Event type and its display formatting."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from days.core.errors import DateParseError
from days.core.events import (
    Event,
    Row,
    format_event,
    format_line,
    relative_phrase,
)


@pytest.fixture
def standup():
    return Event(date=date(2024, 1, 1), category="work", description="standup")


class TestEvent:
    def test_immutable(self, standup):
        with pytest.raises(FrozenInstanceError):
            standup.category = "home"

    def test_from_row(self):
        event = Event.from_row(Row("2024-01-02", "", "rest day"))
        assert event == Event(date(2024, 1, 2), "", "rest day")

    def test_from_row_bad_date(self):
        with pytest.raises(DateParseError):
            Event.from_row(Row("bad-date", "x", "broken"))

    def test_to_row(self, standup):
        assert standup.to_row() == Row("2024-01-01", "work", "standup")


class TestFormatting:
    def test_format_event(self, standup):
        assert format_event(standup) == "2024-01-01: standup (work)"

    def test_format_event_empty_category(self):
        event = Event(date(2024, 1, 2), "", "rest day")
        assert format_event(event) == "2024-01-02: rest day ()"

    def test_relative_phrase(self):
        assert relative_phrase(0) == "today"
        assert relative_phrase(-3) == "3 days ago"
        assert relative_phrase(5) == "in 5 days"

    def test_format_line_past(self, standup):
        assert format_line(standup, date(2024, 1, 4)) == "2024-01-01: standup (work) - 3 days ago"

    def test_format_line_future(self, standup):
        assert format_line(standup, date(2023, 12, 30)) == "2024-01-01: standup (work) - in 2 days"

    def test_format_line_today(self, standup):
        assert format_line(standup, date(2024, 1, 1)) == "2024-01-01: standup (work) - today"
