"""Tests for EventStore loading and mutation."""

import logging
from datetime import date

import pytest

from days.core.events import Event, Row
from days.core.filters import date_equals
from days.core.store import EventStore


class MemoryRecords:
    """In-memory RecordFile that records every write."""

    def __init__(self, rows: list[Row] | None = None):
        self.rows = list(rows or [])
        self.appended: list[Row] = []
        self.rewrites = 0

    def read_rows(self) -> list[Row]:
        return list(self.rows)

    def append_row(self, row: Row) -> None:
        self.appended.append(row)
        self.rows.append(row)

    def write_rows(self, rows: list[Row]) -> None:
        self.rewrites += 1
        self.rows = list(rows)


@pytest.fixture
def scenario_rows():
    return [
        Row("2024-01-01", "work", "standup"),
        Row("2024-01-02", "", "rest day"),
        Row("bad-date", "x", "broken"),
    ]


class TestLoad:
    def test_skips_bad_rows(self, scenario_rows, caplog):
        with caplog.at_level(logging.WARNING):
            store = EventStore.load(MemoryRecords(scenario_rows))

        assert len(store) == 2
        assert len(store.skipped) == 1
        assert store.skipped[0].index == 2
        assert store.skipped[0].raw_date == "bad-date"
        assert "bad date at row 2: bad-date" in caplog.text

    def test_preserves_file_order(self):
        rows = [
            Row("2024-03-01", "a", "third"),
            Row("2024-01-01", "b", "first"),
            Row("2024-02-01", "c", "second"),
        ]
        store = EventStore.load(MemoryRecords(rows))
        assert [e.description for e in store] == ["third", "first", "second"]

    def test_empty(self):
        store = EventStore.load(MemoryRecords())
        assert len(store) == 0
        assert store.events == []


class TestAppend:
    def test_appends_single_record(self, scenario_rows):
        records = MemoryRecords(scenario_rows)
        store = EventStore.load(records)

        store.append(Event(date(2024, 1, 3), "home", "groceries"))

        assert records.appended == [Row("2024-01-03", "home", "groceries")]
        assert records.rewrites == 0
        assert store.events[-1].description == "groceries"
        assert len(store) == 3


class TestRemoveWhere:
    def test_removes_and_persists(self, scenario_rows):
        records = MemoryRecords(scenario_rows)
        store = EventStore.load(records)

        result = store.remove_where(date_equals(date(2024, 1, 1)))

        assert [e.description for e in result.removed] == ["standup"]
        assert [e.description for e in result.kept] == ["rest day"]
        assert records.rewrites == 1
        assert [e.description for e in store] == ["rest day"]

    def test_rewrite_keeps_unparsed_rows_in_place(self, scenario_rows):
        records = MemoryRecords(scenario_rows)
        store = EventStore.load(records)

        store.remove_where(date_equals(date(2024, 1, 2)))

        assert records.rows == [
            Row("2024-01-01", "work", "standup"),
            Row("bad-date", "x", "broken"),
        ]

    def test_dry_run_persists_nothing(self, scenario_rows):
        records = MemoryRecords(scenario_rows)
        store = EventStore.load(records)

        result = store.remove_where(date_equals(date(2024, 1, 1)), dry_run=True)

        assert result.dry_run is True
        assert [e.description for e in result.removed] == ["standup"]
        assert records.rewrites == 0
        assert records.rows == scenario_rows
        assert len(store) == 2

    def test_no_match_does_not_rewrite(self, scenario_rows):
        records = MemoryRecords(scenario_rows)
        store = EventStore.load(records)

        result = store.remove_where(date_equals(date(1999, 1, 1)))

        assert result.removed == []
        assert records.rewrites == 0

    def test_failed_write_keeps_memory_state(self, scenario_rows):
        records = MemoryRecords(scenario_rows)

        def fail(rows):
            raise OSError("disk full")

        records.write_rows = fail
        store = EventStore.load(records)

        with pytest.raises(OSError):
            store.remove_where(date_equals(date(2024, 1, 1)))
        assert len(store) == 2
