"""Record storage interface."""

from typing import Protocol

from days.core.events import Row


class RecordFile(Protocol):
    """Interface for reading and writing the stored event records."""

    def read_rows(self) -> list[Row]:
        """Read every record in stored order. Missing storage reads as empty."""
        ...

    def append_row(self, row: Row) -> None:
        """Append one record without touching existing ones."""
        ...

    def write_rows(self, rows: list[Row]) -> None:
        """Replace the full content. Must leave the original intact on failure."""
        ...
