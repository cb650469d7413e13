"""Adapters - I/O implementations of ports."""

from .csv_records import CsvRecordFile

__all__ = [
    "CsvRecordFile",
]
