"""Ports - interfaces/protocols for external dependencies."""

from .record_file import RecordFile

__all__ = [
    "RecordFile",
]
