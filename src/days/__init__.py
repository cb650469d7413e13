"""Days - personal event log."""

__version__ = "0.1.0"
