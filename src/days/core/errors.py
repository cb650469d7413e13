"""Error types raised by the functional core."""


class DaysError(Exception):
    """Base class for all days errors."""

    pass


class DateParseError(DaysError, ValueError):
    """Raised when text is not a valid YYYY-MM-DD date."""

    def __init__(self, text: str, reason: str = "expected YYYY-MM-DD"):
        super().__init__(f"invalid date {text!r}: {reason}")
        self.text = text
        self.reason = reason


class RowLoadError(DaysError):
    """A stored row whose date could not be parsed."""

    def __init__(self, index: int, raw_date: str):
        super().__init__(f"bad date at row {index}: {raw_date}")
        self.index = index
        self.raw_date = raw_date


class MissingArgumentError(DaysError):
    """Raised when an option requires a parameter that was not supplied."""

    def __init__(self, option: str, what: str):
        super().__init__(f"missing {what} for {option}")
        self.option = option
        self.what = what


class InvalidCommandError(DaysError):
    """Raised for unrecognized commands, options or option combinations."""

    pass


class SetupError(DaysError):
    """Raised when the event store location cannot be used."""

    pass
