"""Custom exceptions for redeemlog."""


class RedeemLogError(Exception):
    """Base exception for redemption log processing errors."""


class UnreadableInputError(RedeemLogError):
    """Raised when the input cannot be read as a sequence of log entries."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Unreadable input {source}: {message}")


class TimestampParseError(RedeemLogError):
    """Raised when a log entry timestamp cannot be parsed under the strict policy."""

    def __init__(self, index: int, value: str):
        self.index = index
        self.value = value
        super().__init__(f"Unparseable timestamp at entry {index}: {value!r}")
