"""ISO-8601 timestamp parsing and display formatting."""

import re
from datetime import datetime, timezone, tzinfo

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

# Upstream emits up to nanosecond precision; datetime stops at microseconds.
_EXTRA_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware datetime.

    A trailing ``Z`` means UTC and naive values are taken as UTC.
    Raises ValueError for anything unparseable.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Not a timestamp: {value!r}")
    text = _EXTRA_FRACTION_RE.sub(r"\1", value.strip())
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_local(value: str | None, tz: tzinfo | None = None) -> str:
    """Format an ISO-8601 instant as ``YYYY-MM-DD HH:MM:SS`` in ``tz``.

    ``tz=None`` uses the system local zone. Empty or unparseable input gives
    an empty string; if the conversion itself fails the raw value is echoed.
    """
    if not value or not isinstance(value, str):
        return ""
    try:
        instant = parse_timestamp(value)
    except ValueError:
        return ""
    try:
        return instant.astimezone(tz).strftime(DISPLAY_FORMAT)
    except (ValueError, OverflowError):
        return value
