"""Raw and coalesced log entry models."""

from pydantic import BaseModel


class RawLogEntry(BaseModel):
    """One element of the exported log array."""

    timestamp: str
    message: str | None = None


class CoalescedEntry(BaseModel):
    """One or more adjacent raw entries merged into a single logical emission."""

    timestamp: str
    message: str = ""
