"""Data models for redeemlog."""

from redeemlog.models.enums import OutputFormat, SkipReason, TimestampPolicy
from redeemlog.models.log_entry import CoalescedEntry, RawLogEntry
from redeemlog.models.redemption import ExtractionResult, RedemptionRecord, SkippedEntry

__all__ = [
    "CoalescedEntry",
    "ExtractionResult",
    "OutputFormat",
    "RawLogEntry",
    "RedemptionRecord",
    "SkipReason",
    "SkippedEntry",
    "TimestampPolicy",
]
