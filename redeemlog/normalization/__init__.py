"""Normalization layer: timestamp handling and entry coalescing."""

from redeemlog.normalization.coalescer import EntryCoalescer, coalesce
from redeemlog.normalization.timestamps import format_local, parse_timestamp

__all__ = ["EntryCoalescer", "coalesce", "format_local", "parse_timestamp"]
