"""Entry coalescing: merge adjacent log entries split from one emission.

The upstream logger sometimes writes a single event as two or more entries
whose timestamps differ by a few milliseconds. Entries within the tolerance
of a group's *first* timestamp are merged into that group; the anchor never
slides, so a long run of drifting timestamps cannot grow one group forever.
"""

import logging
from datetime import datetime, timedelta

from redeemlog.exceptions import TimestampParseError
from redeemlog.models.enums import TimestampPolicy
from redeemlog.models.log_entry import CoalescedEntry, RawLogEntry
from redeemlog.normalization.timestamps import parse_timestamp

logger = logging.getLogger(__name__)

TIMESTAMP_TOLERANCE_MS = 100


class EntryCoalescer:
    """Groups raw log entries by timestamp proximity to the group anchor."""

    def __init__(
        self,
        tolerance_ms: int = TIMESTAMP_TOLERANCE_MS,
        policy: TimestampPolicy = TimestampPolicy.ISOLATE,
    ) -> None:
        if tolerance_ms < 0:
            raise ValueError(f"tolerance_ms must be >= 0, got {tolerance_ms}")
        self.tolerance = timedelta(milliseconds=tolerance_ms)
        self.policy = TimestampPolicy(policy)

    def coalesce(self, entries: list[RawLogEntry]) -> list[CoalescedEntry]:
        """Merge adjacent entries; output order follows input order."""
        groups: list[CoalescedEntry] = []
        anchor_ts: str | None = None
        anchor_time: datetime | None = None
        segments: list[str] = []

        for index, entry in enumerate(entries):
            entry_time = self._parse(index, entry.timestamp)

            if anchor_ts is not None and self._within_tolerance(anchor_time, entry_time):
                segments.append(entry.message or "")
                continue

            if anchor_ts is not None:
                groups.append(CoalescedEntry(timestamp=anchor_ts, message="\n".join(segments)))
            anchor_ts = entry.timestamp
            anchor_time = entry_time
            segments = [entry.message or ""]

        if anchor_ts is not None:
            groups.append(CoalescedEntry(timestamp=anchor_ts, message="\n".join(segments)))

        logger.debug("Coalesced %d raw entries into %d group(s)", len(entries), len(groups))
        return groups

    def _within_tolerance(self, anchor: datetime | None, current: datetime | None) -> bool:
        # An unparseable timestamp on either side is infinitely far away.
        if anchor is None or current is None:
            return False
        return abs(current - anchor) <= self.tolerance

    def _parse(self, index: int, value: str) -> datetime | None:
        try:
            return parse_timestamp(value)
        except ValueError:
            if self.policy == TimestampPolicy.STRICT:
                raise TimestampParseError(index, value) from None
            logger.warning("Unparseable timestamp at entry %d (%r); starting a new group", index, value)
            return None


def coalesce(
    entries: list[RawLogEntry],
    tolerance_ms: int = TIMESTAMP_TOLERANCE_MS,
    policy: TimestampPolicy = TimestampPolicy.ISOLATE,
) -> list[CoalescedEntry]:
    """Merge raw entries whose timestamps fall within ``tolerance_ms`` of their group anchor."""
    return EntryCoalescer(tolerance_ms=tolerance_ms, policy=policy).coalesce(entries)
