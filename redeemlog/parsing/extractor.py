"""Redemption event extraction from coalesced log entries."""

import logging
from collections.abc import Iterable
from datetime import tzinfo

from redeemlog.models.enums import SkipReason
from redeemlog.models.log_entry import CoalescedEntry
from redeemlog.models.redemption import ExtractionResult, RedemptionRecord, SkippedEntry
from redeemlog.normalization.timestamps import format_local
from redeemlog.parsing.payload import InvalidPayload, PayloadNotFound, parse_payload

logger = logging.getLogger(__name__)

REDEMPTION_MARKER = "REWARD REDEMPTION EVENT RECEIVED"
DEFAULT_REWARD_TITLE = "Dailyおみくじ"


class RedemptionExtractor:
    """Turns coalesced log text into sorted redemption records.

    Per-entry failures are recorded as skips and never abort the run.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def extract(self, entries: Iterable[CoalescedEntry]) -> ExtractionResult:
        result = ExtractionResult()
        for entry in entries:
            result.coalesced_count += 1
            message = entry.message or ""
            if REDEMPTION_MARKER not in message:
                result.unmarked_count += 1
                continue

            try:
                payload = parse_payload(message)
            except PayloadNotFound as exc:
                logger.debug("Redemption marker without payload at %s", entry.timestamp)
                result.skipped.append(SkippedEntry(entry.timestamp, SkipReason.NO_PAYLOAD, str(exc)))
                continue
            except InvalidPayload as exc:
                logger.warning("Failed to parse redemption payload at %s: %s", entry.timestamp, exc)
                result.skipped.append(SkippedEntry(entry.timestamp, SkipReason.INVALID_PAYLOAD, str(exc)))
                continue

            result.records.append(self.map_payload(payload))

        result.records.sort(key=lambda r: r.redeemed_at)
        return result

    def map_payload(self, payload: dict) -> RedemptionRecord:
        """Map a decoded event payload onto a RedemptionRecord."""
        reward = payload.get("reward")
        title = reward.get("title") if isinstance(reward, dict) else None
        redeemed_at = payload.get("redeemed_at")
        return RedemptionRecord(
            redeemed_at=format_local(redeemed_at, self.tz) if isinstance(redeemed_at, str) else "",
            user_id=_text(payload.get("user_id")),
            user_login=_text(payload.get("user_login")),
            user_name=_text(payload.get("user_name")),
            reward_title=_text(title),
        )


def extract_with_diagnostics(
    entries: Iterable[CoalescedEntry], tz: tzinfo | None = None
) -> ExtractionResult:
    """Extract records and keep the skip diagnostics."""
    return RedemptionExtractor(tz=tz).extract(entries)


def extract(entries: Iterable[CoalescedEntry], tz: tzinfo | None = None) -> list[RedemptionRecord]:
    """Extract redemption records sorted ascending by ``redeemed_at``."""
    return extract_with_diagnostics(entries, tz=tz).records


def filter_by_reward(
    records: Iterable[RedemptionRecord], reward_title: str | None
) -> list[RedemptionRecord]:
    """Keep records whose reward title equals ``reward_title``; None keeps all."""
    if reward_title is None:
        return list(records)
    return [r for r in records if r.reward_title == reward_title]


def _text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
