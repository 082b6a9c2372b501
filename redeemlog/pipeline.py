"""End-to-end processing: raw entries to sorted redemption records."""

from datetime import tzinfo

from redeemlog.models.enums import TimestampPolicy
from redeemlog.models.log_entry import RawLogEntry
from redeemlog.models.redemption import ExtractionResult
from redeemlog.normalization.coalescer import TIMESTAMP_TOLERANCE_MS, coalesce
from redeemlog.parsing.extractor import extract_with_diagnostics


def run_pipeline(
    entries: list[RawLogEntry],
    tz: tzinfo | None = None,
    tolerance_ms: int = TIMESTAMP_TOLERANCE_MS,
    policy: TimestampPolicy = TimestampPolicy.ISOLATE,
) -> ExtractionResult:
    """Coalesce raw entries and extract redemption records with diagnostics.

    The reward filter is not applied here; callers filter the returned
    records with ``filter_by_reward`` so they can re-filter without re-parsing.
    """
    coalesced = coalesce(entries, tolerance_ms=tolerance_ms, policy=policy)
    result = extract_with_diagnostics(coalesced, tz=tz)
    result.raw_count = len(entries)
    return result
