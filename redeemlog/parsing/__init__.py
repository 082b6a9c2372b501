"""Payload location and redemption extraction."""

from redeemlog.parsing.extractor import (
    DEFAULT_REWARD_TITLE,
    REDEMPTION_MARKER,
    RedemptionExtractor,
    extract,
    extract_with_diagnostics,
    filter_by_reward,
)
from redeemlog.parsing.payload import PAYLOAD_FINGERPRINT, locate_payload, parse_payload

__all__ = [
    "DEFAULT_REWARD_TITLE",
    "PAYLOAD_FINGERPRINT",
    "REDEMPTION_MARKER",
    "RedemptionExtractor",
    "extract",
    "extract_with_diagnostics",
    "filter_by_reward",
    "locate_payload",
    "parse_payload",
]
