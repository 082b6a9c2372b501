"""Enumerations for redeemlog."""

from enum import StrEnum


class TimestampPolicy(StrEnum):
    ISOLATE = "isolate"
    STRICT = "strict"


class SkipReason(StrEnum):
    NO_PAYLOAD = "NO_PAYLOAD"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


class OutputFormat(StrEnum):
    TABLE = "table"
    CSV = "csv"
    JSON = "json"
    TEXT = "text"
    XLSX = "xlsx"
