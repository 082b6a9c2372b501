"""Normalized redemption record and extraction result models."""

from dataclasses import dataclass, field

from pydantic import BaseModel

from redeemlog.models.enums import SkipReason


class RedemptionRecord(BaseModel):
    redeemed_at: str = ""
    user_id: str = ""
    user_login: str = ""
    user_name: str = ""
    reward_title: str = ""

    @property
    def redeemer(self) -> str:
        """Display name, with the login appended when it differs from the name."""
        if not self.user_login:
            return self.user_name
        if not self.user_name:
            return self.user_login
        if self.user_name.lower() == self.user_login.lower():
            return self.user_name
        return f"{self.user_name} ({self.user_login})"


@dataclass
class SkippedEntry:
    """A marker-bearing entry that produced no record."""

    timestamp: str
    reason: SkipReason
    detail: str = ""


@dataclass
class ExtractionResult:
    """Bundles the records and diagnostics of one pipeline run."""

    records: list[RedemptionRecord] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)
    raw_count: int = 0
    coalesced_count: int = 0
    unmarked_count: int = 0
