"""Tests for the end-to-end pipeline."""

from datetime import timezone
from pathlib import Path

import pytest

from redeemlog.exceptions import TimestampParseError
from redeemlog.ingestion.log_export import load_log_export
from redeemlog.models.enums import SkipReason, TimestampPolicy
from redeemlog.models.log_entry import RawLogEntry
from redeemlog.parsing.extractor import filter_by_reward
from redeemlog.pipeline import run_pipeline


class TestRunPipeline:
    def test_empty(self):
        result = run_pipeline([])
        assert result.records == []
        assert result.raw_count == 0
        assert result.coalesced_count == 0

    def test_split_event_reassembled(self, log_export_file: Path):
        result = run_pipeline(load_log_export(log_export_file), tz=timezone.utc)

        assert result.raw_count == 6
        assert result.coalesced_count == 5
        assert result.unmarked_count == 2
        assert [r.user_login for r in result.records] == ["dave", "erin"]
        assert result.records[0].redeemed_at == "2024-03-05 10:20:30"
        assert [s.reason for s in result.skipped] == [SkipReason.INVALID_PAYLOAD]

    def test_split_event_lost_without_coalescing(self, log_export_file: Path):
        result = run_pipeline(load_log_export(log_export_file), tz=timezone.utc, tolerance_ms=0)
        assert [r.user_login for r in result.records] == ["erin"]

    def test_filter_after_pipeline(self, log_export_file: Path):
        result = run_pipeline(load_log_export(log_export_file), tz=timezone.utc)
        assert [r.user_login for r in filter_by_reward(result.records, "Hydrate")] == ["erin"]
        assert len(filter_by_reward(result.records, None)) == 2

    def test_deterministic(self, log_export_file: Path):
        entries = load_log_export(log_export_file)
        first = run_pipeline(entries, tz=timezone.utc)
        second = run_pipeline(entries, tz=timezone.utc)
        assert first.records == second.records

    def test_strict_policy_propagates(self):
        entries = [RawLogEntry(timestamp="garbage", message="x")]
        with pytest.raises(TimestampParseError):
            run_pipeline(entries, policy=TimestampPolicy.STRICT)
