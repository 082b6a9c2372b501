"""Tests for report labels and the text report generator."""

import pytest

from redeemlog.models.redemption import RedemptionRecord
from redeemlog.reports.labels import FIELDS, LABELS, get_labels
from redeemlog.reports.text_report import RedemptionReportGenerator


class TestLabels:
    def test_default_is_japanese(self):
        assert get_labels().found(3) == "3件の引き換えが見つかりました"

    def test_case_insensitive(self):
        assert get_labels("EN") is LABELS["en"]

    def test_unknown_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            get_labels("fr")

    @pytest.mark.parametrize("locale", sorted(LABELS))
    def test_every_locale_labels_every_field(self, locale):
        assert set(LABELS[locale].columns) == set(FIELDS)


class TestRedemptionReportGenerator:
    def test_render(self, sample_records):
        report = RedemptionReportGenerator(get_labels("en")).render(sample_records)
        lines = report.splitlines()
        assert lines[0] == "=== Redemption History ==="
        assert "Found 3 redemption(s)" in report
        assert "2024-01-01 00:00:00 | Alice | Dailyおみくじ" in lines
        assert "2024-01-01 08:30:00 | ボブ (bob_1) | Hydrate" in lines

    def test_render_empty(self):
        report = RedemptionReportGenerator(get_labels("ja")).render([])
        assert "データがありません" in report
        assert "件の引き換え" not in report

    def test_blank_time_padded(self):
        record = RedemptionRecord(user_login="x", user_name="X", reward_title="R")
        report = RedemptionReportGenerator(get_labels("en")).render([record])
        assert f"{'':<19} | X | R" in report.splitlines()
