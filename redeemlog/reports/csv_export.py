"""CSV export of redemption records."""

import csv
import io
from pathlib import Path

from redeemlog.models.redemption import RedemptionRecord
from redeemlog.reports.labels import FIELDS, LabelSet, get_labels


class CsvExporter:
    """Serializes records as CSV with a localized header row.

    Files are written as UTF-8 with a BOM so spreadsheet applications
    detect the encoding.
    """

    def __init__(self, labels: LabelSet | None = None) -> None:
        self.labels = labels or get_labels()

    def render(self, records: list[RedemptionRecord]) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(self.labels.headers())
        for record in records:
            writer.writerow([getattr(record, name) for name in FIELDS])
        return buf.getvalue()

    def write(self, records: list[RedemptionRecord], path: Path) -> Path:
        """Write records to ``path``; returns the path written."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(records), encoding="utf-8-sig", newline="")
        return path
