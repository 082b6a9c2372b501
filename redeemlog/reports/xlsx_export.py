"""Excel workbook export of redemption records."""

from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from redeemlog.models.redemption import RedemptionRecord
from redeemlog.reports.labels import FIELDS, LabelSet, get_labels

# Widths in characters, keyed by record field.
COLUMN_WIDTHS: dict[str, int] = {
    "redeemed_at": 20,
    "user_id": 14,
    "user_login": 25,
    "user_name": 35,
    "reward_title": 30,
}

# Excel limits sheet names to 31 characters.
MAX_SHEET_TITLE = 31


class XlsxExporter:
    """Writes records to a single-sheet workbook with a localized header row."""

    def __init__(self, labels: LabelSet | None = None) -> None:
        self.labels = labels or get_labels()

    def build(self, records: list[RedemptionRecord]) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = self.labels.title[:MAX_SHEET_TITLE]

        ws.append(self.labels.headers())
        for row_idx, record in enumerate(records, start=2):
            for col_idx, name in enumerate(FIELDS, start=1):
                value = ILLEGAL_CHARACTERS_RE.sub("", getattr(record, name))
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                # Payload text such as "=1+1" stays a string, never a formula.
                if cell.data_type == "f":
                    cell.data_type = "s"

        for col_idx, name in enumerate(FIELDS, start=1):
            ws.column_dimensions[get_column_letter(col_idx)].width = COLUMN_WIDTHS[name]
        return wb

    def write(self, records: list[RedemptionRecord], path: Path) -> Path:
        """Write records to ``path``; returns the path written."""
        path.parent.mkdir(parents=True, exist_ok=True)
        self.build(records).save(path)
        return path
