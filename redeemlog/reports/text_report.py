"""Plain-text redemption report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from redeemlog.models.redemption import RedemptionRecord
from redeemlog.reports.labels import LabelSet, get_labels

TEMPLATE_DIR = Path(__file__).parent / "templates"


class RedemptionReportGenerator:
    """Generates a human-readable redemption history report."""

    def __init__(self, labels: LabelSet | None = None) -> None:
        self.labels = labels or get_labels()
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), keep_trailing_newline=True)

    def render(self, records: list[RedemptionRecord]) -> str:
        """Render the redemption report using the Jinja2 template."""
        template = self.env.get_template("redemptions.txt")
        return template.render(labels=self.labels, records=records, count=len(records))
