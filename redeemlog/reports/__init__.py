"""Report generation for redeemlog."""

from redeemlog.reports.csv_export import CsvExporter
from redeemlog.reports.labels import LabelSet, get_labels
from redeemlog.reports.text_report import RedemptionReportGenerator
from redeemlog.reports.xlsx_export import XlsxExporter

__all__ = ["CsvExporter", "LabelSet", "RedemptionReportGenerator", "XlsxExporter", "get_labels"]
