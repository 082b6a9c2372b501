"""Ingestion of raw log exports."""

from redeemlog.ingestion.log_export import LogExportAdapter, load_log_export

__all__ = ["LogExportAdapter", "load_log_export"]
