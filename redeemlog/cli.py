"""Typer CLI interface for redeemlog."""

import json
import logging
from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from redeemlog.exceptions import RedeemLogError
from redeemlog.models.enums import OutputFormat, TimestampPolicy
from redeemlog.models.redemption import ExtractionResult, RedemptionRecord
from redeemlog.normalization.coalescer import TIMESTAMP_TOLERANCE_MS
from redeemlog.parsing.extractor import DEFAULT_REWARD_TITLE, filter_by_reward
from redeemlog.reports.labels import DEFAULT_LOCALE, FIELDS, LabelSet, get_labels

app = typer.Typer(
    name="redeemlog",
    help="redeemlog: extract reward redemptions from chat-bot log exports.",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """redeemlog: extract reward redemptions from chat-bot log exports."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_zone(name: str | None) -> tzinfo | None:
    """Map a zone name to tzinfo; empty means the system local zone."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise typer.BadParameter(f"Unknown time zone: {name}", param_hint="--tz")


def _resolve_labels(locale: str) -> LabelSet:
    try:
        return get_labels(locale)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--locale")


def _run(
    file: Path,
    tz_name: str | None,
    strict_timestamps: bool,
    tolerance_ms: int = TIMESTAMP_TOLERANCE_MS,
) -> ExtractionResult:
    """Load and process a log export, exiting with code 1 on unreadable input."""
    from redeemlog.ingestion.log_export import load_log_export
    from redeemlog.pipeline import run_pipeline

    tz = _resolve_zone(tz_name)
    policy = TimestampPolicy.STRICT if strict_timestamps else TimestampPolicy.ISOLATE
    try:
        entries = load_log_export(file)
        return run_pipeline(entries, tz=tz, tolerance_ms=tolerance_ms, policy=policy)
    except (RedeemLogError, FileNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _print_table(records: list[RedemptionRecord], labels: LabelSet) -> None:
    table = Table(title=labels.title)
    for header in labels.headers():
        table.add_column(header)
    for record in records:
        table.add_row(*(escape(getattr(record, name)) for name in FIELDS))
    Console().print(table)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        typer.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {output}")


@app.command()
def extract(
    file: Path = typer.Argument(..., help="Log export (.json) to read"),
    filter_enabled: bool = typer.Option(
        False,
        "--filter/--no-filter",
        help="Only keep redemptions of the designated reward",
    ),
    reward: str = typer.Option(
        DEFAULT_REWARD_TITLE,
        "--reward",
        "-r",
        envvar="REDEEMLOG_REWARD",
        help="Reward title kept when --filter is on",
    ),
    tz_name: str | None = typer.Option(
        None,
        "--tz",
        envvar="REDEEMLOG_TZ",
        help="IANA zone for displayed times (default: system local zone)",
    ),
    locale: str = typer.Option(
        DEFAULT_LOCALE,
        "--locale",
        envvar="REDEEMLOG_LOCALE",
        help="Label language for headers and messages (ja, en)",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of stdout (csv, json, text; required for xlsx)",
    ),
    strict_timestamps: bool = typer.Option(
        False,
        "--strict-timestamps",
        help="Fail on unparseable entry timestamps instead of isolating them",
    ),
    tolerance_ms: int = typer.Option(
        TIMESTAMP_TOLERANCE_MS,
        "--tolerance-ms",
        min=0,
        help="Merge entries logged within this many milliseconds of a group's first entry",
    ),
) -> None:
    """Extract reward redemptions from a log export.

    Entries split by the logger are merged first, then every entry carrying
    a redemption event has its embedded JSON payload parsed. Records are
    sorted by redemption time.
    """
    labels = _resolve_labels(locale)
    if output_format == OutputFormat.TABLE and output is not None:
        raise typer.BadParameter(
            "table output is printed only; use --format csv, json, text or xlsx", param_hint="--output"
        )
    if output_format == OutputFormat.XLSX and output is None:
        raise typer.BadParameter("xlsx output needs a file path", param_hint="--output")
    result = _run(file, tz_name, strict_timestamps, tolerance_ms)
    records = filter_by_reward(result.records, reward if filter_enabled else None)

    if not records:
        typer.echo(labels.empty_message)
        raise typer.Exit(0)

    if output_format == OutputFormat.CSV:
        from redeemlog.reports.csv_export import CsvExporter

        exporter = CsvExporter(labels)
        if output is not None:
            exporter.write(records, output)
            typer.echo(f"Wrote {output}")
        else:
            typer.echo(exporter.render(records), nl=False)
    elif output_format == OutputFormat.XLSX:
        from redeemlog.reports.xlsx_export import XlsxExporter

        XlsxExporter(labels).write(records, output)
        typer.echo(f"Wrote {output}")
    elif output_format == OutputFormat.JSON:
        payload = [record.model_dump() for record in records]
        _emit(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", output)
    elif output_format == OutputFormat.TEXT:
        from redeemlog.reports.text_report import RedemptionReportGenerator

        _emit(RedemptionReportGenerator(labels).render(records), output)
    else:
        typer.echo(labels.found(len(records)))
        _print_table(records, labels)


@app.command()
def inspect(
    file: Path = typer.Argument(..., help="Log export (.json) to inspect"),
    tz_name: str | None = typer.Option(None, "--tz", envvar="REDEEMLOG_TZ", help="IANA zone for times"),
    strict_timestamps: bool = typer.Option(
        False, "--strict-timestamps", help="Fail on unparseable entry timestamps"
    ),
) -> None:
    """Show coalescing and extraction diagnostics for a log export."""
    result = _run(file, tz_name, strict_timestamps)

    typer.echo("")
    typer.echo("=== Extraction Summary ===")
    typer.echo("")
    typer.echo(f"  Raw entries:          {result.raw_count}")
    typer.echo(f"  Coalesced entries:    {result.coalesced_count}")
    typer.echo(f"  Without marker:       {result.unmarked_count}")
    typer.echo(f"  Redemptions:          {len(result.records)}")
    typer.echo(f"  Skipped:              {len(result.skipped)}")

    if result.skipped:
        typer.echo("")
        for skipped in result.skipped:
            typer.echo(f"  {skipped.timestamp} | {skipped.reason.value:<15} | {skipped.detail}")
