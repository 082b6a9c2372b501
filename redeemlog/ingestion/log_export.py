"""Adapter for JSON log exports produced by the overlay integration."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from redeemlog.exceptions import UnreadableInputError
from redeemlog.models.log_entry import RawLogEntry

_ENTRIES = TypeAdapter(list[RawLogEntry])


class LogExportAdapter:
    """Reads a log export file into an ordered list of RawLogEntry."""

    def parse(self, file_path: Path) -> list[RawLogEntry]:
        """Read and validate a ``.json`` log export."""
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if file_path.suffix.lower() != ".json":
            raise UnreadableInputError(file_path.name, "JSON file required")

        try:
            raw = json.loads(file_path.read_text(encoding="utf-8-sig"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise UnreadableInputError(file_path.name, f"invalid JSON ({exc})") from exc
        except OSError as exc:
            raise UnreadableInputError(file_path.name, f"cannot read file ({exc.strerror or exc})") from exc

        return self.parse_data(raw, source=file_path.name)

    @staticmethod
    def parse_data(raw: object, source: str = "<data>") -> list[RawLogEntry]:
        """Validate already-decoded JSON as a list of log entries."""
        if not isinstance(raw, list):
            raise UnreadableInputError(
                source, f"expected a JSON array of log entries, got {type(raw).__name__}"
            )
        try:
            return _ENTRIES.validate_python(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise UnreadableInputError(
                source, f"entry {location}: {first['msg']} ({exc.error_count()} error(s))"
            ) from exc


def load_log_export(file_path: Path) -> list[RawLogEntry]:
    """Read a log export file; raises UnreadableInputError for bad input."""
    return LogExportAdapter().parse(Path(file_path))
