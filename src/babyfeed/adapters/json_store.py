"""Single-document JSON file backing the local record store."""

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from babyfeed.errors import StorageError

_logger = logging.getLogger(__name__)

PROFILE_KEY = "profile"
SESSIONS_KEY = "sessions"
ACTIVE_KEY = "active"
STOOL_KEY = "stool_logs"
MEDICINES_KEY = "medicines"
MEDICINE_LOGS_KEY = "medicine_logs"


@dataclass
class JsonDocumentStore:
    """Reads and rewrites the whole JSON document on every access."""

    path: Path

    def load(self) -> dict[str, object]:
        """Return the stored document; a missing file is an empty document."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            _logger.exception("Failed to read record store", extra={"path": self.path})
            raise StorageError(f"Cannot read {self.path}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Unexpected content in {self.path}")
        return data

    def save(self, document: dict[str, object]) -> None:
        """Atomically replace the stored document."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> object | None:
        return self.load().get(key)

    def put(self, key: str, value: object | None) -> None:
        document = self.load()
        if value is None:
            document.pop(key, None)
        else:
            document[key] = value
        self.save(document)

    def get_rows(self, key: str) -> list[dict[str, object]]:
        rows = self.get(key)
        if not isinstance(rows, list):
            return []
        return [row for row in rows if isinstance(row, dict)]

    def prepend_row(self, key: str, row: dict[str, object]) -> None:
        self.put(key, [row, *self.get_rows(key)])


def parse_datetime(raw: object) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None for blanks."""
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise StorageError(f"Invalid timestamp in record store: {raw!r}") from exc


def require_datetime(raw: object) -> datetime:
    parsed = parse_datetime(raw)
    if parsed is None:
        raise StorageError("Missing timestamp in record store")
    return parsed


def format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
