"""JSON file repository for stool logs."""

from dataclasses import dataclass

from babyfeed.adapters.json_store import (
    STOOL_KEY,
    JsonDocumentStore,
    format_datetime,
    require_datetime,
)
from babyfeed.domain.models import StoolColor, StoolConsistency, StoolLog
from babyfeed.errors import StorageError
from babyfeed.services.stools import StoolRepository


@dataclass
class JsonStoolRepository(StoolRepository):
    """Keeps stool logs newest first."""

    store: JsonDocumentStore

    def list_stool_logs(self) -> list[StoolLog]:
        return [_parse_row(row) for row in self.store.get_rows(STOOL_KEY)]

    def add_stool_log(self, log: StoolLog) -> None:
        self.store.prepend_row(
            STOOL_KEY,
            {
                "id": log.id,
                "time": format_datetime(log.time),
                "color": log.color.value if log.color else None,
                "consistency": log.consistency.value if log.consistency else None,
                "notes": log.notes,
            },
        )

    def clear_stool_logs(self) -> None:
        self.store.put(STOOL_KEY, None)


def _parse_row(row: dict[str, object]) -> StoolLog:
    color = row.get("color")
    consistency = row.get("consistency")
    try:
        return StoolLog(
            id=str(row.get("id", "")),
            time=require_datetime(row.get("time")),
            color=StoolColor(str(color)) if color else None,
            consistency=StoolConsistency(str(consistency)) if consistency else None,
            notes=str(row.get("notes") or ""),
        )
    except ValueError as exc:
        raise StorageError(f"Invalid stool log {row.get('id')!r}") from exc
