"""JSON file repository for feeding sessions and the running feed."""

from dataclasses import dataclass

from babyfeed.adapters.json_store import (
    ACTIVE_KEY,
    SESSIONS_KEY,
    JsonDocumentStore,
    format_datetime,
    parse_datetime,
    require_datetime,
)
from babyfeed.domain.models import ActiveSession, FeedingSession, FeedType
from babyfeed.errors import StorageError
from babyfeed.services.feeds import FeedRepository


@dataclass
class JsonFeedRepository(FeedRepository):
    """Keeps sessions newest-insert first, like the tracker displays them."""

    store: JsonDocumentStore

    def list_sessions(self) -> list[FeedingSession]:
        return [_parse_session(row) for row in self.store.get_rows(SESSIONS_KEY)]

    def add_session(self, session: FeedingSession) -> None:
        row: dict[str, object] = {
            "id": session.id,
            "start_time": format_datetime(session.start_time),
            "end_time": format_datetime(session.end_time),
            "duration_ms": session.duration_ms,
            "feed_type": session.feed_type.value,
        }
        if session.amount_ml:
            row["amount_ml"] = session.amount_ml
        self.store.prepend_row(SESSIONS_KEY, row)

    def clear_sessions(self) -> None:
        self.store.put(SESSIONS_KEY, None)

    def get_active_session(self) -> ActiveSession | None:
        row = self.store.get(ACTIVE_KEY)
        if not isinstance(row, dict):
            return None
        return ActiveSession(
            start_time=require_datetime(row.get("start_time")),
            feed_type=_feed_type(row.get("feed_type")),
        )

    def save_active_session(self, active: ActiveSession) -> None:
        self.store.put(
            ACTIVE_KEY,
            {
                "start_time": format_datetime(active.start_time),
                "feed_type": active.feed_type.value,
            },
        )

    def clear_active_session(self) -> None:
        self.store.put(ACTIVE_KEY, None)


def _feed_type(raw: object) -> FeedType:
    try:
        return FeedType(str(raw))
    except ValueError as exc:
        raise StorageError(f"Unknown feed type: {raw!r}") from exc


def _parse_session(row: dict[str, object]) -> FeedingSession:
    amount = row.get("amount_ml")
    return FeedingSession(
        id=str(row.get("id", "")),
        start_time=require_datetime(row.get("start_time")),
        end_time=parse_datetime(row.get("end_time")),
        duration_ms=max(int(row.get("duration_ms") or 0), 0),
        feed_type=_feed_type(row.get("feed_type")),
        amount_ml=int(amount) if amount else None,
    )
