"""JSON file repository for the baby profile."""

from dataclasses import dataclass

from babyfeed.adapters.json_store import (
    PROFILE_KEY,
    JsonDocumentStore,
    format_datetime,
    parse_datetime,
    require_datetime,
)
from babyfeed.domain.models import FeedMode, Profile
from babyfeed.errors import StorageError
from babyfeed.services.profiles import ProfileRepository


@dataclass
class JsonProfileRepository(ProfileRepository):
    """Stores the singleton profile under the ``profile`` key."""

    store: JsonDocumentStore

    def get_profile(self) -> Profile | None:
        row = self.store.get(PROFILE_KEY)
        if not isinstance(row, dict):
            return None
        return _parse_row(row)

    def save_profile(self, profile: Profile) -> None:
        self.store.put(
            PROFILE_KEY,
            {
                "name": profile.name,
                "dob": format_datetime(profile.dob),
                "feed_mode": profile.feed_mode.value,
                "notes": profile.notes,
                "created_at": format_datetime(profile.created_at),
            },
        )

    def clear_profile(self) -> None:
        self.store.put(PROFILE_KEY, None)


def _parse_row(row: dict[str, object]) -> Profile:
    try:
        feed_mode = FeedMode(str(row.get("feed_mode", FeedMode.BREAST.value)))
    except ValueError as exc:
        raise StorageError(f"Unknown feed mode: {row.get('feed_mode')!r}") from exc
    return Profile(
        name=str(row.get("name", "")),
        dob=parse_datetime(row.get("dob")),
        feed_mode=feed_mode,
        notes=str(row.get("notes") or ""),
        created_at=require_datetime(row.get("created_at")),
    )
