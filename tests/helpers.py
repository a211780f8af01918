"""In-memory repositories and record builders shared by the tests."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from babyfeed.domain.models import (
    ActiveSession,
    FeedingSession,
    FeedMode,
    FeedType,
    Medicine,
    MedicineDoseLog,
    Profile,
    StoolColor,
    StoolConsistency,
    StoolLog,
)
from babyfeed.services.feeds import FeedRepository
from babyfeed.services.medicines import MedicineRepository
from babyfeed.services.profiles import ProfileRepository
from babyfeed.services.stools import StoolRepository

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


@dataclass
class FixedTime:
    """Controllable time source."""

    current: datetime = NOW

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: Profile | None = None

    def get_profile(self) -> Profile | None:
        return self.profile

    def save_profile(self, profile: Profile) -> None:
        self.profile = profile

    def clear_profile(self) -> None:
        self.profile = None


@dataclass
class InMemoryFeedRepository(FeedRepository):
    """In-memory feed repository for tests."""

    sessions: list[FeedingSession] = field(default_factory=list)
    active: ActiveSession | None = None

    def list_sessions(self) -> list[FeedingSession]:
        return list(self.sessions)

    def add_session(self, session: FeedingSession) -> None:
        self.sessions.insert(0, session)

    def clear_sessions(self) -> None:
        self.sessions = []

    def get_active_session(self) -> ActiveSession | None:
        return self.active

    def save_active_session(self, active: ActiveSession) -> None:
        self.active = active

    def clear_active_session(self) -> None:
        self.active = None


@dataclass
class InMemoryStoolRepository(StoolRepository):
    """In-memory stool repository for tests."""

    logs: list[StoolLog] = field(default_factory=list)

    def list_stool_logs(self) -> list[StoolLog]:
        return list(self.logs)

    def add_stool_log(self, log: StoolLog) -> None:
        self.logs.insert(0, log)

    def clear_stool_logs(self) -> None:
        self.logs = []


@dataclass
class InMemoryMedicineRepository(MedicineRepository):
    """In-memory medicine repository for tests."""

    medicines: list[Medicine] = field(default_factory=list)
    logs: list[MedicineDoseLog] = field(default_factory=list)

    def list_medicines(self) -> list[Medicine]:
        return list(self.medicines)

    def save_medicines(self, medicines: list[Medicine]) -> None:
        self.medicines = list(medicines)

    def list_medicine_logs(self) -> list[MedicineDoseLog]:
        return list(self.logs)

    def add_medicine_log(self, log: MedicineDoseLog) -> None:
        self.logs.insert(0, log)

    def clear_medicine_logs(self) -> None:
        self.logs = []


def make_profile(
    age_days: int | None = 10,
    feed_mode: FeedMode = FeedMode.BREAST,
    name: str = "Mia",
    now: datetime = NOW,
) -> Profile:
    dob = now - timedelta(days=age_days) if age_days is not None else None
    return Profile(
        name=name, dob=dob, feed_mode=feed_mode, notes="", created_at=now
    )


def make_session(
    start: datetime,
    minutes: float = 10,
    feed_type: FeedType = FeedType.LEFT_BREAST,
    amount_ml: int | None = None,
) -> FeedingSession:
    duration = timedelta(minutes=minutes)
    return FeedingSession(
        id=f"feed-{start.isoformat()}",
        start_time=start,
        end_time=start + duration,
        duration_ms=int(duration.total_seconds() * 1000),
        feed_type=feed_type,
        amount_ml=amount_ml,
    )


def sessions_every(
    hours: float,
    count: int,
    latest: datetime,
    minutes: float = 10,
    alternate: bool = True,
) -> list[FeedingSession]:
    """Return ``count`` sessions ``hours`` apart, newest first."""
    sessions = []
    for index in range(count):
        side = FeedType.LEFT_BREAST
        if alternate and index % 2:
            side = FeedType.RIGHT_BREAST
        start = latest - timedelta(hours=hours * index)
        sessions.append(make_session(start, minutes=minutes, feed_type=side))
    return sessions


def make_stool(
    time: datetime,
    color: StoolColor | None = StoolColor.YELLOW,
    consistency: StoolConsistency | None = StoolConsistency.SOFT,
) -> StoolLog:
    return StoolLog(
        id=f"stool-{time.isoformat()}",
        time=time,
        color=color,
        consistency=consistency,
    )
