"""Domain models for the feeding tracker."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class FeedMode(StrEnum):
    """Declared feeding mode on the baby profile."""

    BREAST = "breast"
    BOTTLE = "bottle"
    MIXED = "mixed"


class FeedType(StrEnum):
    """Tag recorded on each feeding session."""

    LEFT_BREAST = "left-breast"
    RIGHT_BREAST = "right-breast"
    BOTTLE = "bottle"


class StoolColor(StrEnum):
    """Stool colors offered in the diaper log."""

    YELLOW = "yellow"
    GREEN = "green"
    BROWN = "brown"
    BLACK = "black"
    RED = "red"
    WHITE = "white"


class StoolConsistency(StrEnum):
    """Stool consistencies offered in the diaper log."""

    HARD = "hard"
    SOFT = "soft"
    SEEDY = "seedy"
    MUSHY = "mushy"
    LIQUID = "liquid"


class MedicineTarget(StrEnum):
    """Who a medicine is taken by."""

    BABY = "baby"
    CAREGIVER = "caregiver"


@dataclass(frozen=True)
class Profile:
    """The single tracked infant."""

    name: str
    dob: datetime | None
    feed_mode: FeedMode
    notes: str
    created_at: datetime


@dataclass(frozen=True)
class FeedingSession:
    """One completed feed."""

    id: str
    start_time: datetime
    end_time: datetime | None
    duration_ms: int
    feed_type: FeedType
    amount_ml: int | None = None


@dataclass(frozen=True)
class ActiveSession:
    """A feed that is currently being timed."""

    start_time: datetime
    feed_type: FeedType


@dataclass(frozen=True)
class StoolLog:
    """One diaper change."""

    id: str
    time: datetime
    color: StoolColor | None
    consistency: StoolConsistency | None
    notes: str = ""


@dataclass(frozen=True)
class Medicine:
    """A tracked medicine or supplement."""

    id: str
    name: str
    target: MedicineTarget
    dosage: str
    notes: str
    active: bool
    created_at: datetime


@dataclass(frozen=True)
class MedicineDoseLog:
    """A dose as it was administered; detached from later medicine edits."""

    id: str
    medicine_id: str
    medicine_name: str
    target: MedicineTarget
    dosage: str
    time: datetime
