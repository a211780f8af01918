"""Derived, non-persisted analysis records."""

from dataclasses import dataclass
from enum import StrEnum


class InsightCategory(StrEnum):
    """Severity/kind of an insight."""

    POSITIVE = "positive"
    WARNING = "warning"
    INFO = "info"
    TIP = "tip"


class MilestoneStatus(StrEnum):
    """Whether a milestone applies now or is coming up."""

    CURRENT = "current"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class InsightRecord:
    """One observation about feeding or stool patterns."""

    category: InsightCategory
    icon: str
    title: str
    text: str


@dataclass(frozen=True)
class MilestoneRecord:
    """One age-indexed developmental note."""

    min_days: int
    max_days: int
    icon: str
    title: str
    text: str
    topic: str
    status: MilestoneStatus
