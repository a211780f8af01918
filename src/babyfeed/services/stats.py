"""Dashboard numbers and the combined activity timeline."""

import logging
from dataclasses import dataclass
from datetime import datetime

from babyfeed.domain.models import (
    FeedingSession,
    FeedType,
    MedicineDoseLog,
    StoolLog,
)
from babyfeed.services.clock import LocalClock
from babyfeed.services.feeding_stats import mean
from babyfeed.services.feeds import FeedRepository
from babyfeed.services.formatting import format_duration_short, format_time_ago
from babyfeed.services.medicines import MedicineRepository
from babyfeed.services.stools import StoolRepository
from babyfeed.services.temporal import date_key, is_today

_logger = logging.getLogger(__name__)

EMPTY_VALUE = "—"


@dataclass(frozen=True)
class DashboardSummary:
    """Headline numbers for the home screen."""

    today_feeds: int
    avg_duration: str
    last_feed: str
    bottle_ml_today: int
    stools_today: int
    doses_today: int


@dataclass(frozen=True)
class HistoryEntry:
    """One event on the timeline."""

    kind: str
    time: datetime
    record: FeedingSession | StoolLog | MedicineDoseLog


@dataclass(frozen=True)
class HistoryDay:
    """Timeline events that share a local calendar day."""

    day: str
    label: str
    entries: list[HistoryEntry]


@dataclass
class StatsService:
    """Service for dashboard totals and history by local day."""

    feed_repository: FeedRepository
    stool_repository: StoolRepository
    medicine_repository: MedicineRepository
    clock: LocalClock

    def dashboard(self) -> DashboardSummary:
        """Return today's totals in the configured timezone."""
        now = self.clock.now()
        sessions = self.feed_repository.list_sessions()
        today = [session for session in sessions if is_today(session.start_time, now)]

        timed = [session.duration_ms for session in sessions if _is_timed(session)]
        avg = mean(timed)
        if sessions:
            ago_ms = (now - sessions[0].start_time).total_seconds() * 1000
            last_feed = format_time_ago(ago_ms)
        else:
            last_feed = EMPTY_VALUE

        stools = self.stool_repository.list_stool_logs()
        doses = self.medicine_repository.list_medicine_logs()
        return DashboardSummary(
            today_feeds=len(today),
            avg_duration=format_duration_short(avg) if avg is not None else EMPTY_VALUE,
            last_feed=last_feed,
            bottle_ml_today=sum(session.amount_ml or 0 for session in today),
            stools_today=sum(1 for log in stools if is_today(log.time, now)),
            doses_today=sum(1 for log in doses if is_today(log.time, now)),
        )

    def history(self) -> list[HistoryDay]:
        """Return feeds, diapers and doses newest first, grouped by day."""
        entries = [
            HistoryEntry("feed", session.start_time, session)
            for session in self.feed_repository.list_sessions()
        ]
        entries += [
            HistoryEntry("stool", log.time, log)
            for log in self.stool_repository.list_stool_logs()
        ]
        entries += [
            HistoryEntry("medicine", log.time, log)
            for log in self.medicine_repository.list_medicine_logs()
        ]
        entries.sort(key=lambda entry: entry.time, reverse=True)

        days: dict[str, HistoryDay] = {}
        for entry in entries:
            local = self.clock.localize(entry.time)
            key = date_key(local)
            if key not in days:
                days[key] = HistoryDay(day=key, label=_day_label(local), entries=[])
            days[key].entries.append(entry)
        return list(days.values())

    def clear_history(self) -> None:
        """Delete feeds, stool logs and dose logs; profile and medicines stay."""
        self.feed_repository.clear_sessions()
        self.stool_repository.clear_stool_logs()
        self.medicine_repository.clear_medicine_logs()
        _logger.info("History cleared")


def _is_timed(session: FeedingSession) -> bool:
    return session.feed_type != FeedType.BOTTLE or not session.amount_ml


def _day_label(moment: datetime) -> str:
    return f"{moment:%A}, {moment:%b} {moment.day}"
