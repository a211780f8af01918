"""Feed timer and bottle logging."""

import logging
from dataclasses import dataclass
from datetime import datetime, time
from typing import Protocol
from uuid import uuid4

from babyfeed.domain.models import ActiveSession, FeedingSession, FeedMode, FeedType
from babyfeed.errors import ActiveSessionError, ValidationError
from babyfeed.services.clock import LocalClock
from babyfeed.services.formatting import format_duration
from babyfeed.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


class FeedRepository(Protocol):
    """Persistence interface for feeding sessions and the running timer."""

    def list_sessions(self) -> list[FeedingSession]:
        """Return sessions, most recently added first."""

    def add_session(self, session: FeedingSession) -> None:
        """Prepend a completed session."""

    def clear_sessions(self) -> None:
        """Delete every session."""

    def get_active_session(self) -> ActiveSession | None:
        """Return the running feed, if any."""

    def save_active_session(self, active: ActiveSession) -> None:
        """Store the running feed."""

    def clear_active_session(self) -> None:
        """Forget the running feed."""


@dataclass
class FeedService:
    """Starts, stops and records feeds."""

    repository: FeedRepository
    profile_service: ProfileService
    clock: LocalClock

    def default_feed_type(self) -> FeedType:
        """Bottle-only profiles default to bottle, everyone else to left breast."""
        profile = self.profile_service.get_profile()
        if profile is not None and profile.feed_mode == FeedMode.BOTTLE:
            return FeedType.BOTTLE
        return FeedType.LEFT_BREAST

    def start_feed(self, feed_type: FeedType | str | None = None) -> ActiveSession:
        """Begin timing a feed; only one feed may run at a time."""
        self.profile_service.require_profile()
        if self.repository.get_active_session() is not None:
            raise ActiveSessionError("A feed is already in progress.")
        resolved = _feed_type(feed_type) if feed_type else self.default_feed_type()
        active = ActiveSession(start_time=self.clock.now(), feed_type=resolved)
        self.repository.save_active_session(active)
        _logger.info("Feed started: type=%s", resolved)
        return active

    def stop_feed(self) -> FeedingSession:
        """Finish the running feed and store it as a session."""
        active = self.repository.get_active_session()
        if active is None:
            raise ActiveSessionError("No feed is in progress.")
        end = self.clock.now()
        session = FeedingSession(
            id=uuid4().hex,
            start_time=active.start_time,
            end_time=end,
            duration_ms=_elapsed_ms(active.start_time, end),
            feed_type=active.feed_type,
        )
        self.repository.add_session(session)
        self.repository.clear_active_session()
        _logger.info(
            "Feed stopped: type=%s duration_ms=%s",
            session.feed_type,
            session.duration_ms,
        )
        return session

    def active_session(self) -> ActiveSession | None:
        return self.repository.get_active_session()

    def active_elapsed_ms(self) -> int | None:
        """Time since the running feed started.

        Derived from the stored start instant on every call, so suspended or
        throttled timers catch up instead of drifting.
        """
        active = self.repository.get_active_session()
        if active is None:
            return None
        return _elapsed_ms(active.start_time, self.clock.now())

    def timer_text(self) -> str | None:
        elapsed = self.active_elapsed_ms()
        if elapsed is None:
            return None
        return format_duration(elapsed)

    def log_bottle(
        self, amount_ml: int, at_time: time | str | None = None
    ) -> FeedingSession:
        """Record an instantaneous bottle feed, optionally at a clock time today."""
        self.profile_service.require_profile()
        if amount_ml is None or amount_ml <= 0:
            raise ValidationError("Bottle amount must be a positive number of ml.")
        moment = self._moment_today(at_time)
        session = FeedingSession(
            id=uuid4().hex,
            start_time=moment,
            end_time=moment,
            duration_ms=0,
            feed_type=FeedType.BOTTLE,
            amount_ml=int(amount_ml),
        )
        self.repository.add_session(session)
        _logger.info("Bottle logged: amount_ml=%s", session.amount_ml)
        return session

    def list_sessions(self) -> list[FeedingSession]:
        return self.repository.list_sessions()

    def _moment_today(self, at_time: time | str | None) -> datetime:
        now = self.clock.now()
        if at_time is None or at_time == "":
            return now
        if isinstance(at_time, str):
            try:
                at_time = time.fromisoformat(at_time)
            except ValueError as exc:
                raise ValidationError(f"Invalid time: {at_time}") from exc
        return now.replace(
            hour=at_time.hour, minute=at_time.minute, second=0, microsecond=0
        )


def _feed_type(raw: FeedType | str) -> FeedType:
    try:
        return FeedType(raw)
    except ValueError as exc:
        raise ValidationError(f"Unknown feed type: {raw}") from exc


def _elapsed_ms(start: datetime, end: datetime) -> int:
    return max(int((end - start).total_seconds() * 1000), 0)
