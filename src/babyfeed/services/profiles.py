"""Baby profile lifecycle."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol

from babyfeed.domain.models import FeedMode, Profile
from babyfeed.errors import ProfileRequiredError, ValidationError
from babyfeed.services.clock import LocalClock
from babyfeed.services.formatting import format_age
from babyfeed.services.temporal import age_in_days

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for the singleton profile."""

    def get_profile(self) -> Profile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: Profile) -> None:
        """Store the profile, replacing any existing one."""

    def clear_profile(self) -> None:
        """Remove the profile; logged records are kept."""


@dataclass
class ProfileService:
    """Onboarding and age helpers for the tracked baby."""

    repository: ProfileRepository
    clock: LocalClock

    def create_profile(
        self,
        name: str,
        dob: date | datetime | None = None,
        feed_mode: FeedMode = FeedMode.BREAST,
        notes: str = "",
    ) -> Profile:
        """Validate and store a new profile."""
        cleaned = name.strip()
        if not cleaned:
            raise ValidationError("Baby name is required.")
        try:
            mode = FeedMode(feed_mode)
        except ValueError as exc:
            raise ValidationError(f"Unknown feed mode: {feed_mode}") from exc
        profile = Profile(
            name=cleaned,
            dob=self._birth_instant(dob),
            feed_mode=mode,
            notes=notes.strip(),
            created_at=self.clock.now(),
        )
        self.repository.save_profile(profile)
        _logger.info("Profile saved: mode=%s dob=%s", profile.feed_mode, profile.dob)
        return profile

    def get_profile(self) -> Profile | None:
        return self.repository.get_profile()

    def require_profile(self) -> Profile:
        """Return the profile or raise when onboarding has not happened."""
        profile = self.repository.get_profile()
        if profile is None:
            raise ProfileRequiredError("Create a baby profile first.")
        return profile

    def reset_profile(self) -> None:
        """Drop the profile so onboarding starts again."""
        self.repository.clear_profile()
        _logger.info("Profile reset")

    def age_days(self) -> int | None:
        """Return the current age in days, or None when unknown or invalid."""
        profile = self.repository.get_profile()
        if profile is None:
            return None
        days = age_in_days(profile.dob, self.clock.now())
        if days is None or days < 0:
            return None
        return days

    def age_label(self) -> str:
        return format_age(self.age_days())

    def _birth_instant(self, dob: date | datetime | None) -> datetime | None:
        if dob is None:
            return None
        if isinstance(dob, datetime):
            return self.clock.localize(dob)
        return datetime.combine(dob, time(), tzinfo=self.clock.timezone)
