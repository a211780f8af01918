"""Runs the insight and milestone engines against stored records."""

from dataclasses import dataclass

from babyfeed.domain.insights import InsightRecord, MilestoneRecord
from babyfeed.services.clock import LocalClock
from babyfeed.services.feeds import FeedRepository
from babyfeed.services.insights import MAX_INSIGHTS, compute_insights
from babyfeed.services.milestones import compute_milestones
from babyfeed.services.profiles import ProfileService
from babyfeed.services.stools import StoolRepository


@dataclass
class AnalysisService:
    """Feeds current collections and time into the pure engines."""

    profile_service: ProfileService
    feed_repository: FeedRepository
    stool_repository: StoolRepository
    clock: LocalClock
    max_insights: int = MAX_INSIGHTS

    def insights(self) -> list[InsightRecord]:
        """Return insights for the stored history, or none without a profile."""
        profile = self.profile_service.get_profile()
        if profile is None:
            return []
        return compute_insights(
            self.feed_repository.list_sessions(),
            self.stool_repository.list_stool_logs(),
            profile,
            self.clock.now(),
            limit=self.max_insights,
        )

    def milestones(self) -> list[MilestoneRecord]:
        """Return the current and next milestone for the baby's age."""
        profile = self.profile_service.get_profile()
        if profile is None:
            return []
        return compute_milestones(self.profile_service.age_days(), profile.name)
