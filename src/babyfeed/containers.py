"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from babyfeed.adapters.json_feed_repository import JsonFeedRepository
from babyfeed.adapters.json_medicine_repository import JsonMedicineRepository
from babyfeed.adapters.json_profile_repository import JsonProfileRepository
from babyfeed.adapters.json_stool_repository import JsonStoolRepository
from babyfeed.adapters.json_store import JsonDocumentStore
from babyfeed.config import Settings, parse_timezone
from babyfeed.services.analysis import AnalysisService
from babyfeed.services.clock import LocalClock
from babyfeed.services.feeds import FeedService
from babyfeed.services.medicines import MedicineService
from babyfeed.services.profiles import ProfileService
from babyfeed.services.stats import StatsService
from babyfeed.services.stools import StoolService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: LocalClock
    profile_service: ProfileService
    feed_service: FeedService
    stool_service: StoolService
    medicine_service: MedicineService
    stats_service: StatsService
    analysis_service: AnalysisService


def build_container(
    settings: Settings | None = None, clock: LocalClock | None = None
) -> AppContainer:
    """Create the default dependency container backed by the JSON file store."""
    resolved_settings = settings or Settings()
    resolved_clock = clock or LocalClock(parse_timezone(resolved_settings.timezone))
    store = JsonDocumentStore(Path(resolved_settings.data_path))
    profile_repository = JsonProfileRepository(store)
    feed_repository = JsonFeedRepository(store)
    stool_repository = JsonStoolRepository(store)
    medicine_repository = JsonMedicineRepository(store)

    profile_service = ProfileService(profile_repository, resolved_clock)
    feed_service = FeedService(feed_repository, profile_service, resolved_clock)
    stool_service = StoolService(stool_repository, resolved_clock)
    medicine_service = MedicineService(medicine_repository, resolved_clock)
    stats_service = StatsService(
        feed_repository=feed_repository,
        stool_repository=stool_repository,
        medicine_repository=medicine_repository,
        clock=resolved_clock,
    )
    analysis_service = AnalysisService(
        profile_service=profile_service,
        feed_repository=feed_repository,
        stool_repository=stool_repository,
        clock=resolved_clock,
        max_insights=resolved_settings.max_insights,
    )

    return AppContainer(
        settings=resolved_settings,
        clock=resolved_clock,
        profile_service=profile_service,
        feed_service=feed_service,
        stool_service=stool_service,
        medicine_service=medicine_service,
        stats_service=stats_service,
        analysis_service=analysis_service,
    )
