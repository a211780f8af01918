"""Shared test fixtures."""

from zoneinfo import ZoneInfo

import pytest
from helpers import (
    FixedTime,
    InMemoryFeedRepository,
    InMemoryMedicineRepository,
    InMemoryProfileRepository,
    InMemoryStoolRepository,
)

from babyfeed.config import Settings
from babyfeed.containers import AppContainer
from babyfeed.services.analysis import AnalysisService
from babyfeed.services.clock import LocalClock
from babyfeed.services.feeds import FeedService
from babyfeed.services.medicines import MedicineService
from babyfeed.services.profiles import ProfileService
from babyfeed.services.stats import StatsService
from babyfeed.services.stools import StoolService


@pytest.fixture
def fixed_time() -> FixedTime:
    return FixedTime()


@pytest.fixture
def clock(fixed_time: FixedTime) -> LocalClock:
    return LocalClock(ZoneInfo("UTC"), source=fixed_time)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_path=str(tmp_path / "babyfeed.json"), timezone="UTC")


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def feed_repository() -> InMemoryFeedRepository:
    return InMemoryFeedRepository()


@pytest.fixture
def stool_repository() -> InMemoryStoolRepository:
    return InMemoryStoolRepository()


@pytest.fixture
def medicine_repository() -> InMemoryMedicineRepository:
    return InMemoryMedicineRepository()


@pytest.fixture
def profile_service(
    profile_repository: InMemoryProfileRepository, clock: LocalClock
) -> ProfileService:
    return ProfileService(profile_repository, clock)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    clock: LocalClock,
    profile_service: ProfileService,
    feed_repository: InMemoryFeedRepository,
    stool_repository: InMemoryStoolRepository,
    medicine_repository: InMemoryMedicineRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        clock=clock,
        profile_service=profile_service,
        feed_service=FeedService(feed_repository, profile_service, clock),
        stool_service=StoolService(stool_repository, clock),
        medicine_service=MedicineService(medicine_repository, clock),
        stats_service=StatsService(
            feed_repository=feed_repository,
            stool_repository=stool_repository,
            medicine_repository=medicine_repository,
            clock=clock,
        ),
        analysis_service=AnalysisService(
            profile_service=profile_service,
            feed_repository=feed_repository,
            stool_repository=stool_repository,
            clock=clock,
        ),
    )
