"""Tests for stool logging."""

from datetime import timedelta

import pytest

from babyfeed.domain.models import StoolColor, StoolConsistency
from babyfeed.errors import ValidationError
from babyfeed.services.clock import LocalClock
from babyfeed.services.stools import StoolService
from helpers import NOW, InMemoryStoolRepository, make_stool


@pytest.fixture
def stool_service(
    stool_repository: InMemoryStoolRepository, clock: LocalClock
) -> StoolService:
    return StoolService(stool_repository, clock)


def test_log_stool_defaults(
    stool_service: StoolService, stool_repository: InMemoryStoolRepository
) -> None:
    log = stool_service.log_stool()

    assert log.time == NOW
    assert log.color == StoolColor.BROWN
    assert log.consistency == StoolConsistency.SOFT
    assert stool_repository.logs == [log]


def test_log_stool_accepts_strings_and_blanks(stool_service: StoolService) -> None:
    log = stool_service.log_stool("green", None, "  after bath ")

    assert log.color == StoolColor.GREEN
    assert log.consistency is None
    assert log.notes == "after bath"


@pytest.mark.parametrize(
    ("color", "consistency"), [("purple", "soft"), ("yellow", "chunky")]
)
def test_log_stool_rejects_unknown_tags(
    stool_service: StoolService, color, consistency
) -> None:
    with pytest.raises(ValidationError):
        stool_service.log_stool(color, consistency)


def test_newest_first_and_today_count(
    stool_service: StoolService, stool_repository: InMemoryStoolRepository
) -> None:
    stool_repository.logs = [make_stool(NOW - timedelta(days=1))]

    log = stool_service.log_stool()

    assert stool_service.list_logs()[0] == log
    assert stool_service.today_count() == 1
