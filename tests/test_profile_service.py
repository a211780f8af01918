"""Tests for profile service."""

from datetime import UTC, date, datetime

import pytest

from babyfeed.domain.models import FeedMode
from babyfeed.errors import ProfileRequiredError, ValidationError
from babyfeed.services.profiles import ProfileService
from helpers import NOW, InMemoryProfileRepository


def test_create_profile_stores_cleaned_values(
    profile_service: ProfileService, profile_repository: InMemoryProfileRepository
) -> None:
    profile = profile_service.create_profile(
        "  Mia ", date(2026, 3, 1), FeedMode.MIXED, " colic "
    )

    assert profile_repository.profile == profile
    assert profile.name == "Mia"
    assert profile.notes == "colic"
    assert profile.feed_mode == FeedMode.MIXED
    assert profile.dob == datetime(2026, 3, 1, tzinfo=UTC)
    assert profile.created_at == NOW


def test_create_profile_accepts_mode_string(profile_service: ProfileService) -> None:
    profile = profile_service.create_profile("Mia", feed_mode="bottle")

    assert profile.feed_mode == FeedMode.BOTTLE
    assert profile.dob is None


@pytest.mark.parametrize(
    ("name", "mode"), [("   ", FeedMode.BREAST), ("Mia", "formula")]
)
def test_create_profile_rejects_bad_input(
    profile_service: ProfileService, name, mode
) -> None:
    with pytest.raises(ValidationError):
        profile_service.create_profile(name, feed_mode=mode)


def test_require_profile_without_onboarding(profile_service: ProfileService) -> None:
    with pytest.raises(ProfileRequiredError):
        profile_service.require_profile()


def test_age_from_birth_date(profile_service: ProfileService) -> None:
    profile_service.create_profile("Mia", date(2026, 3, 1))

    assert profile_service.age_days() == 9
    assert profile_service.age_label() == "1 week old"


def test_age_unknown_without_birth_date(profile_service: ProfileService) -> None:
    profile_service.create_profile("Mia")

    assert profile_service.age_days() is None
    assert profile_service.age_label() == ""


def test_future_birth_date_is_unknown_age(profile_service: ProfileService) -> None:
    profile_service.create_profile("Mia", date(2026, 4, 1))

    assert profile_service.age_days() is None


def test_reset_profile(
    profile_service: ProfileService, profile_repository: InMemoryProfileRepository
) -> None:
    profile_service.create_profile("Mia")

    profile_service.reset_profile()

    assert profile_repository.profile is None
    assert profile_service.get_profile() is None
