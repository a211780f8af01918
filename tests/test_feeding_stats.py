"""Tests for feeding aggregates."""

from datetime import timedelta
from zoneinfo import ZoneInfo

import pytest

from babyfeed.domain.models import FeedType
from babyfeed.services.feeding_stats import (
    adjacent_intervals,
    coefficient_of_variation,
    compute_feeding_stats,
    mean,
)
from helpers import NOW, make_session, sessions_every

TWO_HOURS_MS = 2 * 3_600_000


def test_constant_spacing_has_zero_variation() -> None:
    sessions = sessions_every(2, 5, latest=NOW - timedelta(hours=1))

    stats = compute_feeding_stats(sessions, NOW)

    assert stats.session_count == 5
    assert stats.intervals_ms == [TWO_HOURS_MS] * 4
    assert stats.avg_interval_ms == TWO_HOURS_MS
    assert stats.longest_interval_ms == TWO_HOURS_MS
    assert stats.interval_cv == 0
    assert stats.avg_duration_ms == 10 * 60_000


def test_empty_history() -> None:
    stats = compute_feeding_stats([], NOW)

    assert stats.session_count == 0
    assert stats.avg_duration_ms is None
    assert stats.avg_interval_ms is None
    assert stats.interval_cv is None
    assert stats.longest_interval_ms is None
    assert stats.hour_buckets == {
        "morning": 0,
        "afternoon": 0,
        "evening": 0,
        "night": 0,
    }


def test_adjacent_intervals_drop_out_of_order_pairs() -> None:
    stamps = [NOW, NOW - timedelta(hours=2), NOW - timedelta(hours=1)]

    assert adjacent_intervals(stamps) == [TWO_HOURS_MS]


def test_adjacent_intervals_respect_limit() -> None:
    stamps = [NOW - timedelta(hours=hours) for hours in range(6)]

    assert adjacent_intervals(stamps, limit=2) == [3_600_000, 3_600_000]
    assert adjacent_intervals(stamps[:1]) == []
    assert adjacent_intervals([]) == []


@pytest.mark.parametrize(
    ("values", "expected"),
    [([], None), ([0, 0], None), ([1, 3], 0.5), ([10_800_000, 18_000_000], 0.25)],
)
def test_coefficient_of_variation(values, expected) -> None:
    assert coefficient_of_variation(values) == expected


def test_mean() -> None:
    assert mean([]) is None
    assert mean([2, 4]) == 3


def test_hour_buckets_use_reference_zone() -> None:
    tokyo_now = NOW.astimezone(ZoneInfo("Asia/Tokyo"))
    # 14:00 UTC is 23:00 in Tokyo; 02:00 UTC is 11:00.
    sessions = [
        make_session(NOW.replace(hour=14) - timedelta(days=1)),
        make_session(NOW.replace(hour=2)),
    ]

    stats = compute_feeding_stats(sessions, tokyo_now)

    assert stats.hour_buckets["night"] == 1
    assert stats.hour_buckets["morning"] == 1
    assert stats.night_feeds == 1
    assert stats.day_feeds == 1


def test_type_counts_by_tag() -> None:
    sessions = [
        make_session(NOW - timedelta(hours=1), feed_type=FeedType.LEFT_BREAST),
        make_session(NOW - timedelta(hours=3), feed_type=FeedType.RIGHT_BREAST),
        make_session(NOW - timedelta(hours=5), feed_type=FeedType.LEFT_BREAST),
        make_session(
            NOW - timedelta(hours=7), minutes=0, feed_type=FeedType.BOTTLE, amount_ml=90
        ),
    ]

    stats = compute_feeding_stats(sessions, NOW)

    assert stats.type_counts == {"left-breast": 2, "right-breast": 1, "bottle": 1}


def test_window_counts() -> None:
    offsets = [1, 13, 50, 80, 100, 190, 200, 300, 400]
    sessions = [make_session(NOW - timedelta(hours=hours)) for hours in offsets]

    stats = compute_feeding_stats(sessions, NOW)

    # Today began 12 hours before NOW.
    assert stats.today_count == 1
    assert stats.recent_3_day_count == 3
    assert stats.prior_3_day_count == 2
    assert stats.this_week_count == 5
    assert stats.last_week_count == 3
    assert stats.week_span_days == 7
