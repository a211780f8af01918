"""Aggregates over the feeding-session log."""

import math
from collections import Counter
from collections.abc import Sequence
from datetime import datetime

from babyfeed.domain.models import FeedingSession
from babyfeed.domain.stats import FeedingStats
from babyfeed.services.temporal import (
    BUCKETS,
    DAY,
    bucket_of_day,
    in_last_week,
    in_prior_days,
    in_recent_days,
    in_this_week,
    is_today,
    to_local,
)

GROWTH_WINDOW_DAYS = 3


def compute_feeding_stats(
    sessions: Sequence[FeedingSession], now: datetime
) -> FeedingStats:
    """Derive feeding aggregates from a most-recent-first session list."""
    durations = [session.duration_ms for session in sessions]
    intervals = adjacent_intervals([session.start_time for session in sessions])
    avg_interval = mean(intervals)

    hour_buckets = dict.fromkeys(BUCKETS, 0)
    for session in sessions:
        hour_buckets[bucket_of_day(to_local(session.start_time, now))] += 1

    type_counts = Counter(str(session.feed_type) for session in sessions)
    week_start = now - 7 * DAY

    return FeedingStats(
        session_count=len(sessions),
        avg_duration_ms=mean(durations),
        intervals_ms=intervals,
        avg_interval_ms=avg_interval,
        interval_cv=coefficient_of_variation(intervals),
        longest_interval_ms=max(intervals) if intervals else None,
        today_count=sum(1 for s in sessions if is_today(s.start_time, now)),
        this_week_count=sum(1 for s in sessions if in_this_week(s.start_time, now)),
        last_week_count=sum(1 for s in sessions if in_last_week(s.start_time, now)),
        recent_3_day_count=sum(
            1
            for s in sessions
            if in_recent_days(s.start_time, now, GROWTH_WINDOW_DAYS)
        ),
        prior_3_day_count=sum(
            1
            for s in sessions
            if in_prior_days(s.start_time, now, GROWTH_WINDOW_DAYS)
        ),
        hour_buckets=hour_buckets,
        type_counts=dict(type_counts),
        week_span_days=min(7.0, (now - week_start) / DAY),
    )


def adjacent_intervals(
    timestamps: Sequence[datetime], limit: int | None = None
) -> list[int]:
    """Return positive gaps in ms between neighbours of a newest-first list.

    Out-of-order neighbours produce a non-positive gap and are dropped.
    """
    pairs = len(timestamps) - 1
    if limit is not None:
        pairs = min(pairs, limit)
    intervals = []
    for index in range(max(pairs, 0)):
        gap = timestamps[index] - timestamps[index + 1]
        gap_ms = int(gap.total_seconds() * 1000)
        if gap_ms > 0:
            intervals.append(gap_ms)
    return intervals


def mean(values: Sequence[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def coefficient_of_variation(values: Sequence[float]) -> float | None:
    """Population standard deviation divided by the mean."""
    avg = mean(values)
    if not avg:
        return None
    variance = sum((value - avg) ** 2 for value in values) / len(values)
    return math.sqrt(variance) / avg
