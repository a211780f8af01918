"""Aggregates derived from the event log."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedingStats:
    """Feeding aggregates consumed by the insight rules."""

    session_count: int
    avg_duration_ms: float | None
    intervals_ms: list[int]
    avg_interval_ms: float | None
    interval_cv: float | None
    longest_interval_ms: int | None
    today_count: int
    this_week_count: int
    last_week_count: int
    recent_3_day_count: int
    prior_3_day_count: int
    hour_buckets: dict[str, int]
    type_counts: dict[str, int]
    week_span_days: float = 7.0

    @property
    def day_feeds(self) -> int:
        return (
            self.hour_buckets["morning"]
            + self.hour_buckets["afternoon"]
            + self.hour_buckets["evening"]
        )

    @property
    def night_feeds(self) -> int:
        return self.hour_buckets["night"]


@dataclass(frozen=True)
class StoolStats:
    """Stool aggregates consumed by the insight rules."""

    log_count: int
    intervals_ms: list[int]
    avg_gap_hours: float | None
    correlated_count: int
    correlation: float | None
    recent_colors: list[str]
    recent_consistencies: list[str]
