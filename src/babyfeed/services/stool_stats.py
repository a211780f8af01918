"""Aggregates over the stool log and its timing against feeds."""

from collections.abc import Sequence
from datetime import datetime

from babyfeed.domain.models import FeedingSession, StoolLog
from babyfeed.domain.stats import StoolStats
from babyfeed.services.feeding_stats import adjacent_intervals, mean
from babyfeed.services.formatting import MS_PER_HOUR
from babyfeed.services.temporal import HOUR

INTERVAL_PAIRS = 10
CORRELATION_WINDOW = 15
RECENT_WINDOW = 20


def compute_stool_stats(
    stool_logs: Sequence[StoolLog], sessions: Sequence[FeedingSession]
) -> StoolStats:
    """Derive stool aggregates from a most-recent-first stool log."""
    intervals = adjacent_intervals(
        [log.time for log in stool_logs], limit=INTERVAL_PAIRS
    )
    avg_gap = mean(intervals)
    correlated = count_correlated(stool_logs[:CORRELATION_WINDOW], sessions)
    window = min(len(stool_logs), CORRELATION_WINDOW)
    recent = stool_logs[:RECENT_WINDOW]

    return StoolStats(
        log_count=len(stool_logs),
        intervals_ms=intervals,
        avg_gap_hours=avg_gap / MS_PER_HOUR if avg_gap is not None else None,
        correlated_count=correlated,
        correlation=correlated / window if window else None,
        recent_colors=[str(log.color) for log in recent if log.color],
        recent_consistencies=[
            str(log.consistency) for log in recent if log.consistency
        ],
    )


def count_correlated(
    stool_logs: Sequence[StoolLog], sessions: Sequence[FeedingSession]
) -> int:
    """Count stool logs that follow the end of some feed by under an hour."""
    return sum(1 for log in stool_logs if _follows_feed(log.time, sessions))


def _follows_feed(moment: datetime, sessions: Sequence[FeedingSession]) -> bool:
    for session in sessions:
        if session.end_time is None:
            continue
        gap = moment - session.end_time
        if gap.total_seconds() > 0 and gap < HOUR:
            return True
    return False
