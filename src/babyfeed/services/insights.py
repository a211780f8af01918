"""Heuristic insights over feeding and stool history.

The rule set is an ordered table of ``InsightRule`` entries. Each rule has a
data-sufficiency predicate and a builder that classifies the aggregates into
at most one ``InsightRecord``. Output keeps table order and is capped at
``MAX_INSIGHTS``; it is never re-sorted by severity.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from babyfeed.domain.insights import InsightCategory, InsightRecord
from babyfeed.domain.models import (
    FeedingSession,
    FeedMode,
    FeedType,
    Profile,
    StoolColor,
    StoolConsistency,
    StoolLog,
)
from babyfeed.domain.stats import FeedingStats, StoolStats
from babyfeed.services.feeding_stats import compute_feeding_stats
from babyfeed.services.formatting import (
    MS_PER_HOUR,
    MS_PER_MINUTE,
    format_hours,
    round_half_up,
)
from babyfeed.services.stool_stats import compute_stool_stats
from babyfeed.services.temporal import age_in_days, age_in_months, age_in_weeks

_logger = logging.getLogger(__name__)

MAX_INSIGHTS = 8
DEFAULT_NAME = "Your baby"

PEAK_LABELS = {
    "morning": "morning (5am-12pm)",
    "afternoon": "afternoon (12-5pm)",
    "evening": "evening (5-9pm)",
    "night": "nighttime (9pm-5am)",
}

GROWTH_SPURT_WINDOWS = (
    (10, 18, "2-week"),
    (38, 48, "6-week"),
    (80, 95, "3-month"),
    (170, 190, "6-month"),
)


@dataclass(frozen=True)
class InsightContext:
    """Everything a rule may look at during one analysis pass."""

    name: str
    feed_mode: FeedMode | None
    age_days: int | None
    age_weeks: int | None
    age_months: int | None
    feeding: FeedingStats
    stool: StoolStats


@dataclass(frozen=True)
class InsightRule:
    """One row of the rule table."""

    name: str
    applies: Callable[[InsightContext], bool]
    build: Callable[[InsightContext], InsightRecord | None]


def _insight(
    category: InsightCategory, icon: str, title: str, text: str
) -> InsightRecord:
    return InsightRecord(category=category, icon=icon, title=title, text=text)


def _feeding_frequency(ctx: InsightContext) -> InsightRecord | None:
    hours = ctx.feeding.avg_interval_ms / MS_PER_HOUR
    if ctx.age_weeks is not None and ctx.age_weeks <= 4:
        if hours <= 3:
            return _insight(
                InsightCategory.POSITIVE,
                "✅",
                "Great feeding frequency",
                f"{ctx.name} feeds about every {format_hours(hours)}. "
                "For a newborn, feeding every 2-3 hours is ideal.",
            )
        if hours > 4:
            return _insight(
                InsightCategory.WARNING,
                "⚠️",
                "Feeding interval may be too long",
                f"Average gap is {format_hours(hours)}. "
                "Newborns typically need feeding every 2-3 hours.",
            )
        return None
    return _insight(
        InsightCategory.INFO,
        "🕐",
        "Feeding rhythm",
        f"{ctx.name} feeds approximately every {format_hours(hours)} on average.",
    )


def _duration(ctx: InsightContext) -> InsightRecord | None:
    avg_min = ctx.feeding.avg_duration_ms / MS_PER_MINUTE
    shown = round_half_up(avg_min)
    if avg_min < 5:
        return _insight(
            InsightCategory.WARNING,
            "⏱️",
            "Short feeding sessions",
            f"Average feeding lasts {shown} minutes. Try encouraging longer "
            f"feeds if {ctx.name} seems unsatisfied.",
        )
    if avg_min <= 20:
        return _insight(
            InsightCategory.POSITIVE,
            "👍",
            "Healthy feed duration",
            f"Average session is {shown} minutes, right in the typical "
            "healthy range.",
        )
    # No insight between 20 and 30 minutes.
    if avg_min > 30:
        return _insight(
            InsightCategory.INFO,
            "💡",
            "Longer-than-average sessions",
            f"Feeds average {shown} minutes. Some babies are slower feeders; "
            "usually fine.",
        )
    return None


def _weekly_trend(ctx: InsightContext) -> InsightRecord | None:
    stats = ctx.feeding
    this_rate = stats.this_week_count / stats.week_span_days
    last_rate = stats.last_week_count / 7
    change = (this_rate - last_rate) / last_rate * 100
    if abs(change) <= 15:
        return None
    up = change > 0
    spurt = " Could be a growth spurt!" if change > 20 else ""
    return _insight(
        InsightCategory.INFO if up else InsightCategory.WARNING,
        "📈" if up else "📉",
        f"Frequency {'up' if up else 'down'} this week",
        f"{ctx.name} is feeding {round_half_up(abs(change))}% "
        f"{'more' if up else 'less'} vs last week.{spurt}",
    )


def _day_night(ctx: InsightContext) -> InsightRecord | None:
    stats = ctx.feeding
    night_pct = stats.night_feeds / stats.session_count * 100
    shown = round_half_up(night_pct)
    if stats.night_feeds > stats.day_feeds:
        return _insight(
            InsightCategory.INFO,
            "🌙",
            "More night feeds",
            f"{shown}% of feeds happen at night (9pm-5am). This is common in "
            "young babies. Nighttime feeds gradually decrease with age.",
        )
    if ctx.age_months is not None and ctx.age_months >= 4 and shown > 30:
        return _insight(
            InsightCategory.TIP,
            "🌙",
            "Night feeding pattern",
            f"{shown}% of feeds are at night. By {ctx.age_months} months, some "
            "babies sleep longer stretches. Gradually reducing night feeds "
            "can help.",
        )
    return None


def _peak_time(ctx: InsightContext) -> InsightRecord | None:
    buckets = ctx.feeding.hour_buckets
    top = max(buckets, key=buckets.__getitem__)
    if buckets[top] <= ctx.feeding.session_count * 0.35:
        return None
    return _insight(
        InsightCategory.INFO,
        "☀️",
        "Peak feeding time",
        f"{ctx.name} feeds most during the {PEAK_LABELS[top]}.",
    )


def _regularity(ctx: InsightContext) -> InsightRecord | None:
    cv = ctx.feeding.interval_cv
    if cv is None:
        return None
    if cv < 0.25:
        return _insight(
            InsightCategory.POSITIVE,
            "🎯",
            "Very consistent schedule",
            f"{ctx.name}'s feeding times are impressively regular! "
            "Consistency helps with sleep and digestion.",
        )
    if cv < 0.5:
        return _insight(
            InsightCategory.INFO,
            "📊",
            "Moderately consistent",
            "Feeding shows some regularity. Patterns will become more "
            f"predictable as {ctx.name} grows.",
        )
    return _insight(
        InsightCategory.TIP,
        "💫",
        "Variable schedule",
        "Feeding times vary quite a bit. This is common, especially in "
        "younger babies. Follow hunger cues.",
    )


def _breast_count(counts: dict[str, int]) -> int:
    left = counts.get(FeedType.LEFT_BREAST.value, 0)
    return left + counts.get(FeedType.RIGHT_BREAST.value, 0)


def _feed_mix(ctx: InsightContext) -> InsightRecord | None:
    counts = ctx.feeding.type_counts
    bottle = counts.get(FeedType.BOTTLE.value, 0)
    breast = _breast_count(counts)
    total = bottle + breast
    if total == 0:
        return None
    breast_pct = breast / total * 100
    return _insight(
        InsightCategory.INFO,
        "⚖️",
        "Feeding mix",
        f"{round_half_up(breast_pct)}% breast / "
        f"{round_half_up(100 - breast_pct)}% bottle over {total} feeds.",
    )


def _breast_sides(ctx: InsightContext) -> InsightRecord | None:
    counts = ctx.feeding.type_counts
    left = counts.get(FeedType.LEFT_BREAST.value, 0)
    ratio = left / _breast_count(counts)
    if 0.3 <= ratio <= 0.7:
        return None
    dominant, other = ("left", "right") if ratio > 0.5 else ("right", "left")
    share = round_half_up(max(ratio, 1 - ratio) * 100)
    return _insight(
        InsightCategory.TIP,
        "🔄",
        "Alternate sides more",
        f"{share}% on {dominant} side. Try the {other} more for balance.",
    )


def _growth_spurt(ctx: InsightContext) -> InsightRecord | None:
    for start, end, label in GROWTH_SPURT_WINDOWS:
        if not start <= ctx.age_days <= end:
            continue
        recent = ctx.feeding.recent_3_day_count
        prior = ctx.feeding.prior_3_day_count
        if prior > 0 and recent > prior * 1.3:
            return _insight(
                InsightCategory.INFO,
                "🌱",
                f"Possible {label} growth spurt",
                f"{ctx.name} is in the typical {label} growth spurt window and "
                "feeding more frequently than before. This usually lasts "
                "2-3 days.",
            )
        return None
    return None


def _longest_gap(ctx: InsightContext) -> InsightRecord | None:
    hours = ctx.feeding.longest_interval_ms / MS_PER_HOUR
    if hours >= 5 and ctx.age_weeks is not None and ctx.age_weeks <= 4:
        return _insight(
            InsightCategory.WARNING,
            "⏰",
            "Long gap detected",
            f"Longest gap between feeds was {format_hours(hours)}. Newborns "
            "shouldn't go more than 4 hours without feeding.",
        )
    if hours >= 6 and ctx.age_months is not None and ctx.age_months >= 3:
        return _insight(
            InsightCategory.POSITIVE,
            "😴",
            "Longer sleep stretch!",
            f"{ctx.name} went {format_hours(hours)} between feeds. Could "
            "indicate longer sleep stretches developing!",
        )
    return None


def _stool_frequency(ctx: InsightContext) -> InsightRecord | None:
    hours = ctx.stool.avg_gap_hours
    if hours < 6:
        return _insight(
            InsightCategory.INFO,
            "💩",
            "Active digestion",
            f"{ctx.name} has a bowel movement roughly every "
            f"{format_hours(hours)}. This is a sign of good milk intake!",
        )
    if hours > 48 and ctx.age_months is not None and ctx.age_months < 2:
        return _insight(
            InsightCategory.WARNING,
            "💩",
            "Infrequent stools",
            f"Average {format_hours(hours)} between stools. For babies under "
            "2 months, less than once daily may warrant a check-up.",
        )
    return None


def _feed_to_stool(ctx: InsightContext) -> InsightRecord | None:
    correlation = ctx.stool.correlation
    if correlation is None or correlation <= 0.5:
        return None
    return _insight(
        InsightCategory.INFO,
        "🔗",
        "Feed → poop pattern",
        f"{round_half_up(correlation * 100)}% of diaper changes happen within "
        "an hour of feeding. This gastrocolic reflex is normal and healthy!",
    )


def _stool_color(ctx: InsightContext) -> InsightRecord | None:
    colors = ctx.stool.recent_colors
    if StoolColor.RED.value in colors:
        color = StoolColor.RED.value
    elif StoolColor.BLACK.value in colors:
        color = StoolColor.BLACK.value
    else:
        return None
    return _insight(
        InsightCategory.WARNING,
        "🚨",
        "Unusual stool color",
        f"You logged a {color} stool. Please consult your pediatrician; "
        f"{color} stools can sometimes indicate a medical concern.",
    )


def _white_stool(ctx: InsightContext) -> InsightRecord | None:
    if StoolColor.WHITE.value not in ctx.stool.recent_colors:
        return None
    return _insight(
        InsightCategory.WARNING,
        "🚨",
        "White/pale stool alert",
        "White or very pale stools should be evaluated by a doctor promptly "
        "as they may indicate a liver issue.",
    )


def _hard_stools(ctx: InsightContext) -> InsightRecord | None:
    consistencies = ctx.stool.recent_consistencies
    hard = consistencies.count(StoolConsistency.HARD.value)
    if hard <= len(consistencies) * 0.5:
        return None
    if ctx.age_months is not None and ctx.age_months >= 6:
        advice = "Try offering more water with meals."
    else:
        advice = "Consult your pediatrician about this."
    return _insight(
        InsightCategory.TIP,
        "💧",
        "Hard stools noticed",
        f"More than half of recent stools are hard. {advice}",
    )


def _loose_stools(ctx: InsightContext) -> InsightRecord | None:
    consistencies = ctx.stool.recent_consistencies
    liquid = consistencies.count(StoolConsistency.LIQUID.value)
    if liquid <= len(consistencies) * 0.6:
        return None
    return _insight(
        InsightCategory.WARNING,
        "💧",
        "Very loose stools",
        "Many recent stools are very liquid. If this persists more than a day "
        "or two, consult your pediatrician.",
    )


def _age_tip(ctx: InsightContext) -> InsightRecord | None:
    months = ctx.age_months
    if months < 1:
        return _insight(
            InsightCategory.TIP,
            "🌟",
            "Newborn tip",
            f"At {ctx.age_days} days old, {ctx.name} should feed 8-12 times per "
            "day. Watch for rooting, sucking on hands, or fussiness.",
        )
    if months < 4:
        return _insight(
            InsightCategory.TIP,
            "🌟",
            f"{months}-month tip",
            f"{ctx.name} may go 2.5-4 hours between feeds now. Growth spurts "
            "at 3 weeks, 6 weeks, and 3 months can increase demand.",
        )
    if months < 6:
        return _insight(
            InsightCategory.TIP,
            "🌟",
            "Getting ready for solids",
            f"{ctx.name} is nearing 6 months when solids can begin. Continue "
            "milk feeds as primary nutrition.",
        )
    if months < 12:
        return _insight(
            InsightCategory.TIP,
            "🌟",
            "Complementary feeding",
            f"At {months} months, offer variety of solids alongside milk. Let "
            f"{ctx.name} explore textures and flavors!",
        )
    return None


def _has_stools(ctx: InsightContext) -> bool:
    return ctx.stool.log_count >= 2


RULES: tuple[InsightRule, ...] = (
    InsightRule(
        "feeding_frequency",
        lambda ctx: ctx.feeding.avg_interval_ms is not None,
        _feeding_frequency,
    ),
    InsightRule("duration", lambda ctx: ctx.feeding.session_count >= 3, _duration),
    InsightRule(
        "weekly_trend",
        lambda ctx: ctx.feeding.last_week_count >= 3
        and ctx.feeding.this_week_count >= 1,
        _weekly_trend,
    ),
    InsightRule(
        "day_night",
        lambda ctx: ctx.feeding.session_count >= 6 and ctx.feeding.night_feeds > 0,
        _day_night,
    ),
    InsightRule("peak_time", lambda ctx: ctx.feeding.session_count >= 5, _peak_time),
    InsightRule(
        "regularity", lambda ctx: len(ctx.feeding.intervals_ms) >= 3, _regularity
    ),
    InsightRule(
        "feed_mix",
        lambda ctx: ctx.feed_mode == FeedMode.MIXED
        and ctx.feeding.session_count >= 5,
        _feed_mix,
    ),
    InsightRule(
        "breast_sides",
        lambda ctx: ctx.feed_mode in (FeedMode.BREAST, FeedMode.MIXED)
        and ctx.feeding.session_count >= 4
        and _breast_count(ctx.feeding.type_counts) >= 4,
        _breast_sides,
    ),
    InsightRule(
        "growth_spurt",
        lambda ctx: ctx.age_days is not None and ctx.feeding.session_count >= 5,
        _growth_spurt,
    ),
    InsightRule(
        "longest_gap", lambda ctx: len(ctx.feeding.intervals_ms) >= 3, _longest_gap
    ),
    InsightRule(
        "stool_frequency",
        lambda ctx: _has_stools(ctx) and len(ctx.stool.intervals_ms) >= 2,
        _stool_frequency,
    ),
    InsightRule(
        "feed_to_stool",
        lambda ctx: _has_stools(ctx)
        and ctx.feeding.session_count >= 3
        and ctx.stool.log_count >= 3,
        _feed_to_stool,
    ),
    InsightRule("stool_color", _has_stools, _stool_color),
    InsightRule("white_stool", _has_stools, _white_stool),
    InsightRule(
        "hard_stools",
        lambda ctx: _has_stools(ctx) and len(ctx.stool.recent_consistencies) >= 3,
        _hard_stools,
    ),
    InsightRule(
        "loose_stools",
        lambda ctx: _has_stools(ctx)
        and len(ctx.stool.recent_consistencies) >= 3
        and ctx.age_months is not None
        and ctx.age_months >= 1,
        _loose_stools,
    ),
    InsightRule(
        "age_tip",
        lambda ctx: ctx.age_months is not None and ctx.feeding.session_count >= 2,
        _age_tip,
    ),
)


def build_context(
    sessions: Sequence[FeedingSession],
    stool_logs: Sequence[StoolLog],
    profile: Profile | None,
    now: datetime,
) -> InsightContext:
    """Compute ages and aggregates for one analysis pass."""
    age_days = age_in_days(profile.dob, now) if profile else None
    if age_days is not None and age_days < 0:
        age_days = None
    return InsightContext(
        name=profile.name if profile else DEFAULT_NAME,
        feed_mode=profile.feed_mode if profile else None,
        age_days=age_days,
        age_weeks=age_in_weeks(age_days),
        age_months=age_in_months(age_days),
        feeding=compute_feeding_stats(sessions, now),
        stool=compute_stool_stats(stool_logs, sessions),
    )


def compute_insights(
    sessions: Sequence[FeedingSession],
    stool_logs: Sequence[StoolLog],
    profile: Profile | None,
    now: datetime,
    rules: Sequence[InsightRule] = RULES,
    limit: int = MAX_INSIGHTS,
) -> list[InsightRecord]:
    """Run the rule table and return at most ``limit`` insights in rule order.

    Without any feeding sessions no insights are produced, whatever the
    stool log holds.
    """
    if not sessions:
        return []

    ctx = build_context(sessions, stool_logs, profile, now)
    insights: list[InsightRecord] = []
    for rule in rules:
        if not rule.applies(ctx):
            continue
        record = rule.build(ctx)
        if record is not None:
            insights.append(record)
    _logger.debug(
        "Insight pass: sessions=%s stools=%s emitted=%s",
        len(sessions),
        len(stool_logs),
        len(insights),
    )
    return insights[:limit]
