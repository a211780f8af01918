"""Age computation and time windowing helpers."""

from datetime import datetime, timedelta

DAY = timedelta(days=1)
HOUR = timedelta(hours=1)
AVG_MONTH_DAYS = 30.44

MORNING = "morning"
AFTERNOON = "afternoon"
EVENING = "evening"
NIGHT = "night"
BUCKETS = (MORNING, AFTERNOON, EVENING, NIGHT)


def age_in_days(dob: datetime | None, now: datetime) -> int | None:
    """Return whole days since birth, floored; None without a birth date.

    A birth date in the future yields a negative number; callers treat that
    as unknown.
    """
    if dob is None:
        return None
    return (now - dob) // DAY


def age_in_weeks(days: int | None) -> int | None:
    """Return whole weeks for an age in days."""
    if days is None:
        return None
    return days // 7


def age_in_months(days: int | None) -> int | None:
    """Return whole months for an age in days, using a 30.44-day month."""
    if days is None:
        return None
    return int(days // AVG_MONTH_DAYS)


def to_local(timestamp: datetime, now: datetime) -> datetime:
    """Express a timestamp in the zone of the reference instant."""
    if timestamp.tzinfo is None or now.tzinfo is None:
        return timestamp
    return timestamp.astimezone(now.tzinfo)


def bucket_of_day(timestamp: datetime) -> str:
    """Classify a wall-clock time into a part of the day."""
    hour = timestamp.hour
    if 5 <= hour < 12:
        return MORNING
    if 12 <= hour < 17:
        return AFTERNOON
    if 17 <= hour < 21:
        return EVENING
    return NIGHT


def start_of_today(now: datetime) -> datetime:
    """Return local midnight for the reference instant."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def is_today(timestamp: datetime, now: datetime) -> bool:
    return timestamp >= start_of_today(now)


def in_this_week(timestamp: datetime, now: datetime) -> bool:
    """Return whether the timestamp falls within the last 7 days."""
    return timestamp >= now - 7 * DAY


def in_last_week(timestamp: datetime, now: datetime) -> bool:
    """Return whether the timestamp falls 7 to 14 days back."""
    return now - 14 * DAY <= timestamp < now - 7 * DAY


def in_recent_days(timestamp: datetime, now: datetime, days: int) -> bool:
    """Return whether the timestamp is less than ``days`` old."""
    return now - timestamp < days * DAY


def in_prior_days(timestamp: datetime, now: datetime, days: int) -> bool:
    """Return whether the timestamp falls in the window just before the recent one."""
    age = now - timestamp
    return days * DAY <= age < 2 * days * DAY


def date_key(timestamp: datetime) -> str:
    """Return a ``YYYY-MM-DD`` key for calendar grouping."""
    return timestamp.strftime("%Y-%m-%d")
