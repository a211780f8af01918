"""Text formatting for durations, gaps and ages."""

import math

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values."""
    return math.floor(value + 0.5)


def format_hours(hours: float) -> str:
    """Render a gap or interval given in hours."""
    if hours < 1:
        return f"{round_half_up(hours * 60)} minutes"
    whole = math.floor(hours)
    minutes = round_half_up((hours - whole) * 60)
    if minutes == 60:
        whole += 1
        minutes = 0
    if minutes:
        return f"{whole}h {minutes}m"
    return f"{whole}h"


def format_duration(ms: float) -> str:
    """Render a running timer as ``MM:SS`` or ``H:MM:SS``."""
    total_sec = int(ms // 1000)
    minutes, seconds = divmod(total_sec, 60)
    if minutes >= 60:
        hours, minutes = divmod(minutes, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def format_duration_short(ms: float) -> str:
    """Render a duration compactly, e.g. ``12m`` or ``1h 5m``."""
    total_min = int(ms // MS_PER_MINUTE)
    if total_min < 1:
        return "<1m"
    if total_min < 60:
        return f"{total_min}m"
    hours, rem = divmod(total_min, 60)
    return f"{hours}h {rem}m" if rem else f"{hours}h"


def format_time_ago(ms: float) -> str:
    """Render elapsed time relative to now."""
    minutes = int(ms // MS_PER_MINUTE)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"


def format_age(days: int | None) -> str:
    """Render the baby's age for the profile header."""
    if days is None or days < 0:
        return ""
    if days == 0:
        return "Born today!"
    if days == 1:
        return "1 day old"
    if days < 7:
        return f"{days} days old"
    if days < 30:
        weeks = days // 7
        return f"{weeks} week{'s' if weeks > 1 else ''} old"
    months = int(days // 30.44)
    if months < 24:
        return f"{months} month{'s' if months > 1 else ''} old"
    years, rem = divmod(months, 12)
    if rem:
        return f"{years}y {rem}m old"
    return f"{years} year{'s' if years > 1 else ''} old"
