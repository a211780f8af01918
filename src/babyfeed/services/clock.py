"""Wall-clock access for services."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from zoneinfo import ZoneInfo


def system_time() -> datetime:
    """Return the current UTC instant."""
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class LocalClock:
    """Current time expressed in the tracker's configured zone."""

    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo("UTC"))
    source: Callable[[], datetime] = system_time

    def now(self) -> datetime:
        return self.source().astimezone(self.timezone)

    def localize(self, moment: datetime) -> datetime:
        """Express a stored instant in the configured zone."""
        if moment.tzinfo is None:
            return moment.replace(tzinfo=self.timezone)
        return moment.astimezone(self.timezone)
