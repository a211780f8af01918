"""Diaper (stool) logging."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from babyfeed.domain.models import StoolColor, StoolConsistency, StoolLog
from babyfeed.errors import ValidationError
from babyfeed.services.clock import LocalClock
from babyfeed.services.temporal import is_today

_logger = logging.getLogger(__name__)


class StoolRepository(Protocol):
    """Persistence interface for stool logs."""

    def list_stool_logs(self) -> list[StoolLog]:
        """Return logs, most recent first."""

    def add_stool_log(self, log: StoolLog) -> None:
        """Prepend a log."""

    def clear_stool_logs(self) -> None:
        """Delete every log."""


@dataclass
class StoolService:
    """Records diaper changes."""

    repository: StoolRepository
    clock: LocalClock

    def log_stool(
        self,
        color: StoolColor | str | None = StoolColor.BROWN,
        consistency: StoolConsistency | str | None = StoolConsistency.SOFT,
        notes: str = "",
    ) -> StoolLog:
        """Record a diaper change at the current time."""
        try:
            parsed_color = StoolColor(color) if color else None
            parsed_consistency = (
                StoolConsistency(consistency) if consistency else None
            )
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        log = StoolLog(
            id=uuid4().hex,
            time=self.clock.now(),
            color=parsed_color,
            consistency=parsed_consistency,
            notes=notes.strip(),
        )
        self.repository.add_stool_log(log)
        _logger.info(
            "Stool logged: color=%s consistency=%s", log.color, log.consistency
        )
        return log

    def list_logs(self) -> list[StoolLog]:
        return self.repository.list_stool_logs()

    def today_count(self) -> int:
        now = self.clock.now()
        logs = self.repository.list_stool_logs()
        return sum(1 for log in logs if is_today(log.time, now))
