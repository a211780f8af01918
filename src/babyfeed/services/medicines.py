"""Medicine catalog and dose logging."""

import calendar
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol
from uuid import uuid4

from babyfeed.domain.models import Medicine, MedicineDoseLog, MedicineTarget
from babyfeed.errors import MedicineNotFoundError, MedicinePausedError, ValidationError
from babyfeed.services.clock import LocalClock
from babyfeed.services.temporal import date_key, is_today

_logger = logging.getLogger(__name__)


class MedicineRepository(Protocol):
    """Persistence interface for medicines and dose logs."""

    def list_medicines(self) -> list[Medicine]:
        """Return medicines in the order they were added."""

    def save_medicines(self, medicines: list[Medicine]) -> None:
        """Replace the medicine catalog."""

    def list_medicine_logs(self) -> list[MedicineDoseLog]:
        """Return dose logs, most recent first."""

    def add_medicine_log(self, log: MedicineDoseLog) -> None:
        """Prepend a dose log."""

    def clear_medicine_logs(self) -> None:
        """Delete every dose log."""


@dataclass(frozen=True)
class MedicineStatus:
    """A medicine with today's usage."""

    medicine: Medicine
    today_count: int
    last_dose_at: datetime | None


@dataclass(frozen=True)
class DoseCalendar:
    """Dose counts for one calendar month."""

    year: int
    month: int
    first_weekday: int
    days_in_month: int
    counts: dict[str, int]


@dataclass
class MedicineService:
    """Manages the medicine list and records doses."""

    repository: MedicineRepository
    clock: LocalClock

    def add_medicine(
        self,
        name: str,
        target: MedicineTarget | str = MedicineTarget.BABY,
        dosage: str = "",
        notes: str = "",
    ) -> Medicine:
        """Add an active medicine to the catalog."""
        cleaned = name.strip()
        if not cleaned:
            raise ValidationError("Medicine name is required.")
        medicine = Medicine(
            id=uuid4().hex,
            name=cleaned,
            target=_target(target),
            dosage=dosage.strip(),
            notes=notes.strip(),
            active=True,
            created_at=self.clock.now(),
        )
        medicines = self.repository.list_medicines()
        medicines.append(medicine)
        self.repository.save_medicines(medicines)
        _logger.info("Medicine added: id=%s target=%s", medicine.id, medicine.target)
        return medicine

    def toggle_medicine(self, medicine_id: str) -> Medicine:
        """Pause an active medicine or resume a paused one."""
        medicines = self.repository.list_medicines()
        index = _index_of(medicines, medicine_id)
        updated = replace(medicines[index], active=not medicines[index].active)
        medicines[index] = updated
        self.repository.save_medicines(medicines)
        _logger.info("Medicine toggled: id=%s active=%s", medicine_id, updated.active)
        return updated

    def remove_medicine(self, medicine_id: str) -> None:
        """Delete a medicine; its past dose logs are kept."""
        medicines = self.repository.list_medicines()
        index = _index_of(medicines, medicine_id)
        del medicines[index]
        self.repository.save_medicines(medicines)
        _logger.info("Medicine removed: id=%s", medicine_id)

    def take_medicine(self, medicine_id: str) -> MedicineDoseLog:
        """Record a dose, copying the medicine's current name and dosage."""
        medicines = self.repository.list_medicines()
        medicine = medicines[_index_of(medicines, medicine_id)]
        if not medicine.active:
            raise MedicinePausedError(
                f"{medicine.name} is currently paused. Resume it first to log a dose."
            )
        log = MedicineDoseLog(
            id=uuid4().hex,
            medicine_id=medicine.id,
            medicine_name=medicine.name,
            target=medicine.target,
            dosage=medicine.dosage,
            time=self.clock.now(),
        )
        self.repository.add_medicine_log(log)
        _logger.info("Dose recorded: medicine_id=%s", medicine.id)
        return log

    def list_medicines(
        self, target: MedicineTarget | str | None = None
    ) -> list[MedicineStatus]:
        """Return medicines with today's dose counts, active ones first."""
        medicines = self.repository.list_medicines()
        if target:
            wanted = _target(target)
            medicines = [med for med in medicines if med.target == wanted]
        logs = self.repository.list_medicine_logs()
        now = self.clock.now()
        statuses = []
        for medicine in sorted(medicines, key=lambda med: not med.active):
            own = [log for log in logs if log.medicine_id == medicine.id]
            statuses.append(
                MedicineStatus(
                    medicine=medicine,
                    today_count=sum(1 for log in own if is_today(log.time, now)),
                    last_dose_at=own[0].time if own else None,
                )
            )
        return statuses

    def dose_calendar(
        self,
        year: int | None = None,
        month: int | None = None,
        target: MedicineTarget | str | None = None,
    ) -> DoseCalendar:
        """Count doses per local day for one month (current month by default)."""
        now = self.clock.now()
        year = year or now.year
        month = month or now.month
        first_weekday, days_in_month = calendar.monthrange(year, month)
        prefix = f"{year:04d}-{month:02d}-"
        counts: dict[str, int] = {}
        for log in self._logs_for(target):
            key = date_key(self.clock.localize(log.time))
            if key.startswith(prefix):
                counts[key] = counts.get(key, 0) + 1
        return DoseCalendar(
            year=year,
            month=month,
            first_weekday=first_weekday,
            days_in_month=days_in_month,
            counts=counts,
        )

    def day_logs(
        self, day: date | None = None, target: MedicineTarget | str | None = None
    ) -> list[MedicineDoseLog]:
        """Return the doses taken on a local calendar day (today by default)."""
        wanted = (day or self.clock.now().date()).isoformat()
        return [
            log
            for log in self._logs_for(target)
            if date_key(self.clock.localize(log.time)) == wanted
        ]

    def today_dose_count(self) -> int:
        now = self.clock.now()
        logs = self.repository.list_medicine_logs()
        return sum(1 for log in logs if is_today(log.time, now))

    def _logs_for(self, target: MedicineTarget | str | None) -> list[MedicineDoseLog]:
        logs = self.repository.list_medicine_logs()
        if not target:
            return logs
        wanted = _target(target)
        return [log for log in logs if log.target == wanted]


def _target(raw: MedicineTarget | str) -> MedicineTarget:
    try:
        return MedicineTarget(raw)
    except ValueError as exc:
        raise ValidationError(f"Unknown medicine target: {raw}") from exc


def _index_of(medicines: list[Medicine], medicine_id: str) -> int:
    for index, medicine in enumerate(medicines):
        if medicine.id == medicine_id:
            return index
    raise MedicineNotFoundError(f"Medicine {medicine_id} not found.")
