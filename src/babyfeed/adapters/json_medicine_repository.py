"""JSON file repository for medicines and dose logs."""

from dataclasses import dataclass

from babyfeed.adapters.json_store import (
    MEDICINE_LOGS_KEY,
    MEDICINES_KEY,
    JsonDocumentStore,
    format_datetime,
    require_datetime,
)
from babyfeed.domain.models import Medicine, MedicineDoseLog, MedicineTarget
from babyfeed.errors import StorageError
from babyfeed.services.medicines import MedicineRepository


@dataclass
class JsonMedicineRepository(MedicineRepository):
    """Stores the medicine catalog and newest-first dose logs."""

    store: JsonDocumentStore

    def list_medicines(self) -> list[Medicine]:
        return [_parse_medicine(row) for row in self.store.get_rows(MEDICINES_KEY)]

    def save_medicines(self, medicines: list[Medicine]) -> None:
        self.store.put(
            MEDICINES_KEY,
            [
                {
                    "id": medicine.id,
                    "name": medicine.name,
                    "target": medicine.target.value,
                    "dosage": medicine.dosage,
                    "notes": medicine.notes,
                    "active": medicine.active,
                    "created_at": format_datetime(medicine.created_at),
                }
                for medicine in medicines
            ],
        )

    def list_medicine_logs(self) -> list[MedicineDoseLog]:
        return [_parse_log(row) for row in self.store.get_rows(MEDICINE_LOGS_KEY)]

    def add_medicine_log(self, log: MedicineDoseLog) -> None:
        self.store.prepend_row(
            MEDICINE_LOGS_KEY,
            {
                "id": log.id,
                "medicine_id": log.medicine_id,
                "medicine_name": log.medicine_name,
                "target": log.target.value,
                "dosage": log.dosage,
                "time": format_datetime(log.time),
            },
        )

    def clear_medicine_logs(self) -> None:
        self.store.put(MEDICINE_LOGS_KEY, None)


def _target(raw: object) -> MedicineTarget:
    try:
        return MedicineTarget(str(raw))
    except ValueError as exc:
        raise StorageError(f"Unknown medicine target: {raw!r}") from exc


def _parse_medicine(row: dict[str, object]) -> Medicine:
    return Medicine(
        id=str(row.get("id", "")),
        name=str(row.get("name", "")),
        target=_target(row.get("target", MedicineTarget.BABY.value)),
        dosage=str(row.get("dosage") or ""),
        notes=str(row.get("notes") or ""),
        active=row.get("active") is not False,
        created_at=require_datetime(row.get("created_at")),
    )


def _parse_log(row: dict[str, object]) -> MedicineDoseLog:
    return MedicineDoseLog(
        id=str(row.get("id", "")),
        medicine_id=str(row.get("medicine_id", "")),
        medicine_name=str(row.get("medicine_name", "")),
        target=_target(row.get("target", MedicineTarget.BABY.value)),
        dosage=str(row.get("dosage") or ""),
        time=require_datetime(row.get("time")),
    )
