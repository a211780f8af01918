"""Endpoints that create and read tracker records."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.encoders import jsonable_encoder

from babyfeed.api.schemas import (
    BottleIn,
    FeedStartIn,
    MedicineIn,
    ProfileIn,
    StoolIn,
)
from babyfeed.domain.models import MedicineTarget  # noqa: TC001

if TYPE_CHECKING:
    from babyfeed.containers import AppContainer

router = APIRouter(tags=["records"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/profile")
async def get_profile(request: Request) -> dict[str, object]:
    """Return the profile, or null when onboarding is required."""
    container = _container(request)
    return {
        "profile": jsonable_encoder(container.profile_service.get_profile()),
        "age": container.profile_service.age_label(),
    }


@router.put("/profile")
async def put_profile(payload: ProfileIn, request: Request) -> dict[str, object]:
    """Create or replace the baby profile."""
    profile = _container(request).profile_service.create_profile(
        name=payload.name,
        dob=payload.dob,
        feed_mode=payload.feed_mode,
        notes=payload.notes,
    )
    return {"profile": jsonable_encoder(profile)}


@router.delete("/profile", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(request: Request) -> None:
    """Reset the profile; records are kept."""
    _container(request).profile_service.reset_profile()


@router.get("/feeds")
async def list_feeds(request: Request) -> dict[str, object]:
    sessions = _container(request).feed_service.list_sessions()
    return {"sessions": jsonable_encoder(sessions)}


@router.post("/feeds/start")
async def start_feed(payload: FeedStartIn, request: Request) -> dict[str, object]:
    """Start the feed timer."""
    active = _container(request).feed_service.start_feed(payload.feed_type)
    return {"active": jsonable_encoder(active)}


@router.post("/feeds/stop")
async def stop_feed(request: Request) -> dict[str, object]:
    """Stop the feed timer and store the session."""
    session = _container(request).feed_service.stop_feed()
    return {"session": jsonable_encoder(session)}


@router.get("/feeds/active")
async def active_feed(request: Request) -> dict[str, object]:
    """Return the running feed with its elapsed time."""
    feed_service = _container(request).feed_service
    return {
        "active": jsonable_encoder(feed_service.active_session()),
        "elapsed_ms": feed_service.active_elapsed_ms(),
        "display": feed_service.timer_text(),
    }


@router.post("/feeds/bottle")
async def log_bottle(payload: BottleIn, request: Request) -> dict[str, object]:
    """Record a bottle feed."""
    session = _container(request).feed_service.log_bottle(
        payload.amount_ml, payload.time
    )
    return {"session": jsonable_encoder(session)}


@router.post("/stools")
async def log_stool(payload: StoolIn, request: Request) -> dict[str, object]:
    """Record a diaper change."""
    log = _container(request).stool_service.log_stool(
        color=payload.color,
        consistency=payload.consistency,
        notes=payload.notes,
    )
    return {"stool_log": jsonable_encoder(log)}


@router.get("/medicines")
async def list_medicines(
    request: Request, target: MedicineTarget | None = None
) -> dict[str, object]:
    """Return medicines with today's dose counts."""
    statuses = _container(request).medicine_service.list_medicines(target)
    return {"medicines": jsonable_encoder(statuses)}


@router.post("/medicines")
async def add_medicine(payload: MedicineIn, request: Request) -> dict[str, object]:
    medicine = _container(request).medicine_service.add_medicine(
        name=payload.name,
        target=payload.target,
        dosage=payload.dosage,
        notes=payload.notes,
    )
    return {"medicine": jsonable_encoder(medicine)}


@router.get("/medicines/calendar")
async def dose_calendar(
    request: Request,
    year: int | None = None,
    month: int | None = None,
    target: MedicineTarget | None = None,
) -> dict[str, object]:
    """Return per-day dose counts for a month."""
    calendar = _container(request).medicine_service.dose_calendar(year, month, target)
    return {"calendar": jsonable_encoder(calendar)}


@router.get("/medicines/doses")
async def day_doses(
    request: Request, day: date | None = None, target: MedicineTarget | None = None
) -> dict[str, object]:
    """Return the doses logged on one day."""
    logs = _container(request).medicine_service.day_logs(day, target)
    return {"doses": jsonable_encoder(logs)}


@router.post("/medicines/{medicine_id}/toggle")
async def toggle_medicine(medicine_id: str, request: Request) -> dict[str, object]:
    medicine = _container(request).medicine_service.toggle_medicine(medicine_id)
    return {"medicine": jsonable_encoder(medicine)}


@router.delete("/medicines/{medicine_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_medicine(medicine_id: str, request: Request) -> None:
    _container(request).medicine_service.remove_medicine(medicine_id)


@router.post("/medicines/{medicine_id}/doses")
async def take_medicine(medicine_id: str, request: Request) -> dict[str, object]:
    """Log a dose of an active medicine."""
    log = _container(request).medicine_service.take_medicine(medicine_id)
    return {"dose": jsonable_encoder(log)}
