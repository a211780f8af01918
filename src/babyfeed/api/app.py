"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from babyfeed.api.records import router as records_router
from babyfeed.app_logging import configure_logging
from babyfeed.containers import AppContainer
from babyfeed.domain.insights import (
    InsightCategory,
    InsightRecord,
    MilestoneRecord,
    MilestoneStatus,
)
from babyfeed.errors import (
    ActiveSessionError,
    MedicineNotFoundError,
    MedicinePausedError,
    ProfileRequiredError,
    StorageError,
    TrackerError,
    ValidationError,
)

INSIGHTS_EMPTY = "Log a few feeding sessions to unlock insights."
MILESTONES_EMPTY = "Milestones will appear as your baby grows."
HISTORY_EMPTY = "No records yet."

INSIGHT_STYLES = {
    InsightCategory.POSITIVE: "success",
    InsightCategory.WARNING: "alert",
    InsightCategory.INFO: "neutral",
    InsightCategory.TIP: "hint",
}
MILESTONE_BADGES = {
    MilestoneStatus.CURRENT: "Now",
    MilestoneStatus.UPCOMING: "Coming up",
}

_ERROR_STATUS: tuple[tuple[type[TrackerError], int], ...] = (
    (ProfileRequiredError, status.HTTP_409_CONFLICT),
    (ActiveSessionError, status.HTTP_409_CONFLICT),
    (MedicinePausedError, status.HTTP_409_CONFLICT),
    (MedicineNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, 422),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Baby Feed Tracker")
    app.state.container = container
    app.include_router(records_router)

    @app.exception_handler(TrackerError)
    async def tracker_error(request: Request, exc: TrackerError) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Request failed: %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(request: Request) -> dict[str, object]:
        """Return today's headline numbers."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.stats_service.dashboard()
        return {"dashboard": jsonable_encoder(summary)}

    @app.get("/history")
    async def history(request: Request) -> dict[str, object]:
        """Return the merged timeline grouped by day."""
        state_container: AppContainer = request.app.state.container
        days = state_container.stats_service.history()
        return {
            "days": jsonable_encoder(days),
            "empty_message": None if days else HISTORY_EMPTY,
        }

    @app.delete("/history", status_code=status.HTTP_204_NO_CONTENT)
    async def clear_history(request: Request) -> None:
        """Delete feeds, diapers and doses."""
        state_container: AppContainer = request.app.state.container
        state_container.stats_service.clear_history()

    @app.get("/insights")
    async def insights(request: Request) -> dict[str, object]:
        """Return the current insights with their display style."""
        state_container: AppContainer = request.app.state.container
        records = state_container.analysis_service.insights()
        return {
            "insights": [_insight_view(record) for record in records],
            "empty_message": None if records else INSIGHTS_EMPTY,
        }

    @app.get("/milestones")
    async def milestones(request: Request) -> dict[str, object]:
        """Return the current and upcoming milestone."""
        state_container: AppContainer = request.app.state.container
        records = state_container.analysis_service.milestones()
        return {
            "milestones": [_milestone_view(record) for record in records],
            "empty_message": None if records else MILESTONES_EMPTY,
        }

    return app


def _status_for(exc: TrackerError) -> int:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _insight_view(record: InsightRecord) -> dict[str, object]:
    return {
        **jsonable_encoder(record),
        "style": INSIGHT_STYLES[record.category],
    }


def _milestone_view(record: MilestoneRecord) -> dict[str, object]:
    return {
        **jsonable_encoder(record),
        "badge": MILESTONE_BADGES[record.status],
    }
