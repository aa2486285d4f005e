"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ramadan_tracker.api.models import SubmitReadingRequest
from ramadan_tracker.app_logging import configure_logging
from ramadan_tracker.containers import AppContainer
from ramadan_tracker.domain.readings import ReadingEntry, SubmissionResult
from ramadan_tracker.domain.stats import ParticipantProgress, ReadingSummary
from ramadan_tracker.errors import (
    InvalidInputError,
    StorageUnavailableError,
    TrackerError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Serving reading cycle starting %s", container.settings.ramadan_start
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(
        request: Request, exc: TrackerError
    ) -> JSONResponse:
        if isinstance(exc, StorageUnavailableError):
            logger.error("Storage failure on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "code": exc.code, "message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Malformed request on %s: %s", request.url.path, exc.errors())
        return await tracker_error_handler(
            request, InvalidInputError("Invalid request parameters")
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/submit", status_code=status.HTTP_201_CREATED)
    async def submit_reading(
        payload: SubmitReadingRequest, request: Request
    ) -> dict[str, object]:
        """Record today's reading for a participant."""
        state_container: AppContainer = request.app.state.container
        result = state_container.submission_service.submit(payload.name, payload.para)
        return {
            "message": "Reading saved successfully",
            "data": _serialize_submission(result),
        }

    @app.get("/api/participants")
    async def list_readings(
        request: Request, day: int | None = None, name: str | None = None
    ) -> dict[str, object]:
        """Return readings, optionally filtered, with summary statistics."""
        state_container: AppContainer = request.app.state.container
        report = state_container.submission_service.report(
            ramadan_day=day, name_contains=name
        )
        data = [_serialize_entry(entry) for entry in report.entries]
        return {
            "success": True,
            "data": data,
            "summary": _serialize_summary(report.summary),
            "count": len(data),
        }

    @app.get("/api/participants/{reading_id}")
    async def reading_detail(reading_id: UUID, request: Request) -> dict[str, object]:
        """Return a single reading."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.submission_service.get_reading(reading_id)
        return {"success": True, "data": _serialize_entry(entry)}

    @app.get("/api/days")
    async def list_days(request: Request) -> dict[str, object]:
        """Return the day indices that have readings."""
        state_container: AppContainer = request.app.state.container
        return {
            "success": True,
            "data": state_container.submission_service.ramadan_days(),
        }

    @app.get("/api/progress/{name}")
    async def participant_progress(name: str, request: Request) -> dict[str, object]:
        """Return a participant's total and what remains of the cycle goal."""
        state_container: AppContainer = request.app.state.container
        progress = state_container.submission_service.progress(name)
        return {"success": True, "data": _serialize_progress(progress)}

    return app


def _serialize_submission(result: SubmissionResult) -> dict[str, object]:
    return {
        "name": result.name,
        "para": result.para,
        "totalPara": result.total_para,
        "ramadanDay": result.ramadan_day,
    }


def _serialize_entry(entry: ReadingEntry) -> dict[str, object]:
    return {
        "_id": str(entry.id),
        "name": entry.name,
        "para": entry.para,
        "totalPara": entry.total_para,
        "ramadanDay": entry.ramadan_day,
        "date": entry.date.isoformat(),
        "createdAt": entry.created_at.isoformat(),
    }


def _serialize_summary(summary: ReadingSummary) -> dict[str, object]:
    # totalParticipants counts submissions, not distinct names.
    return {
        "totalParticipants": summary.total_submissions,
        "totalParaRead": summary.total_para_read,
        "uniqueParticipants": summary.unique_participants,
        "averageParaPerDay": summary.average_para_per_submission,
    }


def _serialize_progress(progress: ParticipantProgress) -> dict[str, object]:
    return {
        "name": progress.name,
        "totalPara": progress.total_para,
        "remainingPara": progress.remaining_para,
        "goalPara": progress.goal_para,
    }
