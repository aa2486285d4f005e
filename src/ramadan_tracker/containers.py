"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ramadan_tracker.adapters.supabase_connection import SupabaseConnection
from ramadan_tracker.adapters.supabase_participant_repository import (
    SupabaseParticipantRepository,
)
from ramadan_tracker.adapters.supabase_reading_repository import (
    SupabaseReadingRepository,
)
from ramadan_tracker.config import Settings, load_settings
from ramadan_tracker.services.calendar import CalendarResolver
from ramadan_tracker.services.guard import SubmissionGuard
from ramadan_tracker.services.participants import ParticipantLedger
from ramadan_tracker.services.readings import ReadingLog
from ramadan_tracker.services.submissions import SubmissionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calendar: CalendarResolver
    submission_service: SubmissionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Settings are resolved first so a missing cycle-start date stops startup
    before any request is served. The Supabase client connects lazily.
    """
    resolved_settings = settings or load_settings()
    connection = SupabaseConnection(
        url=resolved_settings.supabase_url,
        service_key=resolved_settings.supabase_service_key,
    )
    participant_repository = SupabaseParticipantRepository(
        connection, table_name=resolved_settings.participants_table
    )
    reading_repository = SupabaseReadingRepository(
        connection,
        table_name=resolved_settings.readings_table,
        participants_table=resolved_settings.participants_table,
    )
    calendar = CalendarResolver(
        start=resolved_settings.ramadan_start,
        cycle_length=resolved_settings.cycle_length,
    )
    submission_service = SubmissionService(
        calendar=calendar,
        ledger=ParticipantLedger(participant_repository),
        guard=SubmissionGuard(reading_repository),
        reading_log=ReadingLog(reading_repository),
    )

    async def close_resources() -> None:
        connection.reset()

    return AppContainer(
        settings=resolved_settings,
        calendar=calendar,
        submission_service=submission_service,
        close_resources=close_resources,
    )
