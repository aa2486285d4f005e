"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

import pytest

from ramadan_tracker.config import Settings
from ramadan_tracker.containers import AppContainer
from ramadan_tracker.domain.models import Participant
from ramadan_tracker.domain.readings import ReadingEntry, ReadingRecord
from ramadan_tracker.services.calendar import CalendarResolver
from ramadan_tracker.services.guard import SubmissionGuard
from ramadan_tracker.services.participants import (
    ParticipantLedger,
    ParticipantRepository,
)
from ramadan_tracker.services.readings import ReadingLog, ReadingRepository
from ramadan_tracker.services.submissions import SubmissionService

CYCLE_START = date(2025, 3, 1)


@dataclass
class FakeClock:
    """Settable clock for calendar tests."""

    current: datetime = field(default_factory=lambda: datetime(2025, 3, 5, 10, 0))

    def __call__(self) -> datetime:
        return self.current


@dataclass
class InMemoryParticipantRepository(ParticipantRepository):
    """In-memory participant repository for tests."""

    participants: dict[UUID, Participant] = field(default_factory=dict)

    def get_by_name(self, name: str) -> Participant | None:
        for participant in self.participants.values():
            if participant.name == name:
                return participant
        return None

    def create_participant(self, name: str) -> Participant:
        participant = Participant(id=uuid4(), name=name, total_para=0.0)
        self.participants[participant.id] = participant
        return participant

    def increment_total(self, participant_id: UUID, amount: float) -> Participant:
        current = self.participants[participant_id]
        updated = Participant(
            id=current.id, name=current.name, total_para=current.total_para + amount
        )
        self.participants[participant_id] = updated
        return updated


@dataclass
class InMemoryReadingRepository(ReadingRepository):
    """In-memory reading repository joined against a participant repository."""

    participants: InMemoryParticipantRepository
    readings: list[ReadingRecord] = field(default_factory=list)

    def create_reading(
        self, participant_id: UUID, para: float, ramadan_day: int, date: datetime
    ) -> ReadingRecord:
        record = ReadingRecord(
            id=uuid4(),
            participant_id=participant_id,
            para=para,
            ramadan_day=ramadan_day,
            date=date,
            created_at=date,
        )
        self.readings.append(record)
        return record

    def find_reading_between(
        self, participant_id: UUID, start: datetime, end: datetime
    ) -> ReadingRecord | None:
        for record in self.readings:
            if record.participant_id == participant_id and start <= record.date <= end:
                return record
        return None

    def list_readings(self, ramadan_day: int | None = None) -> list[ReadingEntry]:
        records = [
            record
            for record in self.readings
            if ramadan_day is None or record.ramadan_day == ramadan_day
        ]
        records.sort(key=lambda record: record.date, reverse=True)
        return [self._join(record) for record in records]

    def get_reading(self, reading_id: UUID) -> ReadingEntry | None:
        for record in self.readings:
            if record.id == reading_id:
                return self._join(record)
        return None

    def list_ramadan_days(self) -> list[int]:
        return [record.ramadan_day for record in self.readings]

    def _join(self, record: ReadingRecord) -> ReadingEntry:
        participant = self.participants.participants[record.participant_id]
        return ReadingEntry(
            id=record.id,
            name=participant.name,
            para=record.para,
            total_para=participant.total_para,
            ramadan_day=record.ramadan_day,
            date=record.date,
            created_at=record.created_at,
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        ramadan_start=CYCLE_START,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def calendar(clock: FakeClock) -> CalendarResolver:
    return CalendarResolver(start=CYCLE_START, clock=clock)


@pytest.fixture
def participant_repository() -> InMemoryParticipantRepository:
    return InMemoryParticipantRepository()


@pytest.fixture
def reading_repository(
    participant_repository: InMemoryParticipantRepository,
) -> InMemoryReadingRepository:
    return InMemoryReadingRepository(participants=participant_repository)


@pytest.fixture
def submission_service(
    calendar: CalendarResolver,
    participant_repository: InMemoryParticipantRepository,
    reading_repository: InMemoryReadingRepository,
) -> SubmissionService:
    return SubmissionService(
        calendar=calendar,
        ledger=ParticipantLedger(participant_repository),
        guard=SubmissionGuard(reading_repository),
        reading_log=ReadingLog(reading_repository),
    )


@pytest.fixture
def container(
    settings: Settings,
    calendar: CalendarResolver,
    submission_service: SubmissionService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        calendar=calendar,
        submission_service=submission_service,
        close_resources=close_resources,
    )
