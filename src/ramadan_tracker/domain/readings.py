"""Domain models for the reading log."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ReadingRecord:
    """An accepted submission as stored in the reading log."""

    id: UUID
    participant_id: UUID
    para: float
    ramadan_day: int
    date: datetime
    created_at: datetime


@dataclass(frozen=True)
class ReadingEntry:
    """Reading joined with its participant's name and current total."""

    id: UUID
    name: str
    para: float
    total_para: float
    ramadan_day: int
    date: datetime
    created_at: datetime


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of an accepted submission."""

    reading_id: UUID
    name: str
    para: float
    total_para: float
    ramadan_day: int
