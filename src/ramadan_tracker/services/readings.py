"""Reading log: the append-only record of accepted submissions."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from ramadan_tracker.domain.models import Participant
from ramadan_tracker.domain.readings import ReadingEntry, ReadingRecord
from ramadan_tracker.errors import InvalidInputError

MIN_PARA = 0.5
MAX_PARA = 5.0


class ReadingRepository(Protocol):
    """Persistence interface for the reading log."""

    def create_reading(
        self, participant_id: UUID, para: float, ramadan_day: int, date: datetime
    ) -> ReadingRecord:
        """Insert a reading and return the stored row."""

    def find_reading_between(
        self, participant_id: UUID, start: datetime, end: datetime
    ) -> ReadingRecord | None:
        """Return any reading by the participant dated within ``[start, end]``."""

    def list_readings(self, ramadan_day: int | None = None) -> list[ReadingEntry]:
        """Return joined readings, newest first, optionally for one day index."""

    def get_reading(self, reading_id: UUID) -> ReadingEntry | None:
        """Return a joined reading by id."""

    def list_ramadan_days(self) -> list[int]:
        """Return the distinct stored day indices."""


def validate_name(name: object) -> str:
    """Return the trimmed name or raise if it is missing or not text."""
    if name is not None and not isinstance(name, str):
        raise InvalidInputError("Name must be text")
    trimmed = (name or "").strip()
    if not trimmed:
        raise InvalidInputError("Please provide a name")
    return trimmed


def validate_para(para: object) -> float:
    """Return ``para`` as a float or raise if outside the accepted range."""
    if para is None:
        raise InvalidInputError("Please provide the number of paras read")
    if isinstance(para, bool) or not isinstance(para, int | float | str):
        raise InvalidInputError("Para must be a number")
    try:
        value = float(para)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("Para must be a number") from exc
    if math.isnan(value) or not MIN_PARA <= value <= MAX_PARA:
        raise InvalidInputError(
            f"Para must be between {MIN_PARA:g} and {MAX_PARA:g}, got {value:g}"
        )
    return value


@dataclass(frozen=True)
class ReadingFilter:
    """Narrows the reading log by stored day index and name substring.

    A missing key places no constraint on that dimension.
    """

    ramadan_day: int | None = None
    name_contains: str | None = None

    def apply(self, entries: list[ReadingEntry]) -> list[ReadingEntry]:
        """Return the entries matching every present constraint, order kept."""
        result = entries
        if self.ramadan_day is not None:
            result = [
                entry for entry in result if entry.ramadan_day == self.ramadan_day
            ]
        if self.name_contains:
            needle = self.name_contains.lower()
            result = [entry for entry in result if needle in entry.name.lower()]
        return result


@dataclass
class ReadingLog:
    """Single write path and filtered read path over stored readings."""

    repository: ReadingRepository

    def append(
        self,
        participant: Participant,
        para: float,
        ramadan_day: int,
        date: datetime,
    ) -> ReadingRecord:
        """Store an accepted reading.

        Callers must have cleared the submission guard for the same
        participant and day immediately before.
        """
        value = validate_para(para)
        return self.repository.create_reading(participant.id, value, ramadan_day, date)

    def query(self, reading_filter: ReadingFilter | None = None) -> list[ReadingEntry]:
        """Return readings newest first with the filter applied.

        The day index narrows the storage query; the name match runs in
        memory on the joined display name.
        """
        reading_filter = reading_filter or ReadingFilter()
        entries = self.repository.list_readings(reading_filter.ramadan_day)
        entries = sorted(entries, key=lambda entry: entry.date, reverse=True)
        return reading_filter.apply(entries)

    def get(self, reading_id: UUID) -> ReadingEntry | None:
        """Return a single joined reading."""
        return self.repository.get_reading(reading_id)

    def ramadan_days(self) -> list[int]:
        """Return the sorted distinct day indices present in the log."""
        return sorted(set(self.repository.list_ramadan_days()))
