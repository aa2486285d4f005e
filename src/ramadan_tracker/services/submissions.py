"""Submission workflow and reporting over the reading log."""

import logging
from dataclasses import dataclass
from uuid import UUID

from ramadan_tracker.domain.readings import ReadingEntry, SubmissionResult
from ramadan_tracker.domain.stats import ParticipantProgress, ReadingReport
from ramadan_tracker.errors import (
    DuplicateSubmissionError,
    InvalidInputError,
    ParticipantNotFoundError,
    ReadingNotFoundError,
)
from ramadan_tracker.services.calendar import CalendarResolver
from ramadan_tracker.services.guard import SubmissionGuard
from ramadan_tracker.services.participants import ParticipantLedger
from ramadan_tracker.services.readings import (
    ReadingFilter,
    ReadingLog,
    validate_name,
    validate_para,
)
from ramadan_tracker.services.stats import summarize

logger = logging.getLogger(__name__)


@dataclass
class SubmissionService:
    """Accepts daily readings and reports on the log."""

    calendar: CalendarResolver
    ledger: ParticipantLedger
    guard: SubmissionGuard
    reading_log: ReadingLog

    def submit(self, name: object, para: object) -> SubmissionResult:
        """Record a reading for today.

        Input is validated before any lookup, and the ledger is only
        incremented once the reading has been stored.
        """
        try:
            clean_name = validate_name(name)
            value = validate_para(para)
        except InvalidInputError as exc:
            logger.warning("Rejected reading: %s", exc.message)
            raise

        submitted_at = self.calendar.now()
        ramadan_day = self.calendar.resolve_day_index(submitted_at)

        participant = self.ledger.resolve_or_create(clean_name)
        decision = self.guard.check(participant, submitted_at)
        if not decision.allowed:
            logger.info(
                "Rejected reading for participant %s: %s",
                participant.id,
                decision.reason,
            )
            raise DuplicateSubmissionError()

        reading = self.reading_log.append(participant, value, ramadan_day, submitted_at)
        total = self.ledger.add_to_total(participant, value)
        logger.info(
            "Accepted reading %s: participant=%s para=%s day=%s",
            reading.id,
            participant.id,
            value,
            ramadan_day,
        )
        return SubmissionResult(
            reading_id=reading.id,
            name=participant.name,
            para=value,
            total_para=total,
            ramadan_day=ramadan_day,
        )

    def report(
        self, ramadan_day: int | None = None, name_contains: str | None = None
    ) -> ReadingReport:
        """Return filtered readings and their summary."""
        entries = self.reading_log.query(
            ReadingFilter(ramadan_day=ramadan_day, name_contains=name_contains)
        )
        return ReadingReport(entries=entries, summary=summarize(entries))

    def get_reading(self, reading_id: UUID) -> ReadingEntry:
        """Return one reading or raise when it does not exist."""
        entry = self.reading_log.get(reading_id)
        if entry is None:
            raise ReadingNotFoundError()
        return entry

    def ramadan_days(self) -> list[int]:
        """Return the day indices that have at least one reading."""
        return self.reading_log.ramadan_days()

    def progress(self, name: str) -> ParticipantProgress:
        """Return a participant's progress toward one para per cycle day."""
        progress = self.ledger.progress(
            name, goal_para=float(self.calendar.cycle_length)
        )
        if progress is None:
            raise ParticipantNotFoundError()
        return progress
