"""Submission guard: at most one reading per participant per calendar day."""

from dataclasses import dataclass
from datetime import datetime

from ramadan_tracker.domain.models import Participant
from ramadan_tracker.services.calendar import end_of_day, start_of_day
from ramadan_tracker.services.readings import ReadingRepository

ALREADY_SUBMITTED_TODAY = "already_submitted_today"


@dataclass(frozen=True)
class GuardDecision:
    """Whether a submission may proceed, with the rejection reason if not."""

    allowed: bool
    reason: str | None = None


@dataclass
class SubmissionGuard:
    """Checks the reading log for an earlier reading on the same day.

    The check and the following append are separate steps. The storage
    layer's unique (participant, reading_date) constraint rejects the
    second writer when two requests race past the check.
    """

    repository: ReadingRepository

    def check(self, participant: Participant, submitted_at: datetime) -> GuardDecision:
        """Return an allow or reject decision for ``submitted_at``'s day."""
        existing = self.repository.find_reading_between(
            participant.id, start_of_day(submitted_at), end_of_day(submitted_at)
        )
        if existing:
            return GuardDecision(allowed=False, reason=ALREADY_SUBMITTED_TODAY)
        return GuardDecision(allowed=True)
