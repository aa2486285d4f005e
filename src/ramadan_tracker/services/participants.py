"""Participant ledger: identities and running totals."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from ramadan_tracker.domain.models import Participant
from ramadan_tracker.domain.stats import ParticipantProgress

logger = logging.getLogger(__name__)


class ParticipantRepository(Protocol):
    """Persistence interface for participants."""

    def get_by_name(self, name: str) -> Participant | None:
        """Return the participant with exactly this name, if present."""

    def create_participant(self, name: str) -> Participant:
        """Create a participant with a zero total and return it."""

    def increment_total(self, participant_id: UUID, amount: float) -> Participant:
        """Add ``amount`` to the participant's total and return the new row."""


@dataclass
class ParticipantLedger:
    """Resolves participants by name and maintains their running totals."""

    repository: ParticipantRepository

    def find(self, name: str) -> Participant | None:
        """Return the participant for a trimmed name without creating one."""
        return self.repository.get_by_name(name.strip())

    def resolve_or_create(self, name: str) -> Participant:
        """Return the participant for ``name``, creating it on first use.

        Matching is exact and case-sensitive after trimming.
        """
        trimmed = name.strip()
        existing = self.repository.get_by_name(trimmed)
        if existing:
            return existing
        created = self.repository.create_participant(trimmed)
        logger.info("Created participant %s", created.id)
        return created

    def add_to_total(self, participant: Participant, amount: float) -> float:
        """Add an accepted reading to the participant's total."""
        updated = self.repository.increment_total(participant.id, amount)
        return updated.total_para

    def progress(self, name: str, goal_para: float) -> ParticipantProgress | None:
        """Return progress toward ``goal_para`` for a known participant."""
        participant = self.find(name)
        if participant is None:
            return None
        return ParticipantProgress(
            name=participant.name,
            total_para=participant.total_para,
            remaining_para=max(0.0, goal_para - participant.total_para),
            goal_para=goal_para,
        )
