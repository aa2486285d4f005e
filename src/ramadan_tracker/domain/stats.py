"""Domain models for reading statistics."""

from dataclasses import dataclass

from ramadan_tracker.domain.readings import ReadingEntry


@dataclass(frozen=True)
class ReadingSummary:
    """Aggregate figures over a set of readings."""

    total_submissions: int
    total_para_read: float
    unique_participants: int
    average_para_per_submission: float


@dataclass(frozen=True)
class ReadingReport:
    """Filtered readings together with their summary."""

    entries: list[ReadingEntry]
    summary: ReadingSummary


@dataclass(frozen=True)
class ParticipantProgress:
    """Progress of one participant toward the cycle goal."""

    name: str
    total_para: float
    remaining_para: float
    goal_para: float
