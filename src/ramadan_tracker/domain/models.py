"""Domain models for the reading tracker."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Participant:
    """A named participant and their running total of paras read."""

    id: UUID
    name: str
    total_para: float
