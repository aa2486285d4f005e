"""Supabase-backed participant repository."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from ramadan_tracker.adapters.supabase_connection import (
    UniqueViolationError,
    execute_query,
)
from ramadan_tracker.domain.models import Participant
from ramadan_tracker.errors import StorageUnavailableError
from ramadan_tracker.services.participants import ParticipantRepository

_COLUMNS = "id, name, total_para"


@dataclass
class SupabaseParticipantRepository(ParticipantRepository):
    """Supabase implementation for participant persistence."""

    client: Any
    table_name: str = "participants"

    def get_by_name(self, name: str) -> Participant | None:
        """Return the participant with exactly this name, if present."""
        response = execute_query(
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("name", name)
            .limit(1),
            "look up participant",
        )
        if response.data:
            return _parse_participant(response.data[0])
        return None

    def create_participant(self, name: str) -> Participant:
        """Insert a participant, returning the existing row on a name clash."""
        try:
            response = execute_query(
                self.client.table(self.table_name).insert(
                    {"name": name, "total_para": 0}
                ),
                "create participant",
            )
        except UniqueViolationError:
            existing = self.get_by_name(name)
            if existing is None:
                raise
            return existing
        if not response.data:
            raise StorageUnavailableError("Failed to create participant in Supabase")
        return _parse_participant(response.data[0])

    def increment_total(self, participant_id: UUID, amount: float) -> Participant:
        """Add ``amount`` to the stored total.

        Read and write are two requests; the total is the ledger's own
        column and only the submission path writes it.
        """
        current = execute_query(
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("id", str(participant_id))
            .limit(1),
            "load participant total",
        )
        if not current.data:
            raise StorageUnavailableError(f"Participant {participant_id} not found")
        participant = _parse_participant(current.data[0])
        new_total = participant.total_para + amount
        response = execute_query(
            self.client.table(self.table_name)
            .update({"total_para": new_total})
            .eq("id", str(participant_id)),
            "update participant total",
        )
        if response.data:
            return _parse_participant(response.data[0])
        return Participant(
            id=participant.id, name=participant.name, total_para=new_total
        )


def _parse_participant(row: dict[str, object]) -> Participant:
    return Participant(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        total_para=float(row.get("total_para") or 0.0),
    )
