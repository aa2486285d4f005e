"""Supabase repository for the reading log."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from ramadan_tracker.adapters.supabase_connection import (
    UniqueViolationError,
    execute_query,
)
from ramadan_tracker.domain.readings import ReadingEntry, ReadingRecord
from ramadan_tracker.errors import DuplicateSubmissionError, StorageUnavailableError
from ramadan_tracker.services.readings import ReadingRepository

_RECORD_COLUMNS = "id, participant_id, para, ramadan_day, date, created_at"


@dataclass
class SupabaseReadingRepository(ReadingRepository):
    """Supabase implementation for readings joined with participants."""

    client: Any
    table_name: str = "readings"
    participants_table: str = "participants"

    @property
    def _entry_columns(self) -> str:
        return (
            "id, para, ramadan_day, date, created_at, "
            f"{self.participants_table}(name, total_para)"
        )

    def create_reading(
        self, participant_id: UUID, para: float, ramadan_day: int, date: datetime
    ) -> ReadingRecord:
        """Insert a reading row and return it."""
        try:
            response = execute_query(
                self.client.table(self.table_name).insert(
                    {
                        "participant_id": str(participant_id),
                        "para": para,
                        "ramadan_day": ramadan_day,
                        "date": date.isoformat(),
                        "reading_date": date.date().isoformat(),
                    }
                ),
                "create reading",
            )
        except UniqueViolationError as exc:
            raise DuplicateSubmissionError() from exc
        if not response.data:
            raise StorageUnavailableError("Failed to create reading in Supabase")
        return _parse_record(response.data[0])

    def find_reading_between(
        self, participant_id: UUID, start: datetime, end: datetime
    ) -> ReadingRecord | None:
        """Return a reading by the participant dated within the range."""
        response = execute_query(
            self.client.table(self.table_name)
            .select(_RECORD_COLUMNS)
            .eq("participant_id", str(participant_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .limit(1),
            "check existing readings",
        )
        if not response.data:
            return None
        return _parse_record(response.data[0])

    def list_readings(self, ramadan_day: int | None = None) -> list[ReadingEntry]:
        """Return joined readings newest first."""
        query = self.client.table(self.table_name).select(self._entry_columns)
        if ramadan_day is not None:
            query = query.eq("ramadan_day", ramadan_day)
        response = execute_query(query.order("date", desc=True), "list readings")
        return [self._parse_entry(row) for row in response.data or []]

    def get_reading(self, reading_id: UUID) -> ReadingEntry | None:
        """Return a joined reading by id."""
        response = execute_query(
            self.client.table(self.table_name)
            .select(self._entry_columns)
            .eq("id", str(reading_id))
            .limit(1),
            "load reading",
        )
        if not response.data:
            return None
        return self._parse_entry(response.data[0])

    def list_ramadan_days(self) -> list[int]:
        """Return stored day indices, one per reading."""
        response = execute_query(
            self.client.table(self.table_name).select("ramadan_day"),
            "list reading days",
        )
        return [int(row["ramadan_day"]) for row in response.data or []]

    def _parse_entry(self, row: dict[str, object]) -> ReadingEntry:
        participant = row.get(self.participants_table) or {}
        if isinstance(participant, list):
            participant = participant[0] if participant else {}
        return ReadingEntry(
            id=UUID(str(row["id"])),
            name=str(participant.get("name") or "Unknown"),
            para=float(row.get("para", 0.0)),
            total_para=float(participant.get("total_para") or 0.0),
            ramadan_day=int(row.get("ramadan_day", 0)),
            date=datetime.fromisoformat(str(row["date"])),
            created_at=_parse_timestamp(row.get("created_at"), row["date"]),
        )


def _parse_record(row: dict[str, object]) -> ReadingRecord:
    return ReadingRecord(
        id=UUID(str(row["id"])),
        participant_id=UUID(str(row["participant_id"])),
        para=float(row.get("para", 0.0)),
        ramadan_day=int(row.get("ramadan_day", 0)),
        date=datetime.fromisoformat(str(row["date"])),
        created_at=_parse_timestamp(row.get("created_at"), row["date"]),
    )


def _parse_timestamp(raw: object, fallback: object) -> datetime:
    value = raw if isinstance(raw, str) and raw else fallback
    return datetime.fromisoformat(str(value))
