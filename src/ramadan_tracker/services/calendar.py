"""Cycle calendar: maps the server clock onto a day of the reading cycle."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime, time

DEFAULT_CYCLE_LENGTH = 30


def start_of_day(moment: datetime) -> datetime:
    """Return midnight of the moment's calendar day."""
    return datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)


def end_of_day(moment: datetime) -> datetime:
    """Return the last representable instant of the moment's calendar day."""
    return datetime.combine(moment.date(), time.max, tzinfo=moment.tzinfo)


@dataclass
class CalendarResolver:
    """Derives the cycle day index from a configured start date.

    Both dates are reduced to their calendar day before subtracting, so the
    time of day never shifts the result. Dates outside the cycle wrap back
    into ``[1, cycle_length]``; after wraparound day 1 no longer means the
    first real day of the cycle.
    """

    start: date
    cycle_length: int = DEFAULT_CYCLE_LENGTH
    clock: Callable[[], datetime] = field(default=datetime.now)

    def __post_init__(self) -> None:
        if self.cycle_length < 1:
            raise ValueError("cycle_length must be positive")

    def now(self) -> datetime:
        """Return the current server time."""
        return self.clock()

    def resolve_day_index(self, moment: date | datetime | None = None) -> int:
        """Return the cycle day for ``moment`` (defaults to now)."""
        if moment is None:
            moment = self.now()
        day = moment.date() if isinstance(moment, datetime) else moment
        index = (day - self.start).days + 1
        if index < 1 or index > self.cycle_length:
            index = ((index - 1) % self.cycle_length) + 1
        return index
