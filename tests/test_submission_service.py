"""Tests for the submission workflow."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from ramadan_tracker.errors import (
    DuplicateSubmissionError,
    InvalidInputError,
    ReadingNotFoundError,
)
from ramadan_tracker.services.submissions import SubmissionService
from tests.conftest import (
    FakeClock,
    InMemoryParticipantRepository,
    InMemoryReadingRepository,
)


def test_submit_and_report_scenario(
    submission_service: SubmissionService,
    participant_repository: InMemoryParticipantRepository,
) -> None:
    result = submission_service.submit("Ali", 2)

    assert result.name == "Ali"
    assert result.para == 2
    assert result.total_para == 2
    assert result.ramadan_day == 5

    with pytest.raises(DuplicateSubmissionError):
        submission_service.submit("Ali", 1)
    ali = participant_repository.get_by_name("Ali")
    assert ali is not None
    assert ali.total_para == 2

    submission_service.submit("sara", 0.5)
    report = submission_service.report()

    assert report.summary.total_submissions == 2
    assert report.summary.total_para_read == 2.5
    assert report.summary.unique_participants == 2
    assert report.summary.average_para_per_submission == 1.25


@pytest.mark.parametrize("para", [0.4, 5.5])
def test_submit_rejects_out_of_range_without_writes(
    submission_service: SubmissionService,
    participant_repository: InMemoryParticipantRepository,
    reading_repository: InMemoryReadingRepository,
    para: float,
) -> None:
    with pytest.raises(InvalidInputError):
        submission_service.submit("Ali", para)

    assert participant_repository.participants == {}
    assert reading_repository.readings == []


def test_submit_rejects_missing_name(submission_service: SubmissionService) -> None:
    with pytest.raises(InvalidInputError):
        submission_service.submit("   ", 1)


def test_totals_accumulate_across_days(
    submission_service: SubmissionService, clock: FakeClock
) -> None:
    amounts = [1, 0.5, 2.5, 5]
    result = None
    for amount in amounts:
        result = submission_service.submit("Ali", amount)
        clock.current += timedelta(days=1)

    assert result is not None
    assert result.total_para == sum(amounts)
    assert result.ramadan_day == 8


def test_duplicate_rejection_uses_calendar_day(
    submission_service: SubmissionService, clock: FakeClock
) -> None:
    clock.current = datetime(2025, 3, 5, 23, 59)
    submission_service.submit("Ali", 1)

    clock.current = datetime(2025, 3, 6, 0, 0)
    result = submission_service.submit("Ali", 1)

    assert result.ramadan_day == 6
    assert result.total_para == 2


def test_report_filters_by_day_and_name(
    submission_service: SubmissionService, clock: FakeClock
) -> None:
    submission_service.submit("Samira", 1)
    submission_service.submit("Ali", 2)
    clock.current += timedelta(days=1)
    submission_service.submit("Samira", 3)

    by_day = submission_service.report(ramadan_day=5)
    by_name = submission_service.report(name_contains="sam")

    assert by_day.summary.total_submissions == 2
    assert {entry.name for entry in by_day.entries} == {"Samira", "Ali"}
    assert by_name.summary.total_para_read == 4
    assert by_name.summary.unique_participants == 1
    assert [entry.ramadan_day for entry in by_name.entries] == [6, 5]
    assert all(entry.total_para == 4 for entry in by_name.entries)


def test_get_reading_and_missing(submission_service: SubmissionService) -> None:
    result = submission_service.submit("Ali", 2)

    entry = submission_service.get_reading(result.reading_id)

    assert entry.name == "Ali"
    with pytest.raises(ReadingNotFoundError):
        submission_service.get_reading(uuid4())
