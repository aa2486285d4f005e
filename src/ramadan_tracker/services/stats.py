"""Summary statistics over the reading log."""

from ramadan_tracker.domain.readings import ReadingEntry
from ramadan_tracker.domain.stats import ReadingSummary


def summarize(entries: list[ReadingEntry]) -> ReadingSummary:
    """Return counts, sums and the per-submission average for ``entries``."""
    total_submissions = len(entries)
    total_para = sum((entry.para for entry in entries), 0.0)
    unique_participants = len({entry.name for entry in entries})
    average = round(total_para / total_submissions, 2) if total_submissions else 0.0
    return ReadingSummary(
        total_submissions=total_submissions,
        total_para_read=total_para,
        unique_participants=unique_participants,
        average_para_per_submission=average,
    )
