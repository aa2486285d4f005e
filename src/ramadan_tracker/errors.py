"""Error types surfaced by the reading tracker."""


class TrackerError(Exception):
    """Base error with a stable code and an HTTP status mapping."""

    code = "tracker_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(TrackerError):
    """Submission fields are missing or out of range."""

    code = "invalid_input"
    status_code = 400


class DuplicateSubmissionError(TrackerError):
    """The participant already has a reading for this calendar day."""

    code = "already_submitted_today"
    status_code = 409

    def __init__(self, message: str = "You have already submitted for today") -> None:
        super().__init__(message)


class ReadingNotFoundError(TrackerError):
    """No reading exists with the requested id."""

    code = "not_found"
    status_code = 404

    def __init__(self, message: str = "Reading not found") -> None:
        super().__init__(message)


class StorageUnavailableError(TrackerError):
    """The persistence layer failed to complete an operation."""

    code = "storage_unavailable"
    status_code = 503


class ConfigurationMissingError(TrackerError):
    """Required configuration is absent or unparsable at startup."""

    code = "configuration_missing"


class ParticipantNotFoundError(TrackerError):
    """No participant exists with the requested name."""

    code = "not_found"
    status_code = 404

    def __init__(self, message: str = "Participant not found") -> None:
        super().__init__(message)
