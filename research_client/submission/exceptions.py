class SubmissionError(Exception):
    """Base exception for all submission-related errors."""


class InvalidInputError(SubmissionError):
    """Raised when the inputs do not satisfy the submission requirements."""


class SubmissionInProgressError(SubmissionError):
    """Raised when a submission is attempted while another is outstanding."""


class TransportError(SubmissionError):
    """Raised when the analysis service call fails (network, timeout, non-2xx)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(TransportError):
    """Raised when the analysis service answers with HTTP 429."""


class MalformedResponseError(SubmissionError):
    """Raised when no analysis could be recovered from the response body."""
