"""User-facing messages, distinguishable by failure cause."""

from research_client.submission.exceptions import (
    MalformedResponseError,
    RateLimitedError,
    SubmissionError,
)

SUCCESS_MESSAGE = "Analysis completed successfully!"
RATE_LIMITED_MESSAGE = "The service is temporarily busy. Please wait a moment and try again."
MALFORMED_MESSAGE = (
    "The response format was invalid. Our system attempted to recover what it could."
)
GENERIC_MESSAGE = "An unexpected error occurred"


def describe_failure(exc: Exception) -> str:
    if isinstance(exc, RateLimitedError):
        return RATE_LIMITED_MESSAGE
    if isinstance(exc, MalformedResponseError):
        return MALFORMED_MESSAGE
    if isinstance(exc, SubmissionError):
        return f"Error: {exc}"
    return GENERIC_MESSAGE
