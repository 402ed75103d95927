from dataclasses import dataclass, field

from research_client.parsing.models import ProductAnalysis


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of one submission attempt, ready to show to the user."""

    success: bool
    message: str
    records: list[ProductAnalysis] = field(default_factory=list)
    existing_id: str | None = None


@dataclass(frozen=True)
class OperationOutcome:
    success: bool
    message: str
