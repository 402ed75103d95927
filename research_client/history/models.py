from dataclasses import dataclass, field
from datetime import datetime

from research_client.parsing.models import ProductAnalysis


@dataclass(frozen=True)
class HistoryEntry:
    """A saved research result (row of the research_results table)."""

    id: str
    title: str
    data: list[ProductAnalysis] = field(default_factory=list)
    created_at: datetime | None = None
