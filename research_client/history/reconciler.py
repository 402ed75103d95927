"""Matches a result set to a saved history entry by its companies."""

from collections.abc import Iterable, Sequence

from research_client.history.models import HistoryEntry
from research_client.parsing.models import ProductAnalysis


def company_key(records: Iterable[ProductAnalysis]) -> list[str]:
    """Sorted company names, case-sensitive, duplicates kept."""
    return sorted(record.company_name for record in records)


def find_existing(
    records: Sequence[ProductAnalysis],
    entries: Iterable[HistoryEntry],
) -> str | None:
    """Return the id of the first entry covering exactly the same companies."""
    key = company_key(records)
    for entry in entries:
        if company_key(entry.data) == key:
            return entry.id
    return None
