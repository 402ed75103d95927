from abc import ABC, abstractmethod
from collections.abc import Sequence

from research_client.history.models import HistoryEntry
from research_client.parsing.models import ProductAnalysis


class BaseHistoryRepository(ABC):
    """Contract for research history persistence."""

    @abstractmethod
    def list_results(self) -> list[HistoryEntry]:
        """Return saved entries, newest first.

        Raises:
            HistoryError: if the store cannot be read.
        """

    @abstractmethod
    def delete_result(self, entry_id: str) -> None:
        """Delete one entry.

        Raises:
            HistoryError: if the entry could not be deleted.
        """

    @abstractmethod
    def save_or_update(
        self,
        existing_id: str | None,
        title: str,
        records: Sequence[ProductAnalysis],
    ) -> str:
        """Update ``existing_id`` when given, insert otherwise. Returns the entry id."""
