from collections.abc import Sequence
from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from research_client.database.connection import get_connection
from research_client.history.exceptions import HistoryEntryNotFoundError, HistoryError
from research_client.history.models import HistoryEntry
from research_client.history.repository_base import BaseHistoryRepository
from research_client.parsing.models import ProductAnalysis


class ResearchResultsRepository(BaseHistoryRepository):
    """Database operations for the research_results table."""

    def list_results(self) -> list[HistoryEntry]:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        """
                        SELECT id, title, data, created_at
                        FROM research_results
                        ORDER BY created_at DESC
                        """
                    )
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise HistoryError(f"Failed to load research results: {exc}") from exc

        return [self._to_entry(row) for row in rows]

    def delete_result(self, entry_id: str) -> None:
        try:
            with get_connection() as conn:
                cur = conn.execute(
                    "DELETE FROM research_results WHERE id = %s",
                    (entry_id,),
                )
                deleted = cur.rowcount
                conn.commit()
        except psycopg.Error as exc:
            raise HistoryError(f"Failed to delete research result {entry_id}: {exc}") from exc

        if deleted == 0:
            raise HistoryEntryNotFoundError(f"Research result {entry_id} not found")

    def save_or_update(
        self,
        existing_id: str | None,
        title: str,
        records: Sequence[ProductAnalysis],
    ) -> str:
        data = Jsonb([record.to_dict() for record in records])
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    if existing_id is not None:
                        cur.execute(
                            """
                            UPDATE research_results
                            SET title = %s, data = %s
                            WHERE id = %s
                            RETURNING id
                            """,
                            (title, data, existing_id),
                        )
                    else:
                        cur.execute(
                            """
                            INSERT INTO research_results (title, data)
                            VALUES (%s, %s)
                            RETURNING id
                            """,
                            (title, data),
                        )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise HistoryError(f"Failed to save research result: {exc}") from exc

        if row is None:
            raise HistoryEntryNotFoundError(f"Research result {existing_id} not found")
        return str(row[0])

    @staticmethod
    def _to_entry(row: dict[str, Any]) -> HistoryEntry:
        raw_data = row["data"] or []
        return HistoryEntry(
            id=str(row["id"]),
            title=row["title"],
            data=[ProductAnalysis.from_dict(item) for item in raw_data if isinstance(item, dict)],
            created_at=row["created_at"],
        )
