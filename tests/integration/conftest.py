import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from research_client.config.settings import Settings
from research_client.database.connection import close_pool, get_connection, init_pool

_SCHEMA_PATH = Path(__file__).resolve().parents[2] / "sql" / "research_results.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "research_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(_SCHEMA_PATH.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    created_ids: list[str] = []
    yield created_ids
    if not created_ids:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for entry_id in created_ids:
                cur.execute("DELETE FROM research_results WHERE id = %s", (entry_id,))
        conn.commit()
