import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from docvault.config.settings import Settings
from docvault.database.connection import close_pool, get_connection, init_pool
from docvault.database.schema import apply_schema


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "docvault_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            apply_schema(conn)
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(
    integration_pool: None,
) -> Generator[list[tuple[str, str]], None, None]:
    """Collect (table, id) pairs created by a test and delete them afterwards."""
    cleanup: list[tuple[str, str]] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for table, row_id in cleanup:
                if table == "analysis_results":
                    cur.execute(
                        "DELETE FROM analysis_results WHERE subject_id = %s", (row_id,)
                    )
                elif table == "stored_files":
                    cur.execute("DELETE FROM stored_files WHERE id = %s", (row_id,))
        conn.commit()
