"""DDL for the two insert-only catalogs.

``stored_files.fingerprint`` carries the unique index that the content store
relies on to resolve concurrent uploads of identical bytes.
``analysis_results.subject_id`` is indexed but deliberately not unique.
"""

from typing import Any

import psycopg

STORED_FILES_DDL = """
CREATE TABLE IF NOT EXISTS stored_files (
    id uuid PRIMARY KEY,
    file_name text NOT NULL,
    fingerprint text NOT NULL,
    location text NOT NULL,
    created_at timestamptz NOT NULL DEFAULT NOW()
)
"""

STORED_FILES_FINGERPRINT_INDEX = """
CREATE UNIQUE INDEX IF NOT EXISTS ix_stored_files_fingerprint
    ON stored_files (fingerprint)
"""

ANALYSIS_RESULTS_DDL = """
CREATE TABLE IF NOT EXISTS analysis_results (
    id uuid PRIMARY KEY,
    subject_id uuid NOT NULL,
    file_name text NOT NULL,
    paragraph_count integer NOT NULL DEFAULT 0,
    word_count integer NOT NULL DEFAULT 0,
    character_count integer NOT NULL DEFAULT 0,
    created_at timestamptz NOT NULL DEFAULT NOW(),
    is_error boolean NOT NULL DEFAULT FALSE,
    error_message text
)
"""

ANALYSIS_RESULTS_SUBJECT_INDEX = """
CREATE INDEX IF NOT EXISTS ix_analysis_results_subject_id
    ON analysis_results (subject_id)
"""

STATEMENTS = (
    STORED_FILES_DDL,
    STORED_FILES_FINGERPRINT_INDEX,
    ANALYSIS_RESULTS_DDL,
    ANALYSIS_RESULTS_SUBJECT_INDEX,
)


def apply_schema(conn: psycopg.Connection[Any]) -> None:
    """Create both catalogs if they do not exist yet, then commit."""
    for statement in STATEMENTS:
        conn.execute(statement)
    conn.commit()
