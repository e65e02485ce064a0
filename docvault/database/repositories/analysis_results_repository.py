from psycopg.rows import dict_row

from docvault.database.connection import get_connection
from docvault.database.models import AnalysisRecord
from docvault.database.repositories.base import BaseAnalysisResultsRepository


class AnalysisResultsRepository(BaseAnalysisResultsRepository):
    """Database operations for the analysis_results table."""

    def find_latest_by_subject(self, subject_id: str) -> AnalysisRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, subject_id, file_name, paragraph_count, word_count,
                           character_count, created_at, is_error, error_message
                    FROM analysis_results
                    WHERE subject_id = %s
                    ORDER BY created_at DESC, id DESC
                    LIMIT 1
                    """,
                    (subject_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return AnalysisRecord(
            id=str(row["id"]),
            subject_id=str(row["subject_id"]),
            file_name=row["file_name"],
            paragraph_count=row["paragraph_count"],
            word_count=row["word_count"],
            character_count=row["character_count"],
            created_at=row["created_at"],
            is_error=row["is_error"],
            error_message=row["error_message"],
        )

    def insert(self, record: AnalysisRecord) -> None:
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO analysis_results
                (id, subject_id, file_name, paragraph_count, word_count,
                 character_count, created_at, is_error, error_message)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    record.id,
                    record.subject_id,
                    record.file_name,
                    record.paragraph_count,
                    record.word_count,
                    record.character_count,
                    record.created_at,
                    record.is_error,
                    record.error_message,
                ),
            )
            conn.commit()
