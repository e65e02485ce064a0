from typing import Any

from psycopg.errors import UniqueViolation
from psycopg.rows import dict_row

from docvault.database.connection import get_connection
from docvault.database.models import StoredFileRecord
from docvault.database.repositories.base import BaseStoredFilesRepository
from docvault.storage.exceptions import FingerprintConflictError


def _to_record(row: dict[str, Any]) -> StoredFileRecord:
    return StoredFileRecord(
        id=str(row["id"]),
        file_name=row["file_name"],
        fingerprint=row["fingerprint"],
        location=row["location"],
        created_at=row["created_at"],
    )


class StoredFilesRepository(BaseStoredFilesRepository):
    """Database operations for the stored_files table."""

    def find_by_fingerprint(self, fingerprint: str) -> StoredFileRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, file_name, fingerprint, location, created_at
                    FROM stored_files
                    WHERE fingerprint = %s
                    """,
                    (fingerprint,),
                )
                row = cur.fetchone()

        return None if row is None else _to_record(row)

    def find_by_id(self, file_id: str) -> StoredFileRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, file_name, fingerprint, location, created_at
                    FROM stored_files
                    WHERE id = %s
                    """,
                    (file_id,),
                )
                row = cur.fetchone()

        return None if row is None else _to_record(row)

    def insert(self, record: StoredFileRecord) -> None:
        """Insert a catalog row.

        Raises:
            FingerprintConflictError: if the unique fingerprint index rejects the row.
        """
        with get_connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO stored_files
                        (id, file_name, fingerprint, location, created_at)
                        VALUES (%s, %s, %s, %s, %s)
                        """,
                        (
                            record.id,
                            record.file_name,
                            record.fingerprint,
                            record.location,
                            record.created_at,
                        ),
                    )
                conn.commit()
            except UniqueViolation as exc:
                conn.rollback()
                raise FingerprintConflictError(
                    f"Fingerprint {record.fingerprint} already stored"
                ) from exc
