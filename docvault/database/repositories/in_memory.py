"""In-memory catalog repositories.

No database required. They enforce the same constraints as the PostgreSQL
tables (unique fingerprint, non-unique subject) so the services behave the
same against either backend. Useful for local development and tests.
"""

import threading

from docvault.database.models import AnalysisRecord, StoredFileRecord
from docvault.database.repositories.base import (
    BaseAnalysisResultsRepository,
    BaseStoredFilesRepository,
)
from docvault.storage.exceptions import FingerprintConflictError


class InMemoryStoredFilesRepository(BaseStoredFilesRepository):
    """Dict-backed stored_files catalog."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[str, StoredFileRecord] = {}
        self._by_fingerprint: dict[str, StoredFileRecord] = {}

    def find_by_fingerprint(self, fingerprint: str) -> StoredFileRecord | None:
        with self._lock:
            return self._by_fingerprint.get(fingerprint)

    def find_by_id(self, file_id: str) -> StoredFileRecord | None:
        with self._lock:
            return self._by_id.get(file_id)

    def insert(self, record: StoredFileRecord) -> None:
        with self._lock:
            if record.fingerprint in self._by_fingerprint:
                raise FingerprintConflictError(
                    f"Fingerprint {record.fingerprint} already stored"
                )
            self._by_id[record.id] = record
            self._by_fingerprint[record.fingerprint] = record

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)


class InMemoryAnalysisResultsRepository(BaseAnalysisResultsRepository):
    """List-backed analysis_results catalog."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: list[AnalysisRecord] = []

    def find_latest_by_subject(self, subject_id: str) -> AnalysisRecord | None:
        with self._lock:
            matches = [
                (position, row)
                for position, row in enumerate(self._rows)
                if row.subject_id == subject_id
            ]
        if not matches:
            return None
        # newest created_at first, later insertion breaks ties
        _, latest = max(matches, key=lambda item: (item[1].created_at, item[0]))
        return latest

    def insert(self, record: AnalysisRecord) -> None:
        with self._lock:
            self._rows.append(record)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
