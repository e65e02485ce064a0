from abc import ABC, abstractmethod

from docvault.database.models import AnalysisRecord, StoredFileRecord


class BaseStoredFilesRepository(ABC):
    """Contract for the stored_files catalog. Insert-only."""

    @abstractmethod
    def find_by_fingerprint(self, fingerprint: str) -> StoredFileRecord | None:
        """Return the single row holding this fingerprint, if any."""

    @abstractmethod
    def find_by_id(self, file_id: str) -> StoredFileRecord | None:
        """Return the row with this identifier, if any."""

    @abstractmethod
    def insert(self, record: StoredFileRecord) -> None:
        """Insert a new catalog row.

        Raises:
            FingerprintConflictError: if another row already holds the fingerprint.
        """


class BaseAnalysisResultsRepository(ABC):
    """Contract for the analysis_results catalog. Insert-only."""

    @abstractmethod
    def find_latest_by_subject(self, subject_id: str) -> AnalysisRecord | None:
        """Return the most recent result for a subject.

        Several rows may exist for the same subject; the newest one wins.
        """

    @abstractmethod
    def insert(self, record: AnalysisRecord) -> None:
        """Insert a new result row."""
