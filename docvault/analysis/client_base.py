from abc import ABC, abstractmethod

from docvault.analysis.models import SubjectMetadata


class BaseFileStoreClient(ABC):
    """Contract for reaching the content store from the analysis side."""

    @abstractmethod
    def fetch_metadata(self, file_id: str) -> SubjectMetadata:
        """Return file name and content type for a stored file.

        Raises:
            SubjectNotFoundError: if the file is unknown.
            FileStoreUnavailableError: if the store cannot be reached.
        """

    @abstractmethod
    def fetch_bytes(self, file_id: str) -> bytes:
        """Return the full byte content of a stored file.

        Raises:
            SubjectNotFoundError: if the file is unknown.
            FileStoreUnavailableError: if the store cannot be reached.
        """

    def close(self) -> None:
        """Release held connections. Clients without any keep the no-op."""
