import uuid
from datetime import datetime, timezone

from docvault.config.settings import Settings
from docvault.database.models import StoredFileRecord
from docvault.database.repositories.base import BaseStoredFilesRepository
from docvault.database.repositories.stored_files_repository import StoredFilesRepository
from docvault.logging.logger import Log
from docvault.storage.blob_store import LocalBlobStore
from docvault.storage.content_types import content_type_for
from docvault.storage.exceptions import (
    ContentStoreError,
    FingerprintConflictError,
    StoredFileNotFoundError,
)
from docvault.storage.fingerprint import DEFAULT_ALGORITHM, compute_fingerprint
from docvault.storage.models import FileMetadata, RetrievedFile, StoreResult


def parse_file_id(value: str) -> str:
    """Return the canonical form of a file id.

    Raises:
        StoredFileNotFoundError: if the value is not a UUID, since no such file
            can exist.
    """
    try:
        return str(uuid.UUID(str(value)))
    except ValueError as exc:
        raise StoredFileNotFoundError(f"File with ID {value} not found") from exc


class ContentStore:
    """Content-addressable file store with exact-bytes deduplication.

    store:    fingerprint -> catalog lookup -> (hit) existing id
                                            -> (miss) write blob -> insert row
    retrieve: catalog lookup -> read blob -> content type from extension
    """

    def __init__(
        self,
        repo: BaseStoredFilesRepository,
        blob_store: LocalBlobStore,
        fingerprint_algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        self._repo = repo
        self._blob_store = blob_store
        self._fingerprint_algorithm = fingerprint_algorithm

    def store(self, content: bytes, file_name: str) -> StoreResult:
        """Persist bytes once per distinct content.

        Identical bytes uploaded under any name map to the first id issued for
        them. A lost insert race on the fingerprint index resolves to the
        winning row; the blob written by the loser stays unreferenced.
        """
        fingerprint = compute_fingerprint(content, self._fingerprint_algorithm)

        existing = self._repo.find_by_fingerprint(fingerprint)
        if existing is not None:
            Log.info(f"File with hash {fingerprint} already exists with ID {existing.id}")
            return StoreResult(id=existing.id, file_name=existing.file_name, is_new=False)

        file_id = str(uuid.uuid4())
        location = self._blob_store.location_for(file_id)
        self._blob_store.write(location, content)

        record = StoredFileRecord(
            id=file_id,
            file_name=file_name,
            fingerprint=fingerprint,
            location=location,
            created_at=datetime.now(timezone.utc),
        )
        try:
            self._repo.insert(record)
        except FingerprintConflictError:
            return self._resolve_conflict(fingerprint, file_id)

        Log.info(f"New file stored with ID {file_id} ({len(content)} bytes)")
        return StoreResult(id=file_id, file_name=file_name, is_new=True)

    def retrieve(self, file_id: str) -> RetrievedFile:
        """Return stored bytes with their original name and derived content type.

        Raises:
            StoredFileNotFoundError: if the id is unknown.
            BlobMissingError: if the catalog row exists but the bytes do not.
        """
        record = self._find(file_id)
        try:
            content = self._blob_store.read(record.location)
        except StoredFileNotFoundError:
            Log.warning(f"File {record.location} for ID {record.id} not found on disk")
            raise

        Log.info(
            f"Retrieved file {record.file_name} with ID {record.id}, "
            f"size: {len(content)} bytes"
        )
        return RetrievedFile(
            content=content,
            file_name=record.file_name,
            content_type=content_type_for(record.file_name),
        )

    def get_metadata(self, file_id: str) -> FileMetadata:
        """Return name and content type without touching the blob store.

        Raises:
            StoredFileNotFoundError: if the id is unknown.
        """
        record = self._find(file_id)
        return FileMetadata(
            id=record.id,
            file_name=record.file_name,
            content_type=content_type_for(record.file_name),
        )

    def _find(self, file_id: str) -> StoredFileRecord:
        canonical_id = parse_file_id(file_id)
        record = self._repo.find_by_id(canonical_id)
        if record is None:
            Log.warning(f"File with ID {canonical_id} not found in database")
            raise StoredFileNotFoundError(f"File with ID {canonical_id} not found")
        return record

    def _resolve_conflict(self, fingerprint: str, orphan_id: str) -> StoreResult:
        winner = self._repo.find_by_fingerprint(fingerprint)
        if winner is None:
            raise ContentStoreError(
                f"Fingerprint {fingerprint} conflicted but no stored file holds it"
            )
        Log.warning(
            f"Concurrent upload of hash {fingerprint}: kept ID {winner.id}, "
            f"blob for ID {orphan_id} left unreferenced"
        )
        return StoreResult(id=winner.id, file_name=winner.file_name, is_new=False)


def build_content_store(settings: Settings) -> ContentStore:
    """Build a ContentStore backed by PostgreSQL and the local filesystem."""
    return ContentStore(
        repo=StoredFilesRepository(),
        blob_store=LocalBlobStore(settings.storage_path),
        fingerprint_algorithm=settings.fingerprint_algorithm,
    )
