"""In-process content store client.

Talks to a ContentStore object directly instead of over HTTP. Useful for
single-process deployments, local development, and tests.
"""

from docvault.analysis.client_base import BaseFileStoreClient
from docvault.analysis.exceptions import SubjectNotFoundError
from docvault.analysis.models import SubjectMetadata
from docvault.storage.content_store import ContentStore
from docvault.storage.exceptions import StoredFileNotFoundError


class LocalFileStoreClient(BaseFileStoreClient):
    """Adapter that answers through the public ContentStore contract only."""

    def __init__(self, content_store: ContentStore) -> None:
        self._content_store = content_store

    def fetch_metadata(self, file_id: str) -> SubjectMetadata:
        try:
            metadata = self._content_store.get_metadata(file_id)
        except StoredFileNotFoundError as exc:
            raise SubjectNotFoundError(str(exc)) from exc
        return SubjectMetadata(
            file_name=metadata.file_name,
            content_type=metadata.content_type,
        )

    def fetch_bytes(self, file_id: str) -> bytes:
        try:
            return self._content_store.retrieve(file_id).content
        except StoredFileNotFoundError as exc:
            raise SubjectNotFoundError(str(exc)) from exc
