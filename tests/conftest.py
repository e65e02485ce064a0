from pathlib import Path

import pytest

from docvault.analysis.analyzer import FileAnalyzer
from docvault.analysis.local_client_adapter import LocalFileStoreClient
from docvault.database.repositories.in_memory import (
    InMemoryAnalysisResultsRepository,
    InMemoryStoredFilesRepository,
)
from docvault.storage.blob_store import LocalBlobStore
from docvault.storage.content_store import ContentStore


@pytest.fixture()
def blob_store(tmp_path: Path) -> LocalBlobStore:
    """Blob store rooted in a per-test temporary directory."""
    return LocalBlobStore(tmp_path / "storage")


@pytest.fixture()
def stored_files_repo() -> InMemoryStoredFilesRepository:
    return InMemoryStoredFilesRepository()


@pytest.fixture()
def results_repo() -> InMemoryAnalysisResultsRepository:
    return InMemoryAnalysisResultsRepository()


@pytest.fixture()
def content_store(
    stored_files_repo: InMemoryStoredFilesRepository,
    blob_store: LocalBlobStore,
) -> ContentStore:
    return ContentStore(repo=stored_files_repo, blob_store=blob_store)


@pytest.fixture()
def file_analyzer(
    results_repo: InMemoryAnalysisResultsRepository,
    content_store: ContentStore,
) -> FileAnalyzer:
    """Analyzer wired to an in-process content store."""
    return FileAnalyzer(
        results_repo=results_repo,
        file_store_client=LocalFileStoreClient(content_store),
    )
