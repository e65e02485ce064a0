import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TypeVar

from docvault.analysis.client_base import BaseFileStoreClient
from docvault.analysis.exceptions import (
    AnalysisDecodeError,
    AnalysisError,
    SubjectNotFoundError,
)
from docvault.analysis.factory import FileStoreClientFactory
from docvault.analysis.text_analyzer import analyze_text, is_text_analyzable
from docvault.config.settings import Settings
from docvault.database.models import AnalysisRecord
from docvault.database.repositories.analysis_results_repository import (
    AnalysisResultsRepository,
)
from docvault.database.repositories.base import BaseAnalysisResultsRepository
from docvault.logging.logger import Log
from docvault.storage.content_store import ContentStore

NOT_A_TEXT_FILE_MESSAGE = "File is not a text file and cannot be analyzed"

T = TypeVar("T")


class FileAnalyzer:
    """Returns cached text analysis for a stored file, computing it on a miss.

    Flow: cache check -> fetch metadata -> classify -> fetch bytes -> analyze.
    Ineligible files are cached as error results. Missing subjects, upstream
    outages and undecodable bytes are raised and never cached.
    """

    def __init__(
        self,
        results_repo: BaseAnalysisResultsRepository,
        file_store_client: BaseFileStoreClient,
    ) -> None:
        self._results_repo = results_repo
        self._file_store_client = file_store_client

    def get_or_compute(self, subject_id: str) -> AnalysisRecord:
        """Return the analysis for a stored file.

        Raises:
            SubjectNotFoundError: if the file is unknown to the content store.
            FileStoreUnavailableError: if the content store cannot be reached.
            AnalysisDecodeError: if an eligible file is not valid UTF-8.
        """
        subject_id = self._parse_subject_id(subject_id)
        Log.info(f"Getting analysis for file ID {subject_id}")

        # Step 1: Cache check
        cached = self._results_repo.find_latest_by_subject(subject_id)
        if cached is not None:
            Log.info(f"Found cached analysis for file ID {subject_id}")
            return cached

        # Step 2: Fetch metadata
        metadata = self._fetch(self._file_store_client.fetch_metadata, subject_id)

        # Step 3: Classify
        if not is_text_analyzable(metadata.content_type, metadata.file_name):
            Log.warning(
                f"File {metadata.file_name} ({metadata.content_type}) "
                f"with ID {subject_id} is not a text file"
            )
            return self._persist(
                AnalysisRecord(
                    id=str(uuid.uuid4()),
                    subject_id=subject_id,
                    file_name=metadata.file_name,
                    created_at=datetime.now(timezone.utc),
                    is_error=True,
                    error_message=NOT_A_TEXT_FILE_MESSAGE,
                )
            )

        # Step 4: Fetch bytes and decode
        content = self._fetch(self._file_store_client.fetch_bytes, subject_id)
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            Log.error(f"File with ID {subject_id} is not valid UTF-8: {exc}")
            raise AnalysisDecodeError(
                f"File with ID {subject_id} is not valid UTF-8 text"
            ) from exc

        # Step 5: Analyze and persist
        stats = analyze_text(text)
        Log.info(
            f"Analyzed file ID {subject_id}: {stats.paragraph_count} paragraphs, "
            f"{stats.word_count} words, {stats.character_count} characters"
        )
        return self._persist(
            AnalysisRecord(
                id=str(uuid.uuid4()),
                subject_id=subject_id,
                file_name=metadata.file_name,
                created_at=datetime.now(timezone.utc),
                paragraph_count=stats.paragraph_count,
                word_count=stats.word_count,
                character_count=stats.character_count,
            )
        )

    def close(self) -> None:
        self._file_store_client.close()

    def __enter__(self) -> "FileAnalyzer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, fetch: Callable[[str], T], subject_id: str) -> T:
        try:
            return fetch(subject_id)
        except SubjectNotFoundError as exc:
            Log.warning(f"File with ID {subject_id} not found in content store: {exc}")
            raise
        except AnalysisError as exc:
            Log.error(f"Content store request failed for file ID {subject_id}: {exc}")
            raise

    def _persist(self, record: AnalysisRecord) -> AnalysisRecord:
        self._results_repo.insert(record)
        return record

    @staticmethod
    def _parse_subject_id(subject_id: str) -> str:
        try:
            return str(uuid.UUID(str(subject_id)))
        except ValueError as exc:
            Log.warning(f"Malformed file ID {subject_id}")
            raise SubjectNotFoundError(f"File with ID {subject_id} not found") from exc


def build_file_analyzer(
    settings: Settings,
    content_store: ContentStore | None = None,
) -> FileAnalyzer:
    """Build a FileAnalyzer backed by PostgreSQL and the configured store client."""
    return FileAnalyzer(
        results_repo=AnalysisResultsRepository(),
        file_store_client=FileStoreClientFactory.create(settings, content_store),
    )
