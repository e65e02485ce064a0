import uuid
from datetime import datetime, timedelta, timezone

import pytest

from docvault.database.models import AnalysisRecord
from docvault.database.repositories.analysis_results_repository import (
    AnalysisResultsRepository,
)


def _record(subject_id: str, created_at: datetime, word_count: int) -> AnalysisRecord:
    return AnalysisRecord(
        id=str(uuid.uuid4()),
        subject_id=subject_id,
        file_name="notes.txt",
        created_at=created_at,
        paragraph_count=1,
        word_count=word_count,
        character_count=word_count * 5,
    )


@pytest.mark.integration
class TestAnalysisResultsRepositoryPg:
    def test_duplicate_subject_rows_are_allowed(
        self, integration_cleanup: list[tuple[str, str]]
    ) -> None:
        repo = AnalysisResultsRepository()
        subject_id = str(uuid.uuid4())
        integration_cleanup.append(("analysis_results", subject_id))
        now = datetime.now(timezone.utc)

        repo.insert(_record(subject_id, now, word_count=1))
        repo.insert(_record(subject_id, now + timedelta(seconds=1), word_count=2))

        latest = repo.find_latest_by_subject(subject_id)
        assert latest is not None
        assert latest.word_count == 2
        assert latest.subject_id == subject_id

    def test_persists_error_rows(self, integration_cleanup: list[tuple[str, str]]) -> None:
        repo = AnalysisResultsRepository()
        subject_id = str(uuid.uuid4())
        integration_cleanup.append(("analysis_results", subject_id))
        repo.insert(
            AnalysisRecord(
                id=str(uuid.uuid4()),
                subject_id=subject_id,
                file_name="photo.png",
                created_at=datetime.now(timezone.utc),
                is_error=True,
                error_message="File is not a text file and cannot be analyzed",
            )
        )

        latest = repo.find_latest_by_subject(subject_id)
        assert latest is not None
        assert latest.is_error is True
        assert latest.word_count == 0

    def test_unknown_subject_returns_none(self, integration_pool: None) -> None:
        assert AnalysisResultsRepository().find_latest_by_subject(str(uuid.uuid4())) is None
