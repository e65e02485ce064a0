from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StoredFileRecord:
    """Represents a row from the stored_files table."""

    id: str
    file_name: str
    fingerprint: str
    location: str
    created_at: datetime


@dataclass(frozen=True)
class AnalysisRecord:
    """Represents a row from the analysis_results table.

    Counts are zero when ``is_error`` is set.
    """

    id: str
    subject_id: str
    file_name: str
    created_at: datetime
    paragraph_count: int = 0
    word_count: int = 0
    character_count: int = 0
    is_error: bool = False
    error_message: str | None = None
