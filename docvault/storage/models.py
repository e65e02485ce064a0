from dataclasses import dataclass


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a store call. ``is_new`` is False on a deduplication hit."""

    id: str
    file_name: str
    is_new: bool


@dataclass(frozen=True)
class FileMetadata:
    """Catalog view of a stored file, without its bytes."""

    id: str
    file_name: str
    content_type: str


@dataclass(frozen=True)
class RetrievedFile:
    """Stored bytes together with the name and type to serve them under."""

    content: bytes
    file_name: str
    content_type: str
