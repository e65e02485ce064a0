from dataclasses import dataclass


@dataclass(frozen=True)
class SubjectMetadata:
    """What the content store reports about a file before its bytes are fetched."""

    file_name: str
    content_type: str


@dataclass(frozen=True)
class TextStatistics:
    """Output of the text analysis step."""

    paragraph_count: int = 0
    word_count: int = 0
    character_count: int = 0
