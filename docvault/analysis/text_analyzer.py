import re

from docvault.analysis.models import TextStatistics
from docvault.storage.content_types import file_extension

WORD_PATTERN = re.compile(r"\b\w+\b")
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\s*\n")

TEXT_CONTENT_TYPES = frozenset({"application/json", "application/xml"})
TEXT_EXTENSIONS = frozenset(
    {".txt", ".csv", ".json", ".xml", ".md", ".html", ".htm", ".css", ".js", ".ts", ".log"}
)


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def count_code_units(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text.encode("utf-16-le")) // 2


def analyze_text(text: str) -> TextStatistics:
    """Count paragraphs, words and characters in a text.

    Words are maximal runs of word characters (letters, digits, underscore).
    Paragraphs are separated by a blank line, i.e. a newline followed by
    optional whitespace and another newline, after line endings are
    normalized to ``\\n``. Empty text yields zero for all three counts.
    """
    if not text:
        return TextStatistics()

    word_count = len(WORD_PATTERN.findall(text))
    paragraph_breaks = PARAGRAPH_BREAK_PATTERN.findall(normalize_line_endings(text))

    return TextStatistics(
        paragraph_count=len(paragraph_breaks) + 1,
        word_count=word_count,
        character_count=count_code_units(text),
    )


def is_text_analyzable(content_type: str, file_name: str) -> bool:
    """Decide whether a file can be analyzed, by content type then extension."""
    content_type = content_type.strip().lower()
    if content_type.startswith("text/") or content_type in TEXT_CONTENT_TYPES:
        return True
    return file_extension(file_name) in TEXT_EXTENSIONS
