from docvault.analysis.analyzer import FileAnalyzer, build_file_analyzer
from docvault.analysis.client_base import BaseFileStoreClient
from docvault.analysis.factory import FileStoreClientFactory
from docvault.analysis.text_analyzer import analyze_text, is_text_analyzable

__all__ = [
    "BaseFileStoreClient",
    "FileAnalyzer",
    "FileStoreClientFactory",
    "analyze_text",
    "build_file_analyzer",
    "is_text_analyzable",
]
