class AnalysisError(Exception):
    """Raised when analysis fails in a way that is not cached."""


class SubjectNotFoundError(AnalysisError):
    """Raised when the content store does not know the requested file."""


class FileStoreUnavailableError(AnalysisError):
    """Raised when the content store cannot be reached or times out."""


class FileStoreResponseError(AnalysisError):
    """Raised when the content store answers with an unusable response."""


class AnalysisDecodeError(AnalysisError):
    """Raised when eligible file bytes are not valid UTF-8 text."""
