class ContentStoreError(Exception):
    """Base exception for all content store errors."""


class StoredFileNotFoundError(ContentStoreError):
    """Raised when a file identifier is unknown to the catalog."""


class BlobMissingError(StoredFileNotFoundError):
    """Raised when a catalog row exists but its bytes are gone from storage."""


class FingerprintConflictError(ContentStoreError):
    """Raised when a catalog insert loses the unique fingerprint race."""


class UnsupportedFingerprintAlgorithmError(ContentStoreError):
    """Raised when the configured digest algorithm is not available."""
