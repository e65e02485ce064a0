import hashlib

from docvault.storage.exceptions import UnsupportedFingerprintAlgorithmError

DEFAULT_ALGORITHM = "md5"


def compute_fingerprint(content: bytes, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Digest the full byte content and return it as lowercase hex.

    The default is a 128-bit MD5 digest; it is a deduplication key, not a
    security boundary.

    Raises:
        UnsupportedFingerprintAlgorithmError: if hashlib does not know the algorithm.
    """
    name = algorithm.strip().lower()
    try:
        digest = hashlib.new(name)
    except ValueError as exc:
        raise UnsupportedFingerprintAlgorithmError(
            f"Unsupported fingerprint algorithm '{algorithm}'"
        ) from exc
    digest.update(content)
    return digest.hexdigest()
