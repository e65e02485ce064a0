import pytest

from docvault.storage.exceptions import UnsupportedFingerprintAlgorithmError
from docvault.storage.fingerprint import compute_fingerprint


class TestComputeFingerprint:
    def test_md5_is_default(self) -> None:
        assert compute_fingerprint(b"hello") == "5d41402abc4b2a76b9719d911017c592"

    def test_empty_content_has_fingerprint(self) -> None:
        assert compute_fingerprint(b"") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_is_128_bit_lowercase_hex(self) -> None:
        fingerprint = compute_fingerprint(b"\x00\xff" * 100)
        assert len(fingerprint) == 32
        assert fingerprint == fingerprint.lower()
        int(fingerprint, 16)

    def test_is_deterministic(self) -> None:
        assert compute_fingerprint(b"same bytes") == compute_fingerprint(b"same bytes")

    def test_differs_for_different_content(self) -> None:
        assert compute_fingerprint(b"a") != compute_fingerprint(b"b")

    def test_supports_other_algorithms(self) -> None:
        assert compute_fingerprint(b"hello", "SHA256") == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_raises_for_unknown_algorithm(self) -> None:
        with pytest.raises(UnsupportedFingerprintAlgorithmError, match="crc-zero"):
            compute_fingerprint(b"hello", "crc-zero")
