from pathlib import Path

import pytest

from docvault.storage.blob_store import LocalBlobStore, blob_path
from docvault.storage.exceptions import BlobMissingError, ContentStoreError


class TestLocationFor:
    def test_location_depends_on_id_only(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path)
        assert store.location_for("abc-123") == str(tmp_path / "abc-123")

    def test_blob_path_joins_root_and_id(self, tmp_path: Path) -> None:
        assert blob_path(tmp_path, "x") == tmp_path / "x"


class TestWrite:
    def test_writes_bytes_and_creates_root(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path / "nested" / "root")
        location = store.location_for("id-1")

        store.write(location, b"payload")

        assert Path(location).read_bytes() == b"payload"

    def test_leaves_no_temp_file(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path)
        store.write(store.location_for("id-1"), b"payload")

        assert [p.name for p in tmp_path.iterdir()] == ["id-1"]

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path)
        location = store.location_for("id-1")
        store.write(location, b"first")

        with pytest.raises(ContentStoreError, match="already in use"):
            store.write(location, b"second")

        assert Path(location).read_bytes() == b"first"

    def test_writes_empty_content(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path)
        location = store.location_for("empty")
        store.write(location, b"")

        assert store.read(location) == b""


class TestRead:
    def test_returns_written_bytes(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path)
        location = store.location_for("id-1")
        store.write(location, b"\x00\x01binary")

        assert store.read(location) == b"\x00\x01binary"

    def test_raises_blob_missing(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path)

        with pytest.raises(BlobMissingError, match="not found on disk"):
            store.read(store.location_for("missing"))
