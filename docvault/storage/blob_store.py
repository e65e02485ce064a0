import os
from pathlib import Path

from docvault.storage.exceptions import BlobMissingError, ContentStoreError


def blob_path(storage_root: Path, file_id: str) -> Path:
    """Build path to blob file: {storage_root}/{file_id}"""
    return storage_root / file_id


class LocalBlobStore:
    """Append-only byte store on the local filesystem.

    Locations derive from generated file ids only, never from uploaded file
    names. Existing blobs are never overwritten or deleted.
    """

    def __init__(self, storage_root: Path | str) -> None:
        self._storage_root = Path(storage_root)

    @property
    def storage_root(self) -> Path:
        return self._storage_root

    def location_for(self, file_id: str) -> str:
        return str(blob_path(self._storage_root, file_id))

    def write(self, location: str, content: bytes) -> None:
        """Write bytes to a new location via temp file, fsync and rename.

        Raises:
            ContentStoreError: if something already occupies the location.
            OSError: on file I/O errors.
        """
        dest = Path(location)
        if dest.exists():
            raise ContentStoreError(f"Blob location already in use: {dest}")
        dest.parent.mkdir(parents=True, exist_ok=True)
        tmp = dest.with_name(dest.name + f".tmp-{os.getpid()}")

        try:
            with open(tmp, "wb") as wf:
                wf.write(content)
                wf.flush()
                os.fsync(wf.fileno())
        except Exception:
            tmp.unlink(missing_ok=True)
            raise

        os.replace(tmp, dest)

    def read(self, location: str) -> bytes:
        """Read blob bytes.

        Raises:
            BlobMissingError: if nothing exists at the location.
        """
        path = Path(location)
        if not path.is_file():
            raise BlobMissingError(f"File {path} not found on disk")
        return path.read_bytes()
