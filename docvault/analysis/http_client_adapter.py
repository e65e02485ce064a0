import base64
import binascii

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from docvault.analysis.client_base import BaseFileStoreClient
from docvault.analysis.exceptions import (
    FileStoreResponseError,
    FileStoreUnavailableError,
    SubjectNotFoundError,
)
from docvault.analysis.models import SubjectMetadata
from docvault.logging.logger import Log


class FileInfoPayload(BaseModel):
    """Body of ``GET /api/files/{id}/metadata``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    file_name: str = Field(alias="fileName")
    content_type: str = Field(alias="contentType")


class FileBytesPayload(FileInfoPayload):
    """Body of ``GET /api/files/{id}/bytes``; content is base64 encoded."""

    size: int | None = None
    content: str = Field(alias="bytes")


class HttpFileStoreClient(BaseFileStoreClient):
    """Content store client over the store service's HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    def fetch_metadata(self, file_id: str) -> SubjectMetadata:
        payload = self._get_json(f"/api/files/{file_id}/metadata", file_id)
        try:
            info = FileInfoPayload.model_validate(payload)
        except ValidationError as exc:
            raise FileStoreResponseError(
                f"Malformed metadata for file {file_id}: {exc}"
            ) from exc
        return SubjectMetadata(file_name=info.file_name, content_type=info.content_type)

    def fetch_bytes(self, file_id: str) -> bytes:
        payload = self._get_json(f"/api/files/{file_id}/bytes", file_id)
        try:
            info = FileBytesPayload.model_validate(payload)
            return base64.b64decode(info.content, validate=True)
        except (ValidationError, binascii.Error) as exc:
            raise FileStoreResponseError(
                f"Malformed content for file {file_id}: {exc}"
            ) from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpFileStoreClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_json(self, path: str, file_id: str) -> object:
        Log.info(f"Requesting {path} from content store")
        try:
            response = self._client.get(path)
        except httpx.TimeoutException as exc:
            raise FileStoreUnavailableError(
                f"Content store timed out for file {file_id}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise FileStoreUnavailableError(
                f"Content store unreachable for file {file_id}: {exc}"
            ) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise SubjectNotFoundError(f"File with ID {file_id} not found")
        if response.is_server_error:
            raise FileStoreUnavailableError(
                f"Content store error for file {file_id}: {response.status_code}"
            )
        if not response.is_success:
            raise FileStoreResponseError(
                f"Unexpected content store status for file {file_id}: "
                f"{response.status_code}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise FileStoreResponseError(
                f"Content store returned invalid JSON for file {file_id}"
            ) from exc
