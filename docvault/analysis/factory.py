from typing import ClassVar

from docvault.analysis.client_base import BaseFileStoreClient
from docvault.analysis.http_client_adapter import HttpFileStoreClient
from docvault.analysis.local_client_adapter import LocalFileStoreClient
from docvault.config.settings import Settings
from docvault.storage.content_store import ContentStore, build_content_store


class FileStoreClientFactory:
    """Creates the configured content store client."""

    CLIENTS: ClassVar[tuple[str, ...]] = ("local", "http")

    @classmethod
    def create(
        cls,
        settings: Settings,
        content_store: ContentStore | None = None,
    ) -> BaseFileStoreClient:
        kind = settings.file_store_client.strip().lower()
        if kind == "http":
            url = settings.file_store_url.strip()
            if not url:
                raise ValueError("file_store_url is required for file_store_client=http")
            return HttpFileStoreClient(
                base_url=url,
                timeout_seconds=settings.file_store_timeout_seconds,
            )
        if kind == "local":
            store = content_store if content_store is not None else build_content_store(settings)
            return LocalFileStoreClient(store)
        raise ValueError(
            f"Unknown file store client '{kind}'. Choose from: {list(cls.CLIENTS)}"
        )
