"""Azure Blob Storage client using adlfs."""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from file_store._client import BlobClient
from file_store._errors import BackendOperationError, FileStoreError, ObjectNotFound

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)

DEFAULT_CONTAINER = "files"


class AzureBlobClient(BlobClient):
    """Azure Blob Storage client using adlfs.

    The container is created on the first write if it does not exist yet.

    :param connection_string: Azure storage account connection string.
    :param container: Blob container name.
    :param client_options: Additional options passed to ``AzureBlobFileSystem``.
    """

    def __init__(
        self,
        connection_string: str,
        container: str = DEFAULT_CONTAINER,
        *,
        client_options: dict[str, Any] | None = None,
    ) -> None:
        if not connection_string or not connection_string.strip():
            raise ValueError("connection_string must be a non-empty string")
        if not container or not container.strip():
            raise ValueError("container must be a non-empty string")
        self._connection_string = connection_string
        self._container = container
        self._client_options = client_options or {}
        self._fs_instance: Any = None
        self._container_ready = False

    @property
    def name(self) -> str:
        return "azure_blob"

    @property
    def container(self) -> str:
        return self._container

    def __repr__(self) -> str:
        return f"AzureBlobClient(container={self._container!r})"

    # region: lazy filesystem

    @property
    def _fs(self) -> Any:
        if self._fs_instance is None:
            import adlfs  # type: ignore[import-untyped]

            opts: dict[str, Any] = dict(self._client_options)
            opts["connection_string"] = self._connection_string
            self._fs_instance = adlfs.AzureBlobFileSystem(**opts)
        return self._fs_instance

    def _ensure_container(self) -> None:
        if self._container_ready:
            return
        try:
            self._fs.info(self._container)
        except FileNotFoundError:
            log.info("Creating blob container %r", self._container)
            self._fs.mkdir(self._container)
        self._container_ready = True

    # endregion

    # region: error mapping

    def _blob_path(self, key: str) -> str:
        return f"{self._container}/{key}"

    @staticmethod
    def _is_missing(exc: Exception) -> bool:
        return isinstance(exc, FileNotFoundError) or type(exc).__name__ == "ResourceNotFoundError"

    @contextmanager
    def _errors(self, key: str) -> Iterator[None]:
        """Map adlfs/azure-core exceptions to file_store errors."""
        try:
            yield
        except FileStoreError:
            raise
        except asyncio.CancelledError as exc:
            raise BackendOperationError("Operation cancelled", key=key, backend=self.name) from exc
        except Exception as exc:
            if self._is_missing(exc):
                raise ObjectNotFound(f"Not found: {key}", key=key, backend=self.name) from None
            raise BackendOperationError(str(exc) or type(exc).__name__, key=key, backend=self.name) from exc

    # endregion

    def put(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        with self._errors(key):
            self._ensure_container()
            self._fs.pipe_file(self._blob_path(key), data)

    def get(self, key: str) -> bytes:
        with self._errors(key):
            return bytes(self._fs.cat_file(self._blob_path(key)))

    def exists(self, key: str) -> bool:
        path = self._blob_path(key)
        with self._errors(key):
            self._fs.invalidate_cache(path)
            try:
                info = self._fs.info(path)
            except Exception as exc:
                if self._is_missing(exc):
                    return False
                raise
            return bool(info.get("type") == "file")

    def delete(self, key: str) -> bool:
        with self._errors(key):
            if not self.exists(key):
                return False
            self._fs.rm(self._blob_path(key))
            return True

    def close(self) -> None:
        if self._fs_instance is not None:
            self._fs_instance.clear_instance_cache()
            self._fs_instance = None
            self._container_ready = False
