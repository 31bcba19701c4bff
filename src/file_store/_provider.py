"""StorageProvider, the uniform create/download/delete surface."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from file_store._errors import ObjectNotFound
from file_store._keys import content_type_for, normalize_key
from file_store._results import FILE_NOT_FOUND, FileDownloadResult, FileOperationResult

if TYPE_CHECKING:
    from types import TracebackType

    from file_store._client import BlobClient

log = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class StorageProvider:
    """Create, download and delete objects on one connection's backend.

    Every operation normalizes ``(file_path, file_name)`` into a backend key
    and returns a result envelope. Backend failures, including a cancelled
    backend call, never propagate as exceptions.

    :param client: The backend client bound to the connection.
    :param connection: Name of the connection, used in log records.
    """

    def __init__(self, client: BlobClient, *, connection: str = "") -> None:
        self._client = client
        self._connection = connection

    def __repr__(self) -> str:
        return f"StorageProvider(connection={self._connection!r}, backend={self._client.name!r})"

    @property
    def name(self) -> str:
        """Backend name of the wrapped client."""
        return self._client.name

    @property
    def connection(self) -> str:
        return self._connection

    @property
    def client(self) -> BlobClient:
        return self._client

    def close(self) -> None:
        """Close the underlying client, releasing any held resources."""
        self._client.close()

    def __enter__(self) -> StorageProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def create(self, file_path: str | None, file_name: str, contents: bytes) -> FileOperationResult:
        """Write ``contents`` under the normalized key, replacing any existing object."""
        key = normalize_key(file_path, file_name)
        try:
            self._client.put(key, bytes(contents), content_type=content_type_for(file_name))
        except (Exception, asyncio.CancelledError) as exc:
            log.error(
                "Error creating %r on connection %r (%s)", key, self._connection, self.name, exc_info=True
            )
            return FileOperationResult.failure(f"Failed to create file: {_describe(exc)}")
        log.info("Created %r (%d bytes) on connection %r (%s)", key, len(contents), self._connection, self.name)
        return FileOperationResult.ok()

    def download(self, file_path: str | None, file_name: str) -> FileDownloadResult:
        """Fetch the full content stored under the normalized key.

        An absent object yields ``error_message == "File not found"``.
        """
        key = normalize_key(file_path, file_name)
        try:
            contents = self._client.get(key)
        except ObjectNotFound:
            log.warning("File not found: %r on connection %r (%s)", key, self._connection, self.name)
            return FileDownloadResult.failure(FILE_NOT_FOUND)
        except (Exception, asyncio.CancelledError) as exc:
            log.error(
                "Error downloading %r on connection %r (%s)", key, self._connection, self.name, exc_info=True
            )
            return FileDownloadResult.failure(f"Failed to download file: {_describe(exc)}")
        log.info("Downloaded %r (%d bytes) on connection %r (%s)", key, len(contents), self._connection, self.name)
        return FileDownloadResult.of(contents)

    def delete(self, file_path: str | None, file_name: str) -> FileOperationResult:
        """Delete the object under the normalized key.

        An absent object yields ``error_message == "File not found"``. An
        object removed by someone else between the existence check and the
        delete is reported as a failure.
        """
        key = normalize_key(file_path, file_name)
        try:
            if not self._client.exists(key):
                log.warning("File not found for deletion: %r on connection %r (%s)", key, self._connection, self.name)
                return FileOperationResult.failure(FILE_NOT_FOUND)
            if not self._client.delete(key):
                log.warning("%r vanished before deletion on connection %r (%s)", key, self._connection, self.name)
                return FileOperationResult.failure(
                    "Failed to delete file: object disappeared during the operation"
                )
        except (Exception, asyncio.CancelledError) as exc:
            log.error(
                "Error deleting %r on connection %r (%s)", key, self._connection, self.name, exc_info=True
            )
            return FileOperationResult.failure(f"Failed to delete file: {_describe(exc)}")
        log.info("Deleted %r on connection %r (%s)", key, self._connection, self.name)
        return FileOperationResult.ok()
