"""BlobClient abstract base class, the contract every backend implements."""

from __future__ import annotations

import abc


class BlobClient(abc.ABC):
    """Narrow key/bytes interface over one bucket or container.

    Implementations must map backend-native exceptions: an absent object
    raises :class:`~file_store.ObjectNotFound`, any other failure raises
    :class:`~file_store.BackendOperationError`. A cancelled call may surface
    as ``asyncio.CancelledError``; the provider reports it as a failure.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Identifier for this backend type (e.g. ``'s3'``, ``'azure_blob'``)."""

    @abc.abstractmethod
    def put(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        """Store ``data`` at ``key``, replacing any existing object."""

    @abc.abstractmethod
    def get(self, key: str) -> bytes:
        """Return the full content stored at ``key``.

        :raises ObjectNotFound: If no object exists at ``key``.
        """

    @abc.abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether an object exists at ``key``. Never raises ``ObjectNotFound``."""

    @abc.abstractmethod
    def delete(self, key: str) -> bool:
        """Delete the object at ``key``.

        :returns: ``False`` if there was nothing to delete.
        """

    def close(self) -> None:  # noqa: B027
        """Release resources. Default is a no-op."""
