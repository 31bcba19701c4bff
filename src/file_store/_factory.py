"""ProviderFactory, which turns a connection name into a StorageProvider."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from file_store._config import BackendKind
from file_store._errors import BackendNotSupported, ConfigurationInvalid, ConnectionNotFound, InvalidArgument
from file_store._provider import StorageProvider
from file_store._registry import ConnectionRegistry
from file_store.backends._azure import AzureBlobClient
from file_store.backends._local import LocalBlobClient
from file_store.backends._s3 import S3BlobClient

if TYPE_CHECKING:
    from file_store._client import BlobClient
    from file_store._config import StorageConnection

log = logging.getLogger(__name__)


def _build_client(connection: StorageConnection) -> BlobClient:
    """Instantiate the backend client for a validated connection."""
    if connection.kind is BackendKind.AZURE_BLOB:
        return AzureBlobClient(
            connection.connection_string,
            connection.container_name,
            client_options=connection.options,
        )
    if connection.kind is BackendKind.S3:
        return S3BlobClient(
            bucket=connection.bucket_name or "",
            key=connection.access_key,
            secret=connection.secret_key,
            region_name=connection.region,
            endpoint_url=connection.endpoint_url,
            client_options=connection.options,
        )
    if connection.kind is BackendKind.LOCAL:
        return LocalBlobClient(root=connection.root or "")
    kind = connection.kind.value if isinstance(connection.kind, BackendKind) else str(connection.kind)
    raise BackendNotSupported(
        f"Storage type '{kind}' is not supported", connection=connection.name, kind=kind
    )


class ProviderFactory:
    """Resolves connection names to storage providers.

    Providers are not cached: every call to :meth:`resolve` builds a fresh
    provider from the connection as currently registered.

    :param registry: The connection registry. A new empty one if omitted.
    """

    def __init__(self, registry: ConnectionRegistry | None = None) -> None:
        self._registry = registry if registry is not None else ConnectionRegistry()

    def __repr__(self) -> str:
        return f"ProviderFactory(registry={self._registry!r})"

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    def available_connections(self) -> frozenset[str]:
        """Names of the connections that can be resolved."""
        return self._registry.names()

    def resolve(self, connection_name: str | None) -> StorageProvider:
        """Build a provider for the connection registered as ``connection_name``.

        :raises InvalidArgument: If ``connection_name`` is empty or ``None``.
        :raises ConnectionNotFound: If no such connection is registered.
        :raises ConfigurationInvalid: If the connection lacks a required field.
        :raises BackendNotSupported: If the connection's kind has no client.
        """
        if not connection_name:
            raise InvalidArgument("Connection name cannot be None or empty")

        connection = self._registry.get(connection_name)
        if connection is None:
            available = ", ".join(sorted(self._registry.names()))
            raise ConnectionNotFound(
                f"Connection '{connection_name}' not found. Available connections: {available}",
                connection=connection_name,
            )

        missing = connection.missing_fields()
        if missing:
            kind = connection.kind.value if isinstance(connection.kind, BackendKind) else str(connection.kind)
            raise ConfigurationInvalid(
                f"Missing {', '.join(missing)} for {kind} connection '{connection.name}'",
                connection=connection.name,
                backend=kind,
                missing=missing,
            )

        try:
            client = _build_client(connection)
        except ValueError as exc:
            raise ConfigurationInvalid(
                f"Invalid configuration for connection '{connection.name}': {exc}", connection=connection.name
            ) from exc
        log.info("Creating storage provider for connection %r (type: %s)", connection.name, client.name)
        return StorageProvider(client, connection=connection.name)
