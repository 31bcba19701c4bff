"""ConnectionRegistry, the thread-safe map of named storage connections."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from file_store._errors import InvalidArgument

if TYPE_CHECKING:
    from collections.abc import Iterable

    from file_store._config import FileStoreConfig, StorageConnection

log = logging.getLogger(__name__)


class ConnectionRegistry:
    """Holds the storage connections known to the process.

    All methods take the same lock, so a concurrent ``names()`` never sees a
    half-applied ``add()`` or ``remove()``.

    :param connections: Connections to seed the registry with.
    :raises InvalidArgument: If a seeded connection has no name.
    """

    def __init__(self, connections: Iterable[StorageConnection] = ()) -> None:
        self._lock = threading.RLock()
        self._connections: dict[str, StorageConnection] = {}
        for connection in connections:
            self.add(connection)

    @classmethod
    def from_config(cls, config: FileStoreConfig) -> ConnectionRegistry:
        """Build a registry seeded with every connection in ``config``.

        :raises ValueError: If the config is invalid.
        """
        config.validate()
        return cls(config.connections.values())

    def __repr__(self) -> str:
        return f"ConnectionRegistry(connections={sorted(self.names())!r})"

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._connections

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)

    def names(self) -> frozenset[str]:
        """Names of all registered connections."""
        with self._lock:
            return frozenset(self._connections)

    def get(self, name: str) -> StorageConnection | None:
        """Return the connection registered as ``name``, or ``None``."""
        with self._lock:
            return self._connections.get(name)

    def add(self, connection: StorageConnection | None) -> None:
        """Register ``connection``, replacing any connection with the same name.

        :raises InvalidArgument: If ``connection`` is ``None`` or has an empty name.
        """
        if connection is None:
            raise InvalidArgument("Connection cannot be None")
        if not connection.name:
            raise InvalidArgument("Connection name cannot be empty")
        with self._lock:
            replaced = connection.name in self._connections
            self._connections[connection.name] = connection
        log.info("%s storage connection %r", "Updated" if replaced else "Added", connection.name)

    def remove(self, name: str) -> bool:
        """Unregister ``name``.

        :returns: ``True`` if a connection was removed.
        """
        with self._lock:
            removed = self._connections.pop(name, None) is not None
        if removed:
            log.info("Removed storage connection %r", name)
        return removed
