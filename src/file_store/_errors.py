"""Error hierarchy for file_store.

Pre-flight errors (``InvalidArgument``, ``ConnectionNotFound``,
``ConfigurationInvalid``, ``BackendNotSupported``) are raised by the registry
and the factory. ``BackendOperationError`` and ``ObjectNotFound`` are raised by
backend clients and never escape a :class:`~file_store.StorageProvider`.
"""

from __future__ import annotations

from typing import ClassVar, Optional


class FileStoreError(Exception):
    """Base class for all file_store errors.

    :param message: Human-readable error description.
    :param connection: The connection name involved, if any.
    :param key: The backend key involved, if any.
    :param backend: The backend name involved, if any.
    """

    #: Status code an HTTP edge layer should answer with.
    http_status: ClassVar[int] = 500

    def __init__(
        self,
        message: str = "",
        *,
        connection: Optional[str] = None,
        key: Optional[str] = None,
        backend: Optional[str] = None,
    ) -> None:
        self.connection = connection
        self.key = key
        self.backend = backend
        super().__init__(message)

    @property
    def message(self) -> str:
        """The message without the context suffix."""
        return self.args[0] if self.args else ""

    def _context(self) -> list[tuple[str, str]]:
        context = []
        if self.connection is not None:
            context.append(("connection", self.connection))
        if self.key is not None:
            context.append(("key", self.key))
        if self.backend is not None:
            context.append(("backend", self.backend))
        return context

    def __str__(self) -> str:
        parts = [self.message]
        parts.extend(f"{name}={value!r}" for name, value in self._context())
        return " | ".join(p for p in parts if p)

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(self.message)]
        args.extend(f"{name}={value!r}" for name, value in self._context())
        return f"{cls}({', '.join(args)})"


class InvalidArgument(FileStoreError, ValueError):
    """Raised when a required input is empty or absent."""

    http_status = 400


class ConnectionNotFound(FileStoreError, LookupError):
    """Raised when a connection name is not registered."""

    http_status = 404


class ConfigurationInvalid(FileStoreError):
    """Raised when a connection lacks fields required by its backend kind.

    :param missing: Names of the missing fields.
    """

    http_status = 400

    def __init__(
        self,
        message: str = "",
        *,
        connection: Optional[str] = None,
        backend: Optional[str] = None,
        missing: tuple[str, ...] = (),
    ) -> None:
        self.missing = tuple(missing)
        super().__init__(message, connection=connection, backend=backend)


class BackendNotSupported(FileStoreError):
    """Raised when a connection names a backend kind with no client.

    :param kind: The unrecognized kind value.
    """

    http_status = 400

    def __init__(self, message: str = "", *, connection: Optional[str] = None, kind: str = "") -> None:
        self.kind = kind
        super().__init__(message, connection=connection)


class BackendOperationError(FileStoreError):
    """Raised by a backend client when a put/get/delete call fails."""


class ObjectNotFound(BackendOperationError):
    """Raised by a backend client when no object exists at a key."""

    http_status = 404
