"""Configuration model: immutable data containers describing storage connections."""

from __future__ import annotations

import dataclasses
import enum
import tomllib
from pathlib import Path
from typing import Any, Final


class BackendKind(enum.Enum):
    """Backend families a connection can point at."""

    AZURE_BLOB = "azure_blob"
    S3 = "s3"
    LOCAL = "local"


#: Connection fields that must be non-empty for each backend kind.
REQUIRED_FIELDS: Final[dict[BackendKind, tuple[str, ...]]] = {
    BackendKind.AZURE_BLOB: ("connection_string",),
    BackendKind.S3: ("access_key", "secret_key", "region", "bucket_name"),
    BackendKind.LOCAL: ("root",),
}

_SECRET_FIELDS: Final = frozenset({"connection_string", "secret_key"})
_KIND_VALUES: Final = frozenset(k.value for k in BackendKind)


@dataclasses.dataclass(frozen=True)
class StorageConnection:
    """A named, pre-provisioned connection to one bucket or container.

    Which fields must be filled in depends on ``kind``, see
    :data:`REQUIRED_FIELDS`. A ``kind`` string that names no
    :class:`BackendKind` is kept as-is so resolution can report it.

    :param name: Unique connection name.
    :param kind: Backend kind.
    :param connection_string: Azure storage connection string.
    :param access_key: S3 access key ID.
    :param secret_key: S3 secret access key.
    :param region: S3 region name.
    :param bucket_name: S3 bucket name.
    :param container_name: Azure blob container name.
    :param endpoint_url: Custom S3 endpoint (e.g. MinIO).
    :param root: Root directory for the local backend.
    :param options: Extra keyword options for the backend client.
    """

    name: str
    kind: BackendKind | str
    connection_string: str = ""
    access_key: str | None = None
    secret_key: str | None = None
    region: str | None = None
    bucket_name: str | None = None
    container_name: str = "files"
    endpoint_url: str | None = None
    root: str | None = None
    options: dict[str, Any] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if isinstance(self.kind, str) and self.kind in _KIND_VALUES:
            object.__setattr__(self, "kind", BackendKind(self.kind))

    def __repr__(self) -> str:
        parts = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if field.name in _SECRET_FIELDS and value:
                parts.append(f"{field.name}='***'")
            else:
                parts.append(f"{field.name}={value!r}")
        return f"StorageConnection({', '.join(parts)})"

    def missing_fields(self) -> tuple[str, ...]:
        """Required fields of this connection's kind that are empty."""
        if not isinstance(self.kind, BackendKind):
            return ()
        return tuple(f for f in REQUIRED_FIELDS[self.kind] if not _filled(getattr(self, f)))

    @classmethod
    def from_dict(cls, name: str, data: dict[str, object]) -> StorageConnection:
        """Construct from a plain dict (e.g. one table of a parsed TOML file).

        The backend kind may be given as ``kind`` or ``type``.

        :raises TypeError: If ``data`` is not a dict or has unknown keys.
        :raises KeyError: If no backend kind is given.
        """
        if not isinstance(data, dict):
            msg = f"Connection config for '{name}' must be a dict"
            raise TypeError(msg)
        values = dict(data)
        alias = values.pop("type", None)
        kind = values.pop("kind", None) or alias
        if kind is None:
            raise KeyError(f"Connection '{name}' has no 'kind'")
        known = {f.name for f in dataclasses.fields(cls)} - {"name", "kind"}
        unknown = sorted(set(values) - known)
        if unknown:
            msg = f"Unknown fields for connection '{name}': {unknown}"
            raise TypeError(msg)
        options = values.pop("options", {})
        if not isinstance(options, dict):
            msg = f"'options' for connection '{name}' must be a dict"
            raise TypeError(msg)
        return cls(
            name=str(name),
            kind=str(kind),
            options=dict(options),
            **{k: None if v is None else str(v) for k, v in values.items()},
        )


def _filled(value: object) -> bool:
    return value is not None and bool(str(value).strip())


@dataclasses.dataclass(frozen=True)
class FileStoreConfig:
    """Top-level configuration container.

    :param connections: Mapping of connection names to connections.
    """

    connections: dict[str, StorageConnection] = dataclasses.field(default_factory=dict)

    def validate(self) -> None:
        """Check that every connection is registered under its own name.

        :raises ValueError: If a mapping key differs from the connection's name.
        """
        for key, connection in self.connections.items():
            if key != connection.name:
                raise ValueError(
                    f"Connection registered as '{key}' is named '{connection.name}'. "
                    f"Available connections: {sorted(self.connections.keys())}"
                )

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> FileStoreConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with a ``connections`` table.
        """
        raw = data.get("connections", {})
        if not isinstance(raw, dict):
            msg = "Expected 'connections' to be a dict"
            raise TypeError(msg)
        connections = {str(name): StorageConnection.from_dict(str(name), cfg) for name, cfg in raw.items()}
        return cls(connections=connections)

    @classmethod
    def load(cls, path: str | Path) -> FileStoreConfig:
        """Read a TOML file with a ``[connections.<name>]`` table per connection."""
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls.from_dict(data)
