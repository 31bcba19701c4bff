"""Local filesystem client, a stdlib-only reference implementation."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from file_store._client import BlobClient
from file_store._errors import BackendOperationError, ObjectNotFound


class LocalBlobClient(BlobClient):
    """A directory on the local filesystem used as a bucket.

    Keys map to files below ``root``; the ``/`` separators in a key become
    subdirectories.

    :param root: Path to the root directory. Created on first write.
    """

    def __init__(self, root: str) -> None:
        if not root or not str(root).strip():
            raise ValueError("root must be a non-empty path")
        self._root = Path(root).resolve()

    @property
    def name(self) -> str:
        return "local"

    @property
    def root(self) -> Path:
        return self._root

    def __repr__(self) -> str:
        return f"LocalBlobClient(root={str(self._root)!r})"

    def _resolve(self, key: str) -> Path:
        """Resolve a key to a file path within root.

        An empty key resolves to ``root`` itself, which never holds an object.

        :raises BackendOperationError: If the key escapes the root.
        """
        resolved = (self._root / key).resolve()
        try:
            resolved.relative_to(self._root)
        except ValueError:
            raise BackendOperationError(
                f"Key escapes root directory: {key}", key=key, backend=self.name
            ) from None
        return resolved

    def put(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        full = self._resolve(key)
        if full == self._root:
            raise BackendOperationError("Key does not name a file", key=key, backend=self.name)
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=full.parent, prefix=".tmp-")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp, full)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise BackendOperationError(str(exc), key=key, backend=self.name) from exc

    def get(self, key: str) -> bytes:
        full = self._resolve(key)
        if full == self._root:
            raise ObjectNotFound(f"Not found: {key}", key=key, backend=self.name)
        try:
            return full.read_bytes()
        except FileNotFoundError:
            raise ObjectNotFound(f"Not found: {key}", key=key, backend=self.name) from None
        except IsADirectoryError:
            raise ObjectNotFound(f"Not found: {key}", key=key, backend=self.name) from None
        except OSError as exc:
            raise BackendOperationError(str(exc), key=key, backend=self.name) from exc

    def exists(self, key: str) -> bool:
        return self._resolve(key).is_file()

    def delete(self, key: str) -> bool:
        full = self._resolve(key)
        if not full.is_file():
            return False
        try:
            full.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise BackendOperationError(str(exc), key=key, backend=self.name) from exc
        return True
