"""S3-compatible object storage client using s3fs."""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from file_store._client import BlobClient
from file_store._errors import BackendOperationError, FileStoreError, ObjectNotFound

if TYPE_CHECKING:
    from collections.abc import Iterator


class S3BlobClient(BlobClient):
    """S3-compatible object storage client using s3fs.

    :param bucket: S3 bucket name (required, non-empty).
    :param key: AWS access key ID.
    :param secret: AWS secret access key.
    :param region_name: AWS region name.
    :param endpoint_url: Custom endpoint URL (e.g. for MinIO).
    :param client_options: Additional options passed to s3fs.
    """

    def __init__(
        self,
        bucket: str,
        *,
        key: str | None = None,
        secret: str | None = None,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        client_options: dict[str, Any] | None = None,
    ) -> None:
        if not bucket or not bucket.strip():
            raise ValueError("bucket must be a non-empty string")
        self._bucket = bucket
        self._key = key
        self._secret = secret
        self._region_name = region_name
        self._endpoint_url = endpoint_url
        self._client_options = client_options or {}
        self._fs_instance: Any = None

    @property
    def name(self) -> str:
        return "s3"

    @property
    def bucket(self) -> str:
        return self._bucket

    def __repr__(self) -> str:
        return f"S3BlobClient(bucket={self._bucket!r}, region_name={self._region_name!r})"

    # region: lazy filesystem

    @property
    def _fs(self) -> Any:
        if self._fs_instance is None:
            import s3fs  # type: ignore[import-untyped]

            opts: dict[str, Any] = dict(self._client_options)
            if self._endpoint_url is not None:
                opts["endpoint_url"] = self._endpoint_url
            if self._key is not None:
                opts["key"] = self._key
            if self._secret is not None:
                opts["secret"] = self._secret
            if self._region_name is not None:
                client_kwargs: dict[str, Any] = opts.setdefault("client_kwargs", {})
                client_kwargs["region_name"] = self._region_name
            opts.setdefault("anon", False)
            self._fs_instance = s3fs.S3FileSystem(**opts)
        return self._fs_instance

    # endregion

    # region: error mapping

    def _s3_path(self, key: str) -> str:
        return f"{self._bucket}/{key}"

    @contextmanager
    def _errors(self, key: str) -> Iterator[None]:
        """Map s3fs/botocore exceptions to file_store errors."""
        try:
            yield
        except FileStoreError:
            raise
        except asyncio.CancelledError as exc:
            raise BackendOperationError("Operation cancelled", key=key, backend=self.name) from exc
        except FileNotFoundError:
            raise ObjectNotFound(f"Not found: {key}", key=key, backend=self.name) from None
        except PermissionError as exc:
            raise BackendOperationError(f"Permission denied: {exc}", key=key, backend=self.name) from exc
        except Exception as exc:
            raise BackendOperationError(str(exc) or type(exc).__name__, key=key, backend=self.name) from exc

    # endregion

    def put(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        kwargs: dict[str, Any] = {}
        if content_type is not None:
            kwargs["ContentType"] = content_type
        with self._errors(key):
            self._fs.pipe_file(self._s3_path(key), data, **kwargs)

    def get(self, key: str) -> bytes:
        with self._errors(key):
            return bytes(self._fs.cat_file(self._s3_path(key)))

    def exists(self, key: str) -> bool:
        path = self._s3_path(key)
        with self._errors(key):
            # Listing cache may be stale after another writer's delete.
            self._fs.invalidate_cache(path)
            try:
                info = self._fs.info(path)
            except FileNotFoundError:
                return False
            return bool(info.get("type") == "file")

    def delete(self, key: str) -> bool:
        with self._errors(key):
            if not self.exists(key):
                return False
            self._fs.rm_file(self._s3_path(key))
            return True

    def close(self) -> None:
        if self._fs_instance is not None:
            self._fs_instance.clear_instance_cache()
            self._fs_instance = None
