"""Local client specific tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from file_store._errors import BackendOperationError, ObjectNotFound
from file_store._provider import StorageProvider
from file_store._results import FILE_NOT_FOUND
from file_store.backends._local import LocalBlobClient

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def local_client() -> Iterator[LocalBlobClient]:
    with tempfile.TemporaryDirectory() as tmp:
        yield LocalBlobClient(root=tmp)


class TestLocalKeyResolution:
    def test_key_maps_to_file(self, local_client: LocalBlobClient) -> None:
        local_client.put("a/b/c.txt", b"x")
        assert (local_client.root / "a" / "b" / "c.txt").read_bytes() == b"x"

    def test_traversal_rejected(self, local_client: LocalBlobClient) -> None:
        with pytest.raises(BackendOperationError, match="escapes"):
            local_client.get("../../etc/passwd")

    def test_traversal_reported_by_provider(self, local_client: LocalBlobClient) -> None:
        result = StorageProvider(local_client).create("..", "outside.txt", b"x")
        assert result.successful is False
        assert result.error_message is not None
        assert "escapes" in result.error_message

    def test_empty_key_write_rejected(self, local_client: LocalBlobClient) -> None:
        with pytest.raises(BackendOperationError, match="does not name a file"):
            local_client.put("", b"x")

    def test_empty_key_is_not_an_object(self, local_client: LocalBlobClient) -> None:
        local_client.put("a.txt", b"x")
        assert local_client.exists("") is False
        assert local_client.delete("") is False
        with pytest.raises(ObjectNotFound):
            local_client.get("")

    def test_empty_key_reported_as_missing(self, local_client: LocalBlobClient) -> None:
        provider = StorageProvider(local_client)
        assert provider.download("", "").error_message == FILE_NOT_FOUND
        assert provider.delete("", "").error_message == FILE_NOT_FOUND


class TestLocalWrites:
    def test_root_created_on_first_write(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "not" / "yet"
            c = LocalBlobClient(root=str(root))
            assert not root.exists()
            c.put("f.txt", b"x")
            assert (root / "f.txt").read_bytes() == b"x"

    def test_no_temp_files_left(self, local_client: LocalBlobClient) -> None:
        local_client.put("d/f.txt", b"A")
        local_client.put("d/f.txt", b"B")
        assert sorted(p.name for p in (local_client.root / "d").iterdir()) == ["f.txt"]

    def test_empty_root_rejected(self) -> None:
        with pytest.raises(ValueError, match="root"):
            LocalBlobClient(root="")


class TestLocalReads:
    def test_directory_is_not_an_object(self, local_client: LocalBlobClient) -> None:
        local_client.put("dir/inner.txt", b"x")
        with pytest.raises(ObjectNotFound):
            local_client.get("dir")

    def test_delete_directory_is_noop(self, local_client: LocalBlobClient) -> None:
        local_client.put("dir/inner.txt", b"x")
        assert local_client.delete("dir") is False
        assert local_client.get("dir/inner.txt") == b"x"

    def test_identity(self, local_client: LocalBlobClient) -> None:
        assert local_client.name == "local"
        assert "LocalBlobClient(root=" in repr(local_client)
