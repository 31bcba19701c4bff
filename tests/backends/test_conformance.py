"""Client conformance suite -- every backend client must pass these."""

from __future__ import annotations

import pytest

from file_store._client import BlobClient
from file_store._errors import BackendOperationError, ObjectNotFound
from file_store._provider import StorageProvider


class TestClientIdentity:
    def test_is_blob_client(self, client: BlobClient) -> None:
        assert isinstance(client, BlobClient)

    def test_name_is_string(self, client: BlobClient) -> None:
        assert isinstance(client.name, str)
        assert len(client.name) > 0


class TestClientPutGet:
    def test_round_trip(self, client: BlobClient) -> None:
        client.put("hello.txt", b"hello")
        assert client.get("hello.txt") == b"hello"

    def test_nested_key(self, client: BlobClient) -> None:
        client.put("a/b/c.bin", b"\x00\x01\x02")
        assert client.get("a/b/c.bin") == b"\x00\x01\x02"

    def test_overwrite(self, client: BlobClient) -> None:
        client.put("f.txt", b"A")
        client.put("f.txt", b"B")
        assert client.get("f.txt") == b"B"

    def test_content_type_accepted(self, client: BlobClient) -> None:
        client.put("doc.json", b"{}", content_type="application/json")
        assert client.get("doc.json") == b"{}"

    def test_get_missing(self, client: BlobClient) -> None:
        with pytest.raises(ObjectNotFound):
            client.get("nonexistent.txt")

    def test_object_not_found_is_backend_error(self, client: BlobClient) -> None:
        with pytest.raises(BackendOperationError):
            client.get("nonexistent.txt")


class TestClientExists:
    def test_false_for_missing(self, client: BlobClient) -> None:
        assert client.exists("nonexistent.txt") is False

    def test_true_after_put(self, client: BlobClient) -> None:
        client.put("x.txt", b"x")
        assert client.exists("x.txt") is True

    def test_prefix_is_not_an_object(self, client: BlobClient) -> None:
        client.put("dir/inner.txt", b"x")
        assert client.exists("dir") is False


class TestClientDelete:
    def test_delete_existing(self, client: BlobClient) -> None:
        client.put("gone.txt", b"x")
        assert client.delete("gone.txt") is True
        assert client.exists("gone.txt") is False
        with pytest.raises(ObjectNotFound):
            client.get("gone.txt")

    def test_delete_missing(self, client: BlobClient) -> None:
        assert client.delete("never.txt") is False

    def test_delete_leaves_siblings(self, client: BlobClient) -> None:
        client.put("d/a.txt", b"a")
        client.put("d/b.txt", b"b")
        client.delete("d/a.txt")
        assert client.get("d/b.txt") == b"b"


class TestProviderOverClient:
    """The provider contract holds identically on every backend."""

    def test_round_trip(self, client: BlobClient) -> None:
        provider = StorageProvider(client, connection="conformance")
        assert provider.create("/new/", "file.txt", b"payload").successful
        result = provider.download("new", "file.txt")
        assert result.successful
        assert result.file_contents == b"payload"

    def test_overwrite(self, client: BlobClient) -> None:
        provider = StorageProvider(client)
        provider.create("p", "f.bin", b"A")
        provider.create("p", "f.bin", b"B")
        assert provider.download("p", "f.bin").file_contents == b"B"

    def test_download_missing(self, client: BlobClient) -> None:
        result = StorageProvider(client).download("p", "missing.bin")
        assert result.error_message == "File not found"

    def test_delete_then_download(self, client: BlobClient) -> None:
        provider = StorageProvider(client)
        provider.create("p", "f.bin", b"x")
        assert provider.delete("/p/", "f.bin").successful
        assert provider.download("p", "f.bin").error_message == "File not found"

    def test_delete_missing(self, client: BlobClient) -> None:
        result = StorageProvider(client).delete("p", "missing.bin")
        assert result.successful is False
        assert result.error_message == "File not found"
