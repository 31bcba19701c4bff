"""Backend test fixtures -- parameterized for conformance testing."""

from __future__ import annotations

import socket
import tempfile
import uuid
from typing import TYPE_CHECKING

import pytest

from file_store.backends._azure import AzureBlobClient
from file_store.backends._local import LocalBlobClient

if TYPE_CHECKING:
    from collections.abc import Iterator

    from file_store._client import BlobClient

REGION = "us-east-1"


def _s3_available() -> bool:
    try:
        import boto3  # noqa: F401
        import moto  # noqa: F401
        import s3fs  # noqa: F401

        return True
    except ImportError:
        return False


def _fsspec_available() -> bool:
    try:
        import fsspec  # noqa: F401

        return True
    except ImportError:
        return False


def _free_port() -> int:
    with socket.socket() as s:
        s.bind(("", 0))
        return s.getsockname()[1]


@pytest.fixture(scope="session")
def moto_server() -> Iterator[str | None]:
    """Start a moto HTTP server for the test session.

    Uses server mode instead of mock_aws() so s3fs/aiobotocore talk to a real
    HTTP endpoint.
    """
    if not _s3_available():
        yield None
        return
    from moto.moto_server.threaded_moto_server import ThreadedMotoServer

    port = _free_port()
    server = ThreadedMotoServer(port=port, verbose=False)
    server.start()
    yield f"http://127.0.0.1:{port}"
    server.stop()


def make_bucket(endpoint: str, prefix: str = "test") -> str:
    """Create a uniquely named bucket on the moto server."""
    import boto3

    bucket = f"{prefix}-{uuid.uuid4().hex[:8]}"
    client = boto3.client(
        "s3",
        endpoint_url=endpoint,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name=REGION,
    )
    client.create_bucket(Bucket=bucket)
    return bucket


def memory_azure_client(container: str | None = None) -> AzureBlobClient:
    """An AzureBlobClient whose filesystem handle is an fsspec in-memory filesystem."""
    from fsspec.implementations.memory import MemoryFileSystem

    client = AzureBlobClient(
        "DefaultEndpointsProtocol=https;AccountName=test;AccountKey=dGVzdA==;EndpointSuffix=core.windows.net",
        container or f"container-{uuid.uuid4().hex[:8]}",
    )
    client._fs_instance = MemoryFileSystem(skip_instance_cache=True)
    return client


_s3_param = pytest.param(
    "s3",
    marks=pytest.mark.skipif(not _s3_available(), reason="moto/s3fs not installed"),
)

_azure_param = pytest.param(
    "azure_blob",
    marks=pytest.mark.skipif(not _fsspec_available(), reason="fsspec not installed"),
)


@pytest.fixture(params=["local", _s3_param, _azure_param])
def client(request: pytest.FixtureRequest, moto_server: str | None) -> Iterator[BlobClient]:
    """Parameterized client fixture. Add new backends here."""
    if request.param == "local":
        with tempfile.TemporaryDirectory() as tmp:
            yield LocalBlobClient(root=tmp)
    elif request.param == "s3":
        from file_store.backends._s3 import S3BlobClient

        assert moto_server is not None
        c = S3BlobClient(
            bucket=make_bucket(moto_server, "conformance"),
            key="testing",
            secret="testing",
            region_name=REGION,
            endpoint_url=moto_server,
        )
        yield c
        c.close()
    elif request.param == "azure_blob":
        yield memory_azure_client()
    else:
        pytest.skip(f"Unknown backend: {request.param}")
