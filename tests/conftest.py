"""Shared test fixtures and marker registration."""

from __future__ import annotations

import pytest

from file_store._provider import StorageProvider
from tests.fakes import MemoryBlobClient


def pytest_configure(config: object) -> None:
    """Register custom markers."""
    if isinstance(config, pytest.Config):
        config.addinivalue_line("markers", "integration: requires external services")


@pytest.fixture
def memory_client() -> MemoryBlobClient:
    return MemoryBlobClient()


@pytest.fixture
def provider(memory_client: MemoryBlobClient) -> StorageProvider:
    return StorageProvider(memory_client, connection="mem")
