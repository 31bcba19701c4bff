"""Configuration: connections in code, from a dict, or from a TOML file.

Demonstrates:
- StorageConnection for each backend kind
- FileStoreConfig.from_dict() and FileStoreConfig.load()
- Adding, replacing and removing connections at runtime
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from file_store import (
    BackendKind,
    ConnectionRegistry,
    FileStoreConfig,
    ProviderFactory,
    StorageConnection,
)

TOML = """
[connections.aws-dev]
kind = "s3"
access_key = "AKIDEXAMPLE"
secret_key = "wJalrXUtnFEMI"
region = "us-east-1"
bucket_name = "my-bucket"

[connections.minio]
kind = "s3"
access_key = "minioadmin"
secret_key = "minioadmin"
region = "us-east-1"
bucket_name = "uploads"
endpoint_url = "http://localhost:9000"

[connections.azure-dev]
kind = "azure_blob"
connection_string = "UseDevelopmentStorage=true"
container_name = "files"
"""

if __name__ == "__main__":
    # --- Option 1: Config-as-code ---
    registry = ConnectionRegistry(
        [
            StorageConnection(name="scratch", kind=BackendKind.LOCAL, root="/tmp/file-store"),
            StorageConnection(name="azure-dev", kind="azure_blob", connection_string="UseDevelopmentStorage=true"),
        ]
    )
    print("In code:", sorted(registry.names()))

    # --- Option 2: from_dict() ---
    config = FileStoreConfig.from_dict(
        {"connections": {"scratch": {"kind": "local", "root": "/tmp/file-store"}}},
    )
    print("From dict:", sorted(ConnectionRegistry.from_config(config).names()))

    # --- Option 3: a TOML file ---
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "file_store.toml"
        path.write_text(TOML)
        registry = ConnectionRegistry.from_config(FileStoreConfig.load(path))
    print("From TOML:", sorted(registry.names()))
    # Secrets are masked in repr()
    print(registry.get("aws-dev"))

    # --- Runtime changes ---
    factory = ProviderFactory(registry)
    factory.registry.add(StorageConnection(name="scratch", kind="local", root="/tmp/file-store"))
    factory.registry.add(StorageConnection(name="scratch", kind="local", root="/tmp/file-store-2"))
    print("After upsert:", sorted(factory.available_connections()))
    print("Removed minio:", factory.registry.remove("minio"))
    print("Removed again:", factory.registry.remove("minio"))

    # Providers are built lazily; no network call happens here.
    provider = factory.resolve("aws-dev")
    print(provider)
