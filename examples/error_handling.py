"""Error handling: pre-flight exceptions and result envelopes.

Demonstrates:
- The exceptions the factory raises before any backend call
- The "File not found" sentinel on results
- Mapping outcomes to HTTP status codes the way an edge layer would
"""

from __future__ import annotations

import tempfile

from file_store import (
    BackendNotSupported,
    ConfigurationInvalid,
    ConnectionNotFound,
    ConnectionRegistry,
    FileStoreError,
    InvalidArgument,
    Outcome,
    ProviderFactory,
    StorageConnection,
    classify,
)

_STATUS = {Outcome.SUCCESS: 200, Outcome.NOT_FOUND: 404, Outcome.FAILURE: 500}

if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        registry = ConnectionRegistry(
            [
                StorageConnection(name="scratch", kind="local", root=tmp),
                StorageConnection(name="aws-dev", kind="s3", secret_key="--", region="us-east-1", bucket_name="b"),
                StorageConnection(name="ftp", kind="ftp"),
            ]
        )
        factory = ProviderFactory(registry)

        # --- InvalidArgument ---
        try:
            factory.resolve("")
        except InvalidArgument as exc:
            print(f"InvalidArgument ({exc.http_status}): {exc}")

        # --- ConnectionNotFound ---
        try:
            factory.resolve("nonexistent")
        except ConnectionNotFound as exc:
            print(f"\nConnectionNotFound ({exc.http_status}): {exc}")

        # --- ConfigurationInvalid ---
        try:
            factory.resolve("aws-dev")
        except ConfigurationInvalid as exc:
            print(f"\nConfigurationInvalid ({exc.http_status}): {exc}")
            print(f"  missing={exc.missing}")

        # --- BackendNotSupported ---
        try:
            factory.resolve("ftp")
        except BackendNotSupported as exc:
            print(f"\nBackendNotSupported ({exc.http_status}): {exc}")

        # --- Catch any file_store error with the base class ---
        for name in ["", "nonexistent", "aws-dev", "ftp"]:
            try:
                factory.resolve(name)
            except FileStoreError as exc:
                print(f"\nFileStoreError ({type(exc).__name__}): {exc}")

        # --- Backend outcomes never raise ---
        provider = factory.resolve("scratch")
        for result in [
            provider.download("", "missing.txt"),
            provider.delete("", "missing.txt"),
            provider.create("..", "escape.txt", b"x"),
            provider.create("", "ok.txt", b"x"),
        ]:
            outcome = classify(result)
            print(f"\n{outcome.name} -> HTTP {_STATUS[outcome]}: {result.error_message}")

    print("\nDone!")
