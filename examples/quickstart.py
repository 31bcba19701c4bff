"""Quickstart: register a connection, then create, download and delete a file.

Demonstrates:
- Seeding a ConnectionRegistry with a local connection
- Resolving a StorageProvider through the ProviderFactory
- Reading the result envelopes
"""

from __future__ import annotations

import logging
import tempfile

from file_store import ConnectionRegistry, ProviderFactory, StorageConnection, describe_key

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with tempfile.TemporaryDirectory() as tmp:
        registry = ConnectionRegistry([StorageConnection(name="scratch", kind="local", root=tmp)])
        factory = ProviderFactory(registry)
        print(f"Available connections: {sorted(factory.available_connections())}")

        print(describe_key("/greetings/", "hello.txt"))

        with factory.resolve("scratch") as provider:
            # "/greetings/" and "greetings" address the same key
            result = provider.create("/greetings/", "hello.txt", b"Hello, world!")
            print(f"Created: {result.successful}")

            download = provider.download("greetings", "hello.txt")
            print(f"Content: {download.file_contents!r}")

            print(f"Deleted: {provider.delete('greetings', 'hello.txt').successful}")
            print(f"After delete: {provider.download('greetings', 'hello.txt').error_message}")

    print("Done! Temp directory cleaned up automatically.")
