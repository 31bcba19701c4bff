"""Backend client implementations."""

from file_store.backends._azure import AzureBlobClient
from file_store.backends._local import LocalBlobClient
from file_store.backends._s3 import S3BlobClient

__all__ = ["AzureBlobClient", "LocalBlobClient", "S3BlobClient"]
