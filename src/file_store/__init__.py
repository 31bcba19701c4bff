"""One file store API over interchangeable blob-storage backends."""

from file_store._client import BlobClient
from file_store._config import REQUIRED_FIELDS, BackendKind, FileStoreConfig, StorageConnection
from file_store._errors import (
    BackendNotSupported,
    BackendOperationError,
    ConfigurationInvalid,
    ConnectionNotFound,
    FileStoreError,
    InvalidArgument,
    ObjectNotFound,
)
from file_store._factory import ProviderFactory
from file_store._keys import KeyDescription, content_type_for, describe_key, normalize_key
from file_store._provider import StorageProvider
from file_store._registry import ConnectionRegistry
from file_store._results import FILE_NOT_FOUND, FileDownloadResult, FileOperationResult, Outcome, classify

__version__ = "0.1.0"

__all__ = [
    # Core
    "ProviderFactory",
    "ConnectionRegistry",
    "StorageProvider",
    "BlobClient",
    # Keys
    "normalize_key",
    "describe_key",
    "KeyDescription",
    "content_type_for",
    # Results
    "FileOperationResult",
    "FileDownloadResult",
    "FILE_NOT_FOUND",
    "Outcome",
    "classify",
    # Config
    "BackendKind",
    "StorageConnection",
    "FileStoreConfig",
    "REQUIRED_FIELDS",
    # Errors
    "FileStoreError",
    "InvalidArgument",
    "ConnectionNotFound",
    "ConfigurationInvalid",
    "BackendNotSupported",
    "BackendOperationError",
    "ObjectNotFound",
    # Version
    "__version__",
]
