"""Backend key normalization and related helpers."""

from __future__ import annotations

import dataclasses
import mimetypes
from typing import Final

SEPARATOR: Final = "/"

_CONTENT_TYPES: Final[dict[str, str]] = {
    ".txt": "text/plain",
    ".json": "application/json",
    ".xml": "application/xml",
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}
DEFAULT_CONTENT_TYPE: Final = "application/octet-stream"


def _strip_path(file_path: str | None) -> str:
    return (file_path or "").strip(SEPARATOR)


def normalize_key(file_path: str | None, file_name: str) -> str:
    """Join a directory path and a file name into one backend key.

    Leading and trailing separators are stripped from ``file_path``, so
    ``normalize_key("/new/", "file")`` and ``normalize_key("new", "file")``
    both give ``"new/file"``. An empty path yields the file name alone.
    ``file_name`` is not validated.
    """
    path = _strip_path(file_path)
    if path:
        return f"{path}{SEPARATOR}{file_name}"
    return file_name


@dataclasses.dataclass(frozen=True)
class KeyDescription:
    """How a ``(file_path, file_name)`` pair turns into a backend key.

    :param original_path: The path as given.
    :param original_file_name: The file name as given.
    :param normalized_path: The path with surrounding separators stripped.
    :param key: The final backend key.
    :param path_is_empty: Whether the given path was empty.
    :param file_name_is_empty: Whether the given file name was empty.
    """

    original_path: str | None
    original_file_name: str
    normalized_path: str
    key: str
    path_is_empty: bool
    file_name_is_empty: bool


def describe_key(file_path: str | None, file_name: str) -> KeyDescription:
    """Explain the key produced for ``file_path`` and ``file_name``."""
    return KeyDescription(
        original_path=file_path,
        original_file_name=file_name,
        normalized_path=_strip_path(file_path),
        key=normalize_key(file_path, file_name),
        path_is_empty=not file_path,
        file_name_is_empty=not file_name,
    )


def content_type_for(file_name: str) -> str:
    """Infer a MIME type from the extension of ``file_name``."""
    dot = file_name.rfind(".")
    if dot > 0:
        known = _CONTENT_TYPES.get(file_name[dot:].lower())
        if known is not None:
            return known
    guessed, _encoding = mimetypes.guess_type(file_name, strict=False)
    return guessed or DEFAULT_CONTENT_TYPE
