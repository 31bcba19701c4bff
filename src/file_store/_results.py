"""Uniform result envelopes returned by every provider operation."""

from __future__ import annotations

import dataclasses
import enum
from typing import Final

#: Error message carried by results when no object exists at the key.
FILE_NOT_FOUND: Final = "File not found"


@dataclasses.dataclass(frozen=True)
class FileOperationResult:
    """Outcome of a create or delete.

    ``successful`` is authoritative. ``error_message`` may only be set on a
    failed result.

    :param successful: Whether the operation succeeded.
    :param error_message: Human-readable failure summary.
    :raises ValueError: If a successful result carries an error message.
    """

    successful: bool
    error_message: str | None = None

    def __post_init__(self) -> None:
        if self.successful and self.error_message is not None:
            raise ValueError("A successful result cannot carry an error message")

    @classmethod
    def ok(cls) -> FileOperationResult:
        return cls(successful=True)

    @classmethod
    def failure(cls, message: str) -> FileOperationResult:
        return cls(successful=False, error_message=message)

    @property
    def not_found(self) -> bool:
        return not self.successful and self.error_message == FILE_NOT_FOUND


@dataclasses.dataclass(frozen=True)
class FileDownloadResult:
    """Outcome of a download.

    :param file_contents: The object's bytes, when it was fetched.
    :param error_message: Human-readable failure summary.
    """

    file_contents: bytes | None = dataclasses.field(default=None, repr=False)
    error_message: str | None = None

    @classmethod
    def of(cls, contents: bytes) -> FileDownloadResult:
        return cls(file_contents=contents)

    @classmethod
    def failure(cls, message: str) -> FileDownloadResult:
        return cls(error_message=message)

    @property
    def successful(self) -> bool:
        """True when contents are present, non-empty, and there is no error."""
        return bool(self.file_contents) and not self.error_message

    @property
    def not_found(self) -> bool:
        return self.error_message == FILE_NOT_FOUND


class Outcome(enum.Enum):
    """The three outcome kinds an edge layer distinguishes."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


def classify(result: FileOperationResult | FileDownloadResult) -> Outcome:
    """Map a result onto the outcome an edge layer reports."""
    if result.successful:
        return Outcome.SUCCESS
    if result.error_message == FILE_NOT_FOUND:
        return Outcome.NOT_FOUND
    return Outcome.FAILURE
