"""Read-failure classification for structured error handling.

Local reads never raise to callers; instead the failure is classified so
that:
- Logs say why a location could not be resolved (missing vs unreadable)
- Callers can inspect the cause on the file handle when debugging
- Every class collapses to the same outcome (``exists=False``)
"""

from __future__ import annotations

import errno
from enum import Enum


class ReadFailure(Enum):
    NOT_FOUND = "not_found"  # file or parent directory missing
    PERMISSION = "permission"  # EACCES / EPERM
    DECODE = "decode"  # bytes are not valid text in the configured encoding
    TOO_LARGE = "too_large"  # exceeds max_file_size_bytes
    INVALID_URI = "invalid_uri"  # not a file URI / not a local path
    IO = "io"  # any other OSError (EISDIR, EIO, ...)
    UNKNOWN = "unknown"  # unclassified


class FileTooLargeError(OSError):
    """Raised internally when a file exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            errno.EFBIG, f"File size {size} exceeds limit {limit}"
        )
        self.size = size
        self.limit = limit


class InvalidFileUriError(ValueError):
    """Raised internally when a URI cannot be mapped to a local path."""


def classify_read_error(error: Exception) -> ReadFailure:
    """Classify a read error.

    Checks exception types first, falls back to errno for bare OSErrors.
    """
    # 1. Own marker types
    if isinstance(error, FileTooLargeError):
        return ReadFailure.TOO_LARGE
    if isinstance(error, InvalidFileUriError):
        return ReadFailure.INVALID_URI

    # 2. Decoding problems
    if isinstance(error, UnicodeError):
        return ReadFailure.DECODE

    # 3. Typed OSError subclasses
    if isinstance(error, FileNotFoundError | NotADirectoryError):
        return ReadFailure.NOT_FOUND
    if isinstance(error, PermissionError):
        return ReadFailure.PERMISSION

    # 4. Fall back to errno for untyped OSErrors
    if isinstance(error, OSError):
        if error.errno == errno.ENOENT:
            return ReadFailure.NOT_FOUND
        if error.errno in (errno.EACCES, errno.EPERM):
            return ReadFailure.PERMISSION
        return ReadFailure.IO

    if isinstance(error, ValueError):
        return ReadFailure.INVALID_URI

    return ReadFailure.UNKNOWN


_MISSING = frozenset({
    ReadFailure.NOT_FOUND,
    ReadFailure.INVALID_URI,
})


def is_missing(failure: ReadFailure) -> bool:
    """Return True if the failure means the file is not there at all."""
    return failure in _MISSING
