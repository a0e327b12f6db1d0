"""
Relocation Errors

Fatal errors raised by the relocation engine before any file is moved.

Author: FileMove Project
License: MIT
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of fatal relocation errors."""
    DIRECTORY_NOT_FOUND = "directory_not_found"
    INVALID_ARGUMENT = "invalid_argument"
    IO_FAILURE = "io_failure"


class RelocationError(Exception):
    """Base class for errors that abort a relocation run."""

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DirectoryNotFoundError(RelocationError):
    """The search directory does not exist."""
    kind = ErrorKind.DIRECTORY_NOT_FOUND


class InvalidArgumentError(RelocationError):
    """Search and destination directories are the same location."""
    kind = ErrorKind.INVALID_ARGUMENT


class IOFailureError(RelocationError):
    """The destination could not be prepared or the source could not be listed."""
    kind = ErrorKind.IO_FAILURE
