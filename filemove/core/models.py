"""
Relocation Models

Value objects passed into and returned from the relocation engine.

Author: FileMove Project
License: MIT
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import ErrorKind


@dataclass(frozen=True)
class MoveRequest:
    """Directories for one relocation run."""
    search_directory: str
    destination_directory: str


@dataclass(frozen=True)
class MoveFailure:
    """A single file that could not be moved."""
    source: str
    destination: str
    reason: str


@dataclass(frozen=True)
class MoveSummary:
    """
    Outcome of a relocation run.

    ``total_files`` always equals ``moved_files + failed_files``.
    """
    total_files: int
    moved_files: int
    failed_files: int
    failures: Tuple[MoveFailure, ...] = field(default_factory=tuple)

    @classmethod
    def from_counts(cls, moved_files: int, failures) -> "MoveSummary":
        """Build a summary from the moved count and collected failures."""
        failures = tuple(failures)
        return cls(
            total_files=moved_files + len(failures),
            moved_files=moved_files,
            failed_files=len(failures),
            failures=failures
        )


@dataclass(frozen=True)
class RelocationResult:
    """
    Either a summary (``success``) or a fatal error kind and message.

    Use :meth:`ok` and :meth:`failed` to build instances.
    """
    success: bool
    summary: Optional[MoveSummary] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, summary: MoveSummary) -> "RelocationResult":
        return cls(success=True, summary=summary)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> "RelocationResult":
        return cls(success=False, error_kind=kind, error_message=message)
