"""
File Relocator

Moves every file below a search directory into a single destination
directory, renaming on collision and collecting per-file failures.

Runs are synchronous and sequential. Collision handling checks for a free
name and then moves, which is only safe while nothing else writes into the
destination directory during the run.

Author: FileMove Project
License: MIT
"""

import os
from typing import List, Optional

from ..config.schema import CaseSensitivity, Config
from ..utils.file_ops import LocalFileSystem
from ..utils.logger import get_logger
from ..utils.paths import is_case_sensitive, normalize_path, same_location
from .errors import (
    DirectoryNotFoundError,
    InvalidArgumentError,
    IOFailureError,
    RelocationError,
)
from .models import MoveFailure, MoveRequest, MoveSummary, RelocationResult

logger = get_logger(__name__)


def collision_name(file_name: str, counter: int) -> str:
    """
    Name used for the ``counter``-th collision of ``file_name``.

    >>> collision_name("report.txt", 2)
    'report (2).txt'
    """
    stem, suffix = os.path.splitext(file_name)
    return f"{stem} ({counter}){suffix}"


def resolve_destination(
    destination_dir: str,
    file_name: str,
    filesystem: Optional[LocalFileSystem] = None
) -> str:
    """
    Resolve a free destination path for a file.

    Returns ``destination_dir/file_name`` when nothing exists there,
    otherwise the first free ``name (N).ext`` with N counting up from 1.

    Args:
        destination_dir: Directory the file is moved into
        file_name: Base name of the file
        filesystem: Filesystem provider used for existence checks

    Returns:
        Full destination path
    """
    filesystem = filesystem or LocalFileSystem()

    candidate = os.path.join(destination_dir, file_name)
    counter = 1
    while filesystem.exists(candidate):
        candidate = os.path.join(destination_dir, collision_name(file_name, counter))
        counter += 1

    return candidate


class FileRelocator:
    """
    Flattening file mover.

    Holds no per-run state; one instance can be reused for any number of runs.
    """

    def __init__(
        self,
        filesystem: Optional[LocalFileSystem] = None,
        case_sensitivity: CaseSensitivity = CaseSensitivity.AUTO
    ):
        """
        Initialize file relocator.

        Args:
            filesystem: Filesystem provider (defaults to the local filesystem)
            case_sensitivity: Policy for the same-directory check
        """
        self.filesystem = filesystem or LocalFileSystem()
        self.case_sensitivity = CaseSensitivity(case_sensitivity)

    @classmethod
    def from_config(cls, config: Config) -> "FileRelocator":
        return cls(case_sensitivity=config.relocation.case_sensitivity)

    def move_all(self, request: MoveRequest) -> MoveSummary:
        """
        Move every file below the search directory into the destination.

        Subdirectories are flattened. Setup problems abort the run before
        anything is moved; a file that fails to move is recorded in the
        summary and the run continues.

        Args:
            request: Search and destination directories

        Returns:
            MoveSummary for the run

        Raises:
            DirectoryNotFoundError: Search directory does not exist
            InvalidArgumentError: Destination is the search directory
            IOFailureError: Destination cannot be created or source cannot be listed
        """
        search_dir = normalize_path(request.search_directory)
        destination_dir = normalize_path(request.destination_directory)

        if not self.filesystem.is_dir(search_dir):
            raise DirectoryNotFoundError(
                f"Search directory '{search_dir}' does not exist."
            )

        if same_location(
            search_dir,
            destination_dir,
            case_sensitive=is_case_sensitive(self.case_sensitivity)
        ):
            raise InvalidArgumentError(
                "The destination directory must differ from the search directory."
            )

        try:
            self.filesystem.make_dirs(destination_dir)
        except OSError as e:
            raise IOFailureError(
                f"Could not prepare the destination directory: {e}"
            ) from e

        try:
            files = self.filesystem.list_files(search_dir)
        except OSError as e:
            raise IOFailureError(f"Could not list the files: {e}") from e

        logger.info(
            f"Moving {len(files)} file(s) from {search_dir} to {destination_dir}"
        )

        failures: List[MoveFailure] = []
        moved_count = 0

        for source_path in files:
            file_name = self.filesystem.file_name(source_path)
            if not file_name:
                continue

            destination_path = resolve_destination(
                destination_dir, file_name, self.filesystem
            )
            if os.path.basename(destination_path) != file_name:
                logger.info(
                    f"Name collision for {file_name}, using {os.path.basename(destination_path)}"
                )

            try:
                self.filesystem.move(source_path, destination_path)
                moved_count += 1
            except Exception as e:
                reason = str(e) or e.__class__.__name__
                logger.warning(f"Could not move {source_path}: {reason}")
                failures.append(MoveFailure(
                    source=source_path,
                    destination=destination_path,
                    reason=reason
                ))

        summary = MoveSummary.from_counts(moved_count, failures)
        logger.info(
            f"Relocation finished: {summary.moved_files} moved, "
            f"{summary.failed_files} failed"
        )
        return summary

    def try_move_all(self, request: MoveRequest) -> RelocationResult:
        """
        Like :meth:`move_all`, but fatal errors are returned instead of raised.

        Unexpected exceptions still propagate.
        """
        try:
            summary = self.move_all(request)
        except RelocationError as e:
            logger.warning(f"Relocation aborted ({e.kind.value}): {e.message}")
            return RelocationResult.failed(e.kind, e.message)
        return RelocationResult.ok(summary)
