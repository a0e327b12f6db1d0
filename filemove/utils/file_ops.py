"""
File Operation Utilities

Local filesystem access used by the relocation engine: existence checks,
directory creation, recursive file listing and moves.

Author: FileMove Project
License: MIT
"""

import os
import shutil
from typing import Iterator, List

from .logger import get_logger

logger = get_logger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


class LocalFileSystem:
    """
    Filesystem provider backed by ``os`` and ``shutil``.

    Subclass and override individual methods to simulate failures.
    """

    def exists(self, path: str) -> bool:
        """True if any entry is at ``path``, including a broken symlink."""
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def make_dirs(self, path: str) -> None:
        """Create ``path`` and any missing parents. Raises OSError on failure."""
        os.makedirs(path, exist_ok=True)

    def iter_files(self, root: str) -> Iterator[str]:
        """
        Yield every regular file below ``root``, recursively.

        Directories and files are visited in sorted name order. Listing
        errors (including an unreadable ``root``) are raised, not skipped.

        Args:
            root: Directory to walk

        Yields:
            Full file paths
        """
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                file_path = os.path.join(dirpath, filename)
                if os.path.isfile(file_path):
                    yield file_path

    def list_files(self, root: str) -> List[str]:
        """Materialized :meth:`iter_files`."""
        return list(self.iter_files(root))

    def move(self, source: str, destination: str) -> None:
        """
        Move a single file.

        Callers pass a destination that is known to be free; overwriting is
        never requested. Cross-device moves fall back to copy and delete.
        """
        shutil.move(source, destination)
        logger.debug(f"Moved: {source} -> {destination}")

    def file_name(self, path: str) -> str:
        """Base name (name plus extension) of ``path``."""
        return os.path.basename(path)
