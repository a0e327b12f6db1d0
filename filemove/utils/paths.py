"""
Path Utilities

String-level normalization of user supplied directory paths and the
canonical comparison used to tell whether two directories are the same.

Author: FileMove Project
License: MIT
"""

import os
import re
import sys
from typing import Optional

from ..config.schema import CaseSensitivity

SEPARATORS = ("/", "\\")

# Platforms whose default filesystems ignore case
CASE_INSENSITIVE_PLATFORMS = ("win32", "cygwin", "darwin")


def normalize_path(path: str, sep: str = os.sep) -> str:
    """
    Normalize a directory path without touching the filesystem.

    Trims surrounding whitespace, converts foreign separators to ``sep`` and
    collapses repeated separators. A leading double separator (UNC /
    network-share prefix such as ``\\\\server\\share``) is kept as-is.
    Empty or whitespace-only input is returned unchanged.

    Args:
        path: Path string as supplied by the user
        sep: Target separator (defaults to the platform separator)

    Returns:
        Normalized path string

    Examples:
        >>> normalize_path("  /data//inbox/ ", sep="/")
        '/data/inbox/'
        >>> normalize_path("//server/share//docs", sep="\\\\")
        '\\\\\\\\server\\\\share\\\\docs'
    """
    if not path or not path.strip():
        return path

    value = path.strip()
    for separator in SEPARATORS:
        if separator != sep:
            value = value.replace(separator, sep)

    prefix = ""
    double_sep = sep * 2
    if value.startswith(double_sep):
        prefix = double_sep
        value = value.lstrip(sep)

    return prefix + re.sub(re.escape(sep) + "{2,}", lambda _: sep, value)


def canonical_path(path: str) -> str:
    """Absolute form of ``path`` with trailing separators removed."""
    absolute = os.path.abspath(path)
    trimmed = absolute.rstrip("/\\")

    # Keep the separator of a bare root ("/" or "C:\")
    drive, rest = os.path.splitdrive(absolute)
    if not trimmed or trimmed == drive:
        return absolute
    return trimmed


def is_case_sensitive(
    policy: CaseSensitivity = CaseSensitivity.AUTO,
    platform: Optional[str] = None
) -> bool:
    """
    Resolve a case sensitivity policy for path comparison.

    Args:
        policy: Configured policy (enum or its string value)
        platform: Platform identifier, defaults to ``sys.platform``

    Returns:
        True if paths differing only by case are distinct
    """
    policy = CaseSensitivity(policy)
    if policy == CaseSensitivity.SENSITIVE:
        return True
    if policy == CaseSensitivity.INSENSITIVE:
        return False

    platform = platform or sys.platform
    return platform not in CASE_INSENSITIVE_PLATFORMS


def same_location(first: str, second: str, case_sensitive: bool = True) -> bool:
    """
    Check whether two paths denote the same directory.

    Canonical strings are compared first. When both paths exist, aliases
    (symlinks, a POSIX ``//`` prefix, case on case-insensitive volumes) are
    caught by comparing the filesystem entries themselves.
    """
    left = canonical_path(first)
    right = canonical_path(second)
    if not case_sensitive:
        if left.casefold() == right.casefold():
            return True
    elif left == right:
        return True

    if os.path.exists(left) and os.path.exists(right):
        return os.path.samefile(left, right)
    return False
