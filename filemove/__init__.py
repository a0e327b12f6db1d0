"""
FileMove

Moves every file of a directory tree into a single destination directory,
renames on name collisions and reports which files moved and which failed.

Author: FileMove Project
License: MIT
"""

__version__ = "0.1.0"
