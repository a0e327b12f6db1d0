"""
FileMove Core Module

Relocation engine, its request/summary models and fatal errors.

Author: FileMove Project
License: MIT
"""

from .errors import (
    DirectoryNotFoundError,
    ErrorKind,
    InvalidArgumentError,
    IOFailureError,
    RelocationError,
)
from .models import MoveFailure, MoveRequest, MoveSummary, RelocationResult
from .relocator import FileRelocator, collision_name, resolve_destination

__all__ = [
    'DirectoryNotFoundError',
    'ErrorKind',
    'FileRelocator',
    'InvalidArgumentError',
    'IOFailureError',
    'MoveFailure',
    'MoveRequest',
    'MoveSummary',
    'RelocationError',
    'RelocationResult',
    'collision_name',
    'resolve_destination',
]
