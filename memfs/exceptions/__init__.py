"""
MemFS Exception Hierarchy

All custom exceptions inherit from MemFSError. Handle and registry
errors additionally derive from the matching built-in exception so
generic file-consuming code can catch them the usual way.

Architecture:
    MemFSError (Base)
    ├── FileSystemException
    │   ├── ClosedFileError        (ValueError)
    │   ├── EndOfDataError         (EOFError)
    │   ├── InvalidWhenceError     (ValueError)
    │   ├── InvalidPositionError   (ValueError)
    │   ├── InvalidPathError       (ValueError)
    │   └── PathNotFoundError      (LookupError)
    └── ConfigValidationError
"""

from .fs_exceptions import (
    MemFSError,
    FileSystemException,
    ClosedFileError,
    EndOfDataError,
    InvalidWhenceError,
    InvalidPositionError,
    InvalidPathError,
    PathNotFoundError,
    ConfigValidationError,
)

__all__ = [
    "MemFSError",
    "FileSystemException",
    "ClosedFileError",
    "EndOfDataError",
    "InvalidWhenceError",
    "InvalidPositionError",
    "InvalidPathError",
    "PathNotFoundError",
    "ConfigValidationError",
]
