"""
MemFS - In-Memory File Substitute

Buffer-backed file handles and a path registry, for running code that
opens, reads, writes and closes files against fixtures instead of real
storage. Implemented with the Python 3.10+ standard library only.
"""

__version__ = "1.0.0"

from .exceptions import (
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
from .filesystem import (
    File,
    FileInfo,
    FileSystem,
    MemoryFile,
    MemoryFS,
    PathResolver,
    Whence,
)

__all__ = [
    'MemFSError',
    'FileSystemException',
    'ClosedFileError',
    'EndOfDataError',
    'InvalidWhenceError',
    'InvalidPositionError',
    'InvalidPathError',
    'PathNotFoundError',
    'ConfigValidationError',
    'File',
    'FileInfo',
    'FileSystem',
    'MemoryFile',
    'MemoryFS',
    'PathResolver',
    'Whence',
]
