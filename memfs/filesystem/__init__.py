"""
MemFS Filesystem Module

In-memory file handles and the path registry that produces them:
- Capability interfaces for file-like backends
- Buffer-backed file handles
- Path validation
- Path to content registry
"""

from .capabilities import (
    Reader,
    ReaderAt,
    Writer,
    WriterAt,
    WriterTo,
    Seeker,
    Closer,
    Statable,
    File,
    FileSystem,
)
from .file_info import FileInfo, DEFAULT_FILE_MODE
from .path_resolver import PathResolver
from .memory_file import MemoryFile, Whence
from .memory_fs import MemoryFS

__all__ = [
    # Capabilities
    'Reader',
    'ReaderAt',
    'Writer',
    'WriterAt',
    'WriterTo',
    'Seeker',
    'Closer',
    'Statable',
    'File',
    'FileSystem',
    # File info
    'FileInfo',
    'DEFAULT_FILE_MODE',
    # Path resolver
    'PathResolver',
    # Handles
    'MemoryFile',
    'Whence',
    # Registry
    'MemoryFS',
]
