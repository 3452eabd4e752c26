"""
Memory Filesystem Module

A registry mapping validated paths to byte content. Opening a path
produces a fresh MemoryFile over a private copy of the stored bytes,
so writes through a handle never change what the registry holds.

No locking is done here. Sharing a registry or a handle between
threads requires external synchronization.

Version: 1.0.0
"""

from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from .capabilities import FileSystem
from .memory_file import MemoryFile
from .path_resolver import PathResolver
from memfs.core.config_loader import Config, get_config
from memfs.exceptions import InvalidPathError, PathNotFoundError
from memfs.logger import get_logger


def _to_bytes(data: Any, encoding: str = 'utf-8') -> bytes:
    if isinstance(data, str):
        return data.encode(encoding)
    return bytes(memoryview(data))


class MemoryFS(FileSystem):
    """
    In-memory filesystem registry.

    Example:
        >>> fs = MemoryFS({'test.txt': b'hello'})
        >>> with fs.open('test.txt') as f:
        ...     f.read_bytes()
        b'hello'
    """

    def __init__(self, files: Optional[Mapping[str, Any]] = None):
        """
        Create a registry.

        Args:
            files: Initial path to content mapping; content may be
                bytes-like or str (encoded as UTF-8)

        Raises:
            InvalidPathError: If any initial path is invalid
        """
        self._files: dict[str, bytes] = {}
        self._logger = get_logger('registry')

        for path, data in (files or {}).items():
            self.add_file(path, data)

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'MemoryFS':
        """
        Build a registry from the fixture files of a configuration.

        Args:
            config: Configuration to use; defaults to the active one
        """
        config = config or get_config()
        encoding = config.filesystem.encoding

        fs = cls()
        for path, content in config.filesystem.files.items():
            fs.add_file(path, _to_bytes(content, encoding))

        fs._logger.info(
            "Loaded fixture files",
            context={'count': len(fs), 'encoding': encoding}
        )
        return fs

    def _validate(self, path: Any) -> str:
        try:
            return PathResolver.validate(path)
        except InvalidPathError as e:
            self._logger.debug(
                "Rejected path",
                context={'path': path, 'reason': e.reason}
            )
            raise

    def open(self, path: str) -> MemoryFile:
        """
        Open the file at path.

        The returned handle starts at position 0 and owns a copy of the
        stored content. Its modification time is the time of opening.

        Raises:
            InvalidPathError: If the path fails the validity rule
            PathNotFoundError: If the path is not registered
        """
        self._validate(path)

        data = self._files.get(path)
        if data is None:
            self._logger.debug("File not found", context={'path': path})
            raise PathNotFoundError(path)

        self._logger.debug("Opened file", context={'path': path, 'size': len(data)})

        return MemoryFile(
            data=data,
            name=path,
            mod_time=datetime.now(timezone.utc)
        )

    def read_file(self, path: str) -> bytes:
        """Open path, read its whole content and close it."""
        with self.open(path) as f:
            return f.read_bytes()

    def add_file(self, path: str, data: Any = b'') -> None:
        """
        Register content under path, replacing any existing entry.

        Raises:
            InvalidPathError: If the path fails the validity rule
        """
        self._validate(path)
        self._files[path] = _to_bytes(data)
        self._logger.debug("Added file", context={'path': path, 'size': len(self._files[path])})

    def remove_file(self, path: str) -> None:
        """
        Remove the entry at path.

        Raises:
            InvalidPathError: If the path fails the validity rule
            PathNotFoundError: If the path is not registered
        """
        self._validate(path)
        if path not in self._files:
            raise PathNotFoundError(path)
        del self._files[path]
        self._logger.debug("Removed file", context={'path': path})

    def exists(self, path: str) -> bool:
        """Check if a path is registered."""
        return path in self._files

    def list_files(self) -> List[str]:
        """Registered paths in sorted order."""
        return sorted(self._files)

    def get_stats(self) -> dict[str, Any]:
        """Get registry statistics."""
        return {
            'total_files': len(self._files),
            'total_size': sum(len(data) for data in self._files.values()),
        }

    def __contains__(self, path: object) -> bool:
        return path in self._files

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"MemoryFS(files={len(self._files)})"
