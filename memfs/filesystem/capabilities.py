"""
File Capability Interfaces

Small abstract interfaces describing what a file-like backend can do.
A backend implements only the subset it supports; consumers depend on
the narrowest interface they need.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Any

from .file_info import FileInfo


class Reader(ABC):
    """Sequential reads from the current position."""

    @abstractmethod
    def read(self, buf: Any) -> int:
        """
        Copy bytes into a writable buffer.

        Args:
            buf: Writable bytes-like object (bytearray, memoryview)

        Returns:
            Number of bytes copied

        Raises:
            EndOfDataError: If the position is at the end of the data
        """
        pass


class ReaderAt(ABC):
    """Positional reads that do not move the cursor."""

    @abstractmethod
    def read_at(self, buf: Any, offset: int) -> int:
        pass


class Writer(ABC):
    """Sequential writes."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        pass


class WriterAt(ABC):
    """Positional writes that do not move the cursor."""

    @abstractmethod
    def write_at(self, data: bytes, offset: int) -> int:
        pass


class WriterTo(ABC):
    """Drains remaining content into a sink with a ``write`` method."""

    @abstractmethod
    def write_to(self, sink: Any) -> int:
        pass


class Seeker(ABC):
    """Moves the cursor."""

    @abstractmethod
    def seek(self, offset: int, whence: int = 0) -> int:
        pass


class Closer(ABC):
    """Releases the handle."""

    @abstractmethod
    def close(self) -> None:
        pass


class Statable(ABC):
    """Reports file metadata."""

    @abstractmethod
    def stat(self) -> FileInfo:
        pass


class File(Statable, Reader, Closer):
    """
    Minimal file contract expected from a FileSystem.

    Matches the "stat, read, close" capability set of a read-only
    file; richer backends mix in the other interfaces.
    """


class FileSystem(ABC):
    """Resolves paths to open files."""

    @abstractmethod
    def open(self, path: str) -> File:
        """
        Open the file at path.

        Raises:
            InvalidPathError: If the path is syntactically invalid
            PathNotFoundError: If no file exists at the path
        """
        pass
