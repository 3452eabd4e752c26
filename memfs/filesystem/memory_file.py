"""
Memory File Module

A file handle whose entire content lives in a growable byte buffer.

The handle keeps three pieces of state:
- the buffer holding the content
- a cursor used by sequential reads, seek and write_to
- a closed flag; once set it never clears

Sequential writes append to the end of the buffer and never move the
cursor. Positional reads and writes ignore the cursor entirely.

Version: 1.0.0
"""

import os
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Optional

from .capabilities import File, ReaderAt, Seeker, Writer, WriterAt, WriterTo
from .file_info import FileInfo
from memfs.exceptions import (
    ClosedFileError,
    EndOfDataError,
    InvalidPositionError,
    InvalidWhenceError,
)
from memfs.logger import get_logger


class Whence(IntEnum):
    """Seek origins."""
    START = os.SEEK_SET
    CURRENT = os.SEEK_CUR
    END = os.SEEK_END


def _byte_view(data: Any) -> memoryview:
    """View any bytes-like object as unsigned bytes."""
    view = memoryview(data)
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view


class MemoryFile(File, ReaderAt, Writer, WriterAt, WriterTo, Seeker):
    """
    In-memory file handle.

    Example:
        >>> f = MemoryFile(b'Want Avanpost', name='test.txt')
        >>> buf = bytearray(15)
        >>> f.read(buf)
        13
        >>> f.close()
    """

    def __init__(
        self,
        data: Any = b'',
        name: str = '',
        mod_time: Optional[datetime] = None
    ):
        self._data = bytearray(data)
        self._pos = 0
        self._closed = False
        self._name = name
        self._mod_time = mod_time or datetime.now(timezone.utc)
        self._logger = get_logger('file')

    @property
    def name(self) -> str:
        return self._name

    @property
    def mod_time(self) -> datetime:
        return self._mod_time

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def size(self) -> int:
        """Current buffer length. Available on closed handles."""
        return len(self._data)

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise ClosedFileError(self._name, operation=operation)

    def _copy_out(self, buf: Any, offset: int) -> int:
        """Copy from offset into buf; offset must be inside the buffer."""
        view = _byte_view(buf)
        n = min(len(view), len(self._data) - offset)
        view[:n] = self._data[offset:offset + n]
        return n

    def stat(self) -> FileInfo:
        """
        Describe the file.

        Does not check the closed flag, so the size of a closed handle
        can still be inspected.
        """
        return FileInfo(
            name=self._name,
            size=len(self._data),
            mod_time=self._mod_time,
        )

    def read(self, buf: Any) -> int:
        """
        Read into buf from the cursor and advance it.

        Args:
            buf: Writable bytes-like object

        Returns:
            Number of bytes copied, at most len(buf)

        Raises:
            ClosedFileError: If the handle is closed
            EndOfDataError: If the cursor is at the end of the buffer
        """
        self._check_open('read')

        if self._pos >= len(self._data):
            raise EndOfDataError(self._name, position=self._pos, size=len(self._data))

        n = self._copy_out(buf, self._pos)
        self._pos += n
        return n

    readinto = read

    def read_at(self, buf: Any, offset: int) -> int:
        """
        Read into buf starting at offset without moving the cursor.

        Raises:
            ClosedFileError: If the handle is closed
            InvalidPositionError: If offset is negative
            EndOfDataError: If offset is at or past the end of the buffer
        """
        self._check_open('read_at')

        if offset < 0:
            raise InvalidPositionError(offset, path=self._name, operation='read_at')
        if offset >= len(self._data):
            raise EndOfDataError(self._name, position=offset, size=len(self._data))

        return self._copy_out(buf, offset)

    def read_bytes(self, size: int = -1) -> bytes:
        """
        Read up to size bytes from the cursor (all remaining if negative).

        Unlike read(), returns b'' at the end of the buffer.
        """
        self._check_open('read_bytes')

        end = len(self._data)
        if size >= 0:
            end = min(end, self._pos + size)
        if self._pos >= end:
            return b''

        chunk = bytes(self._data[self._pos:end])
        self._pos = end
        return chunk

    def write(self, data: Any) -> int:
        """
        Append data to the end of the buffer.

        The cursor is not moved.

        Returns:
            Number of bytes appended, always the full input length
        """
        self._check_open('write')

        view = _byte_view(data)
        self._data += view
        return view.nbytes

    def write_at(self, data: Any, offset: int) -> int:
        """
        Write data at offset, overwriting existing bytes in range.

        The buffer grows to offset + len(data) when needed; any gap
        between the old end and offset is zero-filled. The cursor is
        not moved.

        Raises:
            ClosedFileError: If the handle is closed
            InvalidPositionError: If offset is negative
        """
        self._check_open('write_at')

        if offset < 0:
            raise InvalidPositionError(offset, path=self._name, operation='write_at')

        view = _byte_view(data)
        end = offset + view.nbytes
        if end > len(self._data):
            self._data.extend(bytes(end - len(self._data)))

        self._data[offset:end] = view
        return view.nbytes

    def write_to(self, sink: Any) -> int:
        """
        Write the unread content to sink and advance the cursor.

        The cursor moves by the number of bytes the sink accepted, which
        is the return value of sink.write() (None means all of it).
        Exceptions raised by the sink propagate unchanged; a
        BlockingIOError reporting partial progress still advances the
        cursor by characters_written first.

        Returns:
            Number of bytes the sink accepted
        """
        self._check_open('write_to')

        remaining = bytes(self._data[self._pos:])
        try:
            written = sink.write(remaining)
        except BlockingIOError as e:
            self._pos += min(max(e.characters_written, 0), len(remaining))
            raise

        if written is None:
            written = len(remaining)
        written = min(max(written, 0), len(remaining))

        self._pos += written
        return written

    def seek(self, offset: int, whence: int = Whence.START) -> int:
        """
        Move the cursor.

        Positions past the end are clamped to the buffer length; the
        buffer never grows from a seek.

        Args:
            offset: Offset relative to whence
            whence: Whence.START, Whence.CURRENT or Whence.END

        Returns:
            The new cursor position

        Raises:
            ClosedFileError: If the handle is closed
            InvalidWhenceError: If whence is not a known origin
            InvalidPositionError: If the target position is negative
        """
        self._check_open('seek')

        try:
            origin = Whence(whence)
        except ValueError:
            raise InvalidWhenceError(whence, path=self._name) from None

        if origin is Whence.START:
            position = offset
        elif origin is Whence.CURRENT:
            position = self._pos + offset
        else:
            position = len(self._data) + offset

        if position < 0:
            raise InvalidPositionError(position, path=self._name, operation='seek')

        self._pos = min(position, len(self._data))
        return self._pos

    def tell(self) -> int:
        """Return the cursor position."""
        self._check_open('tell')
        return self._pos

    def close(self) -> None:
        """
        Close the handle.

        Raises:
            ClosedFileError: If the handle is already closed
        """
        self._check_open('close')
        self._closed = True
        self._logger.debug(
            "Closed file",
            context={'name': self._name, 'size': len(self._data)}
        )

    def getvalue(self) -> bytes:
        """
        Return a snapshot of the whole buffer.

        Does not check the closed flag. The returned bytes do not change
        when the handle is written to afterwards.
        """
        return bytes(self._data)

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def __enter__(self) -> 'MemoryFile':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._closed:
            self.close()

    def __repr__(self) -> str:
        state = 'closed' if self._closed else 'open'
        return (
            f"MemoryFile(name={self._name!r}, size={len(self._data)}, "
            f"position={self._pos}, {state})"
        )
