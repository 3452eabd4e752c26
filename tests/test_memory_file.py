"""
MemoryFile Unit Tests

Covers the handle state machine: cursor movement, end-of-buffer
boundaries, growth on write, seek clamping and the closed state.

Run with: python -m pytest tests -v
"""

import errno
import io
import random
import unittest
from datetime import datetime, timezone

from memfs.exceptions import (
    ClosedFileError,
    EndOfDataError,
    InvalidPositionError,
    InvalidWhenceError,
)
from memfs.filesystem import DEFAULT_FILE_MODE, MemoryFile, Whence


def make_file(content: bytes = b'Want Avanpost') -> MemoryFile:
    return MemoryFile(content, name='test.txt')


class TestFileRead(unittest.TestCase):
    """Sequential reads."""

    def test_read_until_end_then_closed(self):
        """Read everything, hit the end, then read after close."""
        f = make_file()

        buf = bytearray(15)
        n = f.read(buf)
        self.assertEqual(n, 13)
        self.assertEqual(bytes(buf[:n]), b'Want Avanpost')
        self.assertEqual(f.tell(), 13)

        with self.assertRaises(EndOfDataError):
            f.read(bytearray(10))
        self.assertEqual(f.tell(), 13)

        f.close()
        buf = bytearray(5)
        with self.assertRaises(ClosedFileError):
            f.read(buf)
        self.assertEqual(bytes(buf), bytes(5))
        # close does not reset the cursor
        self.assertEqual(f._pos, 13)

    def test_read_in_chunks_reproduces_content(self):
        """Concatenated reads with arbitrary buffer sizes give the content back."""
        rng = random.Random(1234)
        content = bytes(rng.randrange(256) for _ in range(257))

        for size in (1, 2, 7, 64, 256, 257, 1000):
            with self.subTest(size=size):
                f = make_file(content)
                chunks = []
                while True:
                    buf = bytearray(size)
                    try:
                        n = f.read(buf)
                    except EndOfDataError:
                        break
                    chunks.append(bytes(buf[:n]))
                self.assertEqual(b''.join(chunks), content)

    def test_read_empty_file(self):
        f = make_file(b'')
        with self.assertRaises(EndOfDataError):
            f.read(bytearray(4))

    def test_read_into_empty_buffer(self):
        f = make_file()
        self.assertEqual(f.read(bytearray(0)), 0)
        self.assertEqual(f.tell(), 0)

    def test_read_into_memoryview(self):
        f = make_file()
        buf = bytearray(8)
        self.assertEqual(f.readinto(memoryview(buf)[4:]), 4)
        self.assertEqual(bytes(buf), b'\x00\x00\x00\x00Want')

    def test_read_into_readonly_buffer(self):
        f = make_file()
        with self.assertRaises(TypeError):
            f.read(bytes(4))


class TestFileReadAt(unittest.TestCase):
    """Positional reads."""

    def test_read_at(self):
        f = make_file()
        cases = [
            ('from start', 0, 4, b'Want'),
            ('from middle', 5, 8, b'Avanpost'),
            ('short tail', 9, 10, b'post'),
        ]
        for name, offset, size, expected in cases:
            with self.subTest(name):
                buf = bytearray(size)
                n = f.read_at(buf, offset)
                self.assertEqual(bytes(buf[:n]), expected)

        self.assertEqual(f.tell(), 0)

    def test_read_at_end(self):
        f = make_file()
        with self.assertRaises(EndOfDataError):
            f.read_at(bytearray(5), 13)
        with self.assertRaises(EndOfDataError):
            f.read_at(bytearray(5), 100)

    def test_read_at_negative_offset(self):
        f = make_file()
        with self.assertRaises(InvalidPositionError) as ctx:
            f.read_at(bytearray(5), -1)
        self.assertEqual(ctx.exception.position, -1)

    def test_read_at_closed(self):
        f = make_file()
        f.close()
        with self.assertRaises(ClosedFileError):
            f.read_at(bytearray(5), 0)


class TestFileWrite(unittest.TestCase):
    """Appending writes."""

    def test_write_appends(self):
        f = make_file(b'Avanpost')

        self.assertEqual(f.write(b' Moscow'), 7)
        self.assertEqual(f.getvalue(), b'Avanpost Moscow')

        f.close()
        with self.assertRaises(ClosedFileError):
            f.write(b'Ignored text')
        self.assertEqual(f.getvalue(), b'Avanpost Moscow')

    def test_write_does_not_move_cursor(self):
        f = make_file(b'abc')
        f.seek(1)
        f.write(b'def')
        self.assertEqual(f.tell(), 1)
        self.assertEqual(f.read_bytes(), b'bcdef')

    def test_write_ignores_cursor_position(self):
        f = make_file(b'abc')
        f.seek(0)
        f.write(b'X')
        self.assertEqual(f.getvalue(), b'abcX')

    def test_write_after_end_of_data_makes_data_readable(self):
        f = make_file(b'ab')
        self.assertEqual(f.read_bytes(), b'ab')
        f.write(b'cd')
        buf = bytearray(4)
        self.assertEqual(f.read(buf), 2)
        self.assertEqual(bytes(buf[:2]), b'cd')

    def test_write_rejects_str(self):
        f = make_file(b'')
        with self.assertRaises(TypeError):
            f.write('text')


class TestFileWriteAt(unittest.TestCase):
    """Positional writes."""

    def test_write_at_overwrites_in_place(self):
        f = make_file(b'Avanpost Moscow')
        self.assertEqual(f.write_at(b'London', 9), 6)
        self.assertEqual(f.getvalue(), b'Avanpost London')
        self.assertEqual(f.stat().size, 15)

    def test_write_at_grows_buffer(self):
        f = make_file(b'Avanpost')
        f.write_at(b'post Moscow', 4)
        self.assertEqual(f.getvalue(), b'Avanpost Moscow')

    def test_write_at_zero_fills_gap(self):
        f = make_file(b'abc')
        self.assertEqual(f.write_at(b'xy', 6), 2)
        self.assertEqual(f.getvalue(), b'abc\x00\x00\x00xy')

    def test_write_at_empty_data_past_end_grows(self):
        f = make_file(b'abc')
        self.assertEqual(f.write_at(b'', 5), 0)
        self.assertEqual(f.getvalue(), b'abc\x00\x00')

    def test_write_at_does_not_move_cursor(self):
        f = make_file(b'abcdef')
        f.seek(2)
        f.write_at(b'ZZ', 4)
        self.assertEqual(f.tell(), 2)

    def test_write_at_negative_offset(self):
        f = make_file(b'abc')
        with self.assertRaises(InvalidPositionError):
            f.write_at(b'x', -1)
        self.assertEqual(f.getvalue(), b'abc')

    def test_write_at_closed(self):
        f = make_file(b'abc')
        f.close()
        with self.assertRaises(ClosedFileError):
            f.write_at(b'x', 0)


class ShortSink:
    """Sink that accepts at most a fixed number of bytes per call."""

    def __init__(self, limit: int):
        self.limit = limit
        self.received = b''

    def write(self, data: bytes) -> int:
        chunk = data[:self.limit]
        self.received += chunk
        return len(chunk)


class FailingSink:
    def __init__(self, error: BaseException):
        self.error = error

    def write(self, data: bytes) -> int:
        raise self.error


class NoneSink:
    def __init__(self):
        self.received = b''

    def write(self, data: bytes) -> None:
        self.received += data


class TestFileWriteTo(unittest.TestCase):
    """Draining into a sink."""

    def test_write_to_remaining_content(self):
        f = make_file()
        f.seek(5)
        sink = io.BytesIO()

        self.assertEqual(f.write_to(sink), 8)
        self.assertEqual(sink.getvalue(), b'Avanpost')
        self.assertEqual(f.tell(), 13)

    def test_write_to_at_end_writes_nothing(self):
        f = make_file()
        f.seek(0, Whence.END)
        sink = io.BytesIO()
        self.assertEqual(f.write_to(sink), 0)
        self.assertEqual(sink.getvalue(), b'')

    def test_write_to_short_sink(self):
        f = make_file()
        sink = ShortSink(4)
        self.assertEqual(f.write_to(sink), 4)
        self.assertEqual(sink.received, b'Want')
        self.assertEqual(f.tell(), 4)

    def test_write_to_sink_returning_none(self):
        f = make_file()
        sink = NoneSink()
        self.assertEqual(f.write_to(sink), 13)
        self.assertEqual(sink.received, b'Want Avanpost')

    def test_write_to_propagates_sink_error(self):
        f = make_file()
        error = OSError(errno.EIO, "sink failed")

        with self.assertRaises(OSError) as ctx:
            f.write_to(FailingSink(error))

        self.assertIs(ctx.exception, error)
        self.assertEqual(f.tell(), 0)

    def test_write_to_partial_progress_before_error(self):
        f = make_file()
        error = BlockingIOError(errno.EAGAIN, "would block", 5)

        with self.assertRaises(BlockingIOError) as ctx:
            f.write_to(FailingSink(error))

        self.assertIs(ctx.exception, error)
        self.assertEqual(f.tell(), 5)

    def test_write_to_closed(self):
        f = make_file()
        f.close()
        with self.assertRaises(ClosedFileError):
            f.write_to(io.BytesIO())


class TestFileSeek(unittest.TestCase):
    """Cursor positioning."""

    def setUp(self):
        self.f = make_file(b'Avanpost Moscow')

    def test_seek_start(self):
        self.assertEqual(self.f.seek(9), 9)
        self.assertEqual(self.f.read_bytes(), b'Moscow')

    def test_seek_current(self):
        self.f.seek(4)
        self.assertEqual(self.f.seek(5, Whence.CURRENT), 9)
        self.assertEqual(self.f.seek(-9, Whence.CURRENT), 0)

    def test_seek_end(self):
        self.assertEqual(self.f.seek(-6, Whence.END), 9)
        self.assertEqual(self.f.seek(0, io.SEEK_END), 15)

    def test_seek_to_zero_always_succeeds(self):
        for position in (0, 7, 15):
            with self.subTest(position=position):
                self.f.seek(position)
                self.assertEqual(self.f.seek(0, Whence.START), 0)
                self.assertEqual(self.f.tell(), 0)

    def test_seek_past_end_is_clamped(self):
        self.assertEqual(self.f.seek(16, Whence.START), 15)
        self.assertEqual(self.f.seek(100, Whence.END), 15)
        self.assertEqual(self.f.stat().size, 15)

    def test_seek_negative_position(self):
        self.f.seek(3)
        with self.assertRaises(InvalidPositionError) as ctx:
            self.f.seek(-1, Whence.START)
        self.assertEqual(ctx.exception.position, -1)
        self.assertEqual(self.f.tell(), 3)

        with self.assertRaises(InvalidPositionError):
            self.f.seek(-16, Whence.END)
        self.assertEqual(self.f.tell(), 3)

    def test_seek_invalid_whence(self):
        with self.assertRaises(InvalidWhenceError) as ctx:
            self.f.seek(0, 3)
        self.assertEqual(ctx.exception.whence, 3)

    def test_seek_closed_checked_before_whence(self):
        self.f.close()
        with self.assertRaises(ClosedFileError):
            self.f.seek(0, 42)


class TestFileClose(unittest.TestCase):
    """Closed state."""

    def test_close_twice(self):
        f = make_file()
        self.assertIsNone(f.close())
        self.assertTrue(f.closed)
        with self.assertRaises(ClosedFileError) as ctx:
            f.close()
        self.assertEqual(ctx.exception.operation, 'close')
        self.assertTrue(f.closed)

    def test_close_after_other_operations(self):
        f = make_file()
        f.read(bytearray(3))
        f.write(b'!')
        f.seek(0, Whence.END)
        f.close()
        with self.assertRaises(ClosedFileError):
            f.close()

    def test_context_manager_closes(self):
        with make_file() as f:
            self.assertFalse(f.closed)
        self.assertTrue(f.closed)

    def test_context_manager_after_explicit_close(self):
        with make_file() as f:
            f.close()
        self.assertTrue(f.closed)

    def test_operations_after_close(self):
        f = make_file()
        f.close()
        for operation in (f.tell, f.read_bytes):
            with self.subTest(operation=operation.__name__):
                with self.assertRaises(ClosedFileError):
                    operation()


class TestFileStat(unittest.TestCase):
    """Metadata."""

    def test_stat(self):
        mod_time = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        f = MemoryFile(b'hello', name='a/b.txt', mod_time=mod_time)

        info = f.stat()
        self.assertEqual(info.name, 'a/b.txt')
        self.assertEqual(info.size, 5)
        self.assertEqual(info.mode, DEFAULT_FILE_MODE)
        self.assertEqual(info.mod_time, mod_time)
        self.assertFalse(info.is_dir)

    def test_stat_after_close(self):
        f = make_file(b'abc')
        f.write(b'de')
        f.close()
        self.assertEqual(f.stat().size, 5)
        self.assertEqual(f.size, 5)

    def test_mod_time_not_updated_by_writes(self):
        f = make_file(b'abc')
        before = f.stat().mod_time
        f.write(b'more')
        f.write_at(b'x', 10)
        self.assertEqual(f.stat().mod_time, before)

    def test_st_mode_is_regular_file(self):
        info = make_file().stat()
        self.assertEqual(info.st_mode & 0o777, 0o644)
        self.assertEqual(info.st_mode & 0o170000, 0o100000)
        self.assertEqual(info.to_dict()['mode'], '0o644')


class TestGetValue(unittest.TestCase):
    """Whole-buffer snapshots."""

    def test_getvalue_is_snapshot(self):
        f = make_file(b'abc')
        snapshot = f.getvalue()
        f.write(b'def')
        self.assertEqual(snapshot, b'abc')
        self.assertEqual(f.getvalue(), b'abcdef')

    def test_getvalue_after_close(self):
        f = make_file(b'abc')
        f.close()
        self.assertEqual(f.getvalue(), b'abc')

    def test_constructor_copies_input(self):
        source = bytearray(b'abc')
        f = MemoryFile(source)
        source[0] = ord('X')
        self.assertEqual(f.getvalue(), b'abc')


class TestReadBytes(unittest.TestCase):

    def test_read_bytes(self):
        f = make_file()
        self.assertEqual(f.read_bytes(4), b'Want')
        self.assertEqual(f.read_bytes(), b' Avanpost')
        self.assertEqual(f.read_bytes(), b'')
        self.assertEqual(f.read_bytes(3), b'')

    def test_read_bytes_zero(self):
        f = make_file()
        self.assertEqual(f.read_bytes(0), b'')
        self.assertEqual(f.tell(), 0)

    def test_repr(self):
        f = make_file()
        self.assertIn("name='test.txt'", repr(f))
        self.assertIn('open', repr(f))
        f.close()
        self.assertIn('closed', repr(f))

    def test_io_capabilities(self):
        f = make_file()
        self.assertTrue(f.readable())
        self.assertTrue(f.writable())
        self.assertTrue(f.seekable())


if __name__ == '__main__':
    unittest.main()
