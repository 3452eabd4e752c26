"""
File Info Module

Stat descriptor returned by in-memory file handles.

Version: 1.0.0
"""

import stat as stat_module
from dataclasses import dataclass
from datetime import datetime
from typing import Any


# Regular file, rw-r--r--
DEFAULT_FILE_MODE = 0o644


@dataclass(frozen=True)
class FileInfo:
    """
    Snapshot of a file's metadata at stat time.

    In-memory files have no directory semantics or permission model:
    ``mode`` is always DEFAULT_FILE_MODE and ``is_dir`` always False.
    """

    name: str
    size: int
    mod_time: datetime
    mode: int = DEFAULT_FILE_MODE
    is_dir: bool = False

    @property
    def st_mode(self) -> int:
        """Mode with the regular-file type bits, as os.stat() reports it."""
        return stat_module.S_IFREG | self.mode

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            'name': self.name,
            'size': self.size,
            'mode': oct(self.mode),
            'mod_time': self.mod_time.isoformat(),
            'is_dir': self.is_dir,
        }
