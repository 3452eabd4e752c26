"""
MemFS Core Module

Configuration shared by the filesystem and logging layers.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    FilesystemConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'FilesystemConfig',
    'LoggingConfig',
    'get_config',
]
