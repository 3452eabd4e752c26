"""
MemFS Configuration Loader

Configuration management for the in-memory filesystem:
- JSON configuration file loading
- Validation of section names and value types
- Default value handling
- Runtime configuration updates by dot-notation key

Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from memfs.exceptions import ConfigValidationError
from memfs.logger import LogLevel


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True
    buffer_size: int = 1000


@dataclass
class FilesystemConfig:
    """
    Filesystem configuration settings.

    ``files`` maps fixture paths to text content. The content is
    encoded with ``encoding`` when a registry is built from it.
    """
    encoding: str = "utf-8"
    files: dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Main configuration container."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)


# Expected types per section; None is accepted where the default is None.
_SECTION_TYPES: dict[str, dict[str, tuple[type, ...]]] = {
    'logging': {
        'level': (str,),
        'log_file': (str, type(None)),
        'console_output': (bool,),
        'use_colors': (bool,),
        'buffer_size': (int,),
    },
    'filesystem': {
        'encoding': (str,),
        'files': (dict,),
    },
}

_SECTION_CLASSES = {
    'logging': LoggingConfig,
    'filesystem': FilesystemConfig,
}


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('memfs.json')
        >>> config.logging.level
        'INFO'
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigValidationError: If the file cannot be read, parsed or validated
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigValidationError(
                f"Configuration file not found: {config_path}"
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(
                f"Invalid JSON in configuration file: {e}"
            ) from e
        except OSError as e:
            raise ConfigValidationError(
                f"Cannot read configuration file: {e}"
            ) from e

        return self.load_dict(data)

    def load_dict(self, data: Any) -> Config:
        """Load configuration from an already parsed mapping."""
        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: Any) -> Config:
        """Parse and validate configuration data into a Config object."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")

        config = Config()

        for section, values in data.items():
            if section not in _SECTION_TYPES:
                raise ConfigValidationError(
                    f"Unknown configuration section: {section}", key=section
                )
            if not isinstance(values, dict):
                raise ConfigValidationError(
                    f"Configuration section must be an object: {section}", key=section
                )

            expected = _SECTION_TYPES[section]
            for name, value in values.items():
                key = f"{section}.{name}"
                if name not in expected:
                    raise ConfigValidationError(f"Unknown configuration key: {key}", key=key)
                self._check_type(key, value, expected[name])

            setattr(config, section, _SECTION_CLASSES[section](**values))

        self._validate(config)
        return config

    @staticmethod
    def _check_type(key: str, value: Any, types: tuple[type, ...]) -> None:
        # bool is an int subclass; reject it where a number is expected
        if isinstance(value, bool) and bool not in types:
            raise ConfigValidationError(f"Invalid type for {key}", key=key)
        if not isinstance(value, types):
            raise ConfigValidationError(f"Invalid type for {key}", key=key)

    @staticmethod
    def _validate(config: Config) -> None:
        """Cross-field checks that type validation cannot express."""
        try:
            LogLevel.from_name(config.logging.level)
        except ValueError as e:
            raise ConfigValidationError(str(e), key='logging.level') from e

        if config.logging.buffer_size <= 0:
            raise ConfigValidationError(
                "Buffer size must be positive", key='logging.buffer_size'
            )

        for path, content in config.filesystem.files.items():
            if not isinstance(content, str):
                raise ConfigValidationError(
                    f"Fixture content must be a string: {path}",
                    key='filesystem.files'
                )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'logging.level')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, '__dataclass_fields__') and hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Note:
            This modifies configuration in memory only.
        """
        parts = key.split('.')
        if len(parts) != 2 or parts[0] not in _SECTION_TYPES:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        section, name = parts
        expected = _SECTION_TYPES[section]
        if name not in expected:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)
        self._check_type(key, value, expected[name])

        setattr(getattr(self._config, section), name, value)

    def reset(self) -> None:
        """Restore the default configuration."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            section.name: {
                f.name: getattr(getattr(self._config, section.name), f.name)
                for f in fields(getattr(self._config, section.name))
            }
            for section in fields(self._config)
        }


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
