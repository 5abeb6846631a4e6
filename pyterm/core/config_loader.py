"""
PyTerm Configuration Loader

Configuration management for the terminal:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, List
import threading

from pyterm.exceptions import ConfigError


@dataclass
class TerminalConfig:
    """Terminal identification settings."""
    name: str = "PyTerm"
    version: str = "1.0.0"
    welcome_message: str = "Welcome to the secure terminal"


@dataclass
class NamespaceConfig:
    """Virtual namespace settings."""
    home_path: str = "/home"
    seed_directories: List[str] = field(default_factory=lambda: [
        "/home", "/bin", "/etc"
    ])
    seed_sample_files: bool = True


@dataclass
class SessionConfig:
    """Per-session shell settings."""
    sudo_password: str = "sangeeth"
    prompt: str = "$ "
    history_size: int = 1000
    themes: List[str] = field(default_factory=lambda: [
        "matrix", "sunset", "dracula", "light"
    ])
    default_theme: str = "matrix"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the terminal.
    """
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    namespace: NamespaceConfig = field(default_factory=NamespaceConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_section(section_cls, data: dict[str, Any], current: Any) -> Any:
    """Build a section dataclass, keeping current values for missing keys."""
    if not isinstance(data, dict):
        raise ConfigError(
            f"Section for {section_cls.__name__} must be an object"
        )
    values = {}
    for f in fields(section_cls):
        default = getattr(current, f.name)
        if f.name in data:
            _check_value(f"{section_cls.__name__}.{f.name}", data[f.name], default)
            values[f.name] = data[f.name]
        else:
            values[f.name] = default
    return section_cls(**values)


def _check_value(key: str, value: Any, default: Any) -> None:
    """Reject a value whose JSON type differs from the setting's default."""
    if default is None:
        ok = value is None or isinstance(value, str)
    elif isinstance(default, bool) or isinstance(value, bool):
        ok = isinstance(value, bool) and isinstance(default, bool)
    elif isinstance(default, list):
        ok = isinstance(value, list) and all(isinstance(item, str) for item in value)
    else:
        ok = isinstance(value, type(default))

    if not ok:
        raise ConfigError(
            f"Invalid value for {key}: {value!r}",
            context={'expected': type(default).__name__ if default is not None else 'str'}
        )


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files and providing
    runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.namespace.home_path)
        /home
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    _SECTIONS = {
        'terminal': TerminalConfig,
        'namespace': NamespaceConfig,
        'session': SessionConfig,
        'logging': LoggingConfig,
    }

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
            ConfigError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                config_path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {e}",
                config_path=config_path
            )
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file: {e}",
                config_path=config_path
            )

        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration root must be an object",
                config_path=config_path
            )

        self._config = self.parse(data)
        self._loaded = True
        return self._config

    def parse(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into a Config object."""
        config = Config()

        for name, section_cls in self._SECTIONS.items():
            if name in data:
                section = _parse_section(section_cls, data[name], getattr(config, name))
                setattr(config, name, section)

        return config

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
            key: Dot-notation key (e.g., 'session.sudo_password')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Changes are not written back to disk.

        Raises:
            ConfigError: If the key does not name an existing setting
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigError(f"Invalid configuration key: {key}")

    def reset(self) -> None:
        """Drop any loaded configuration and return to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
