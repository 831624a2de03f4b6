"""Global configuration manager for INI settings.

Settings live in ``~/.config/file-kit/settings.conf`` (or
``$FILE_KIT_CONFIG_DIR/settings.conf``). A missing file means defaults;
the file is only written by ``save_default_config``.
"""

import configparser
import logging
import os
from pathlib import Path

from file_kit.constants import (
    CHUNK_SIZE,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_EXTRACTOR,
    DEFAULT_FILE_LOGGING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_CONFIG_DIR,
    EXTRACTOR_COMMAND,
    EXTRACTOR_ZIPFILE,
    KEY_CHUNK_SIZE,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_EXTRACTOR,
    KEY_FILE_LOGGING,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_ARCHIVE,
    SECTION_DEFAULT,
    SECTION_NETWORK,
    VALID_LOG_LEVELS,
)
from file_kit.exceptions import ConfigurationError
from file_kit.types import GlobalConfig

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]


def default_config_dir() -> Path:
    """Return the configuration directory, honoring FILE_KIT_CONFIG_DIR."""
    env_dir = os.getenv(ENV_CONFIG_DIR)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / DEFAULT_CONFIG_SUBDIR / CONFIG_DIR_NAME


class ConfigManager:
    """Manages the global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to default_config_dir())

        """
        self.config_dir = config_dir or default_config_dir()
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_FILE_LOGGING: str(DEFAULT_FILE_LOGGING).lower(),
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_ARCHIVE: {
                KEY_EXTRACTOR: DEFAULT_EXTRACTOR,
                KEY_CHUNK_SIZE: str(CHUNK_SIZE),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with the defaults dictionary."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: value
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, subvalue)

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration, overlaying settings.conf on defaults.

        Returns:
            Typed global configuration

        Raises:
            ConfigurationError: If the file cannot be parsed or holds
                invalid values

        """
        config = self._create_config_from_defaults(
            self.get_default_global_config()
        )

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                msg = f"Invalid settings file: {e}"
                raise ConfigurationError(
                    msg, target=str(self.settings_file)
                ) from e
            logger.debug("Loaded settings from %s", self.settings_file)

        return self._convert_to_global_config(config)

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert and validate parsed values into a GlobalConfig."""
        try:
            log_level = config.get(SECTION_DEFAULT, KEY_LOG_LEVEL).upper()
            console_level = config.get(
                SECTION_DEFAULT, KEY_CONSOLE_LOG_LEVEL
            ).upper()
            file_logging = config.getboolean(SECTION_DEFAULT, KEY_FILE_LOGGING)
            timeout_seconds = config.getint(
                SECTION_NETWORK, KEY_TIMEOUT_SECONDS
            )
            extractor = config.get(SECTION_ARCHIVE, KEY_EXTRACTOR).strip()
            chunk_size = config.getint(SECTION_ARCHIVE, KEY_CHUNK_SIZE)
        except ValueError as e:
            msg = f"Invalid value: {e}"
            raise ConfigurationError(
                msg, target=str(self.settings_file)
            ) from e

        for level in (log_level, console_level):
            if level not in VALID_LOG_LEVELS:
                msg = f"Unknown log level {level!r}"
                raise ConfigurationError(msg, target=str(self.settings_file))

        if extractor not in (EXTRACTOR_ZIPFILE, EXTRACTOR_COMMAND):
            msg = f"Unknown extractor {extractor!r}"
            raise ConfigurationError(msg, target=str(self.settings_file))

        if timeout_seconds <= 0 or chunk_size <= 0:
            msg = "timeout_seconds and chunk_size must be positive"
            raise ConfigurationError(msg, target=str(self.settings_file))

        return {
            "log_level": log_level,
            "console_log_level": console_level,
            "file_logging": file_logging,
            "network": {"timeout_seconds": timeout_seconds},
            "archive": {"extractor": extractor, "chunk_size": chunk_size},
        }

    def save_default_config(self) -> Path:
        """Write a settings.conf holding the default values.

        Returns:
            Path of the written settings file

        """
        config = self._create_config_from_defaults(
            self.get_default_global_config()
        )
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write("# file-kit settings\n")
            config.write(f)
        logger.debug("Wrote default settings to %s", self.settings_file)
        return self.settings_file
