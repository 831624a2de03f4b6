"""Centralized constants module for file-kit.

This module serves as the single source of truth for shared constants
across the file-kit codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from file_kit.constants import CHUNK_SIZE
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Config directory under the user's home directory
DEFAULT_CONFIG_SUBDIR: Final[str] = ".config"
CONFIG_DIR_NAME: Final[str] = "file-kit"

# Environment overrides
ENV_CONFIG_DIR: Final[str] = "FILE_KIT_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "FILE_KIT_LOG_DIR"
ENV_LOG_LEVEL: Final[str] = "FILE_KIT_LOG_LEVEL"

# Defaults
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_FILE_LOGGING: Final[bool] = False
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_EXTRACTOR: Final[str] = "zipfile"

# Config section and key names
SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_ARCHIVE: Final[str] = "archive"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_FILE_LOGGING: Final[str] = "file_logging"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_EXTRACTOR: Final[str] = "extractor"
KEY_CHUNK_SIZE: Final[str] = "chunk_size"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Download / Archive Constants
# =============================================================================

CHUNK_SIZE: Final[int] = 8192

# Temp archive names are "<prefix><random hex><suffix>"
TEMP_ARCHIVE_PREFIX: Final[str] = "_temp_"
TEMP_ARCHIVE_SUFFIX: Final[str] = ".zip"

EXTRACTOR_ZIPFILE: Final[str] = "zipfile"
EXTRACTOR_COMMAND: Final[str] = "command"

# Preview size for subprocess stderr in log messages
STDERR_PREVIEW_MAX: Final[int] = 200

# =============================================================================
# Logging Constants
# =============================================================================

LOG_ROOT_NAME: Final[str] = "file_kit"
LOG_FILE_NAME: Final[str] = "file-kit.log"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
