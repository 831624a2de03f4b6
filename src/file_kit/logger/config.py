"""Bootstrap settings for the logging system.

Levels and the log file path come from constants and environment
variables, so handlers can be installed before settings.conf is read.
The command-line runner passes the settings.conf levels explicitly.
"""

import os
from pathlib import Path

from file_kit.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
)


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and log file path.

    Environment Variable Override:
        FILE_KIT_LOG_LEVEL: console level, e.g. DEBUG while running tests
        FILE_KIT_LOG_DIR: directory holding file-kit.log

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    console_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL).upper()

    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / DEFAULT_CONFIG_SUBDIR
            / CONFIG_DIR_NAME
            / "logs"
            / LOG_FILE_NAME
        )

    return console_level, DEFAULT_LOG_LEVEL, log_path
