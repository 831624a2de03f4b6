"""Console formatter for the file-kit command."""

import logging

from file_kit.constants import LOG_COLORS


class HybridConsoleFormatter(logging.Formatter):
    """Print INFO records as bare messages, everything else structured.

    Non-INFO records use ``fmt`` with an ANSI-coloured level name. The
    record is left unchanged, so the file handler sees the plain name.

    Example Output:
        INFO:     "File successfully downloaded to /tmp/out"
        WARNING:  "12:30:45 - file_kit.download - WARNING - Extraction ..."

    """

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` according to its level."""
        if record.levelno == logging.INFO:
            return record.getMessage()

        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{color}{levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname
