"""Main logger module providing public API functions.

- get_logger(): Get a logger under the ``file_kit`` package root
- setup_logging(): Install handlers with the QueueHandler architecture
- flush_all_handlers(): Wait for queued records to be written
- clear_logger_state(): Restore the library defaults (used by tests)

Imported as a library, file_kit only attaches a NullHandler to its
package root and lets records propagate to the host application's
handlers. setup_logging() is called by the command-line entry point,
which owns the process.
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from file_kit.constants import LOG_ROOT_NAME
from file_kit.logger.config import load_log_settings
from file_kit.logger.handlers import setup_root_logger
from file_kit.logger.state import get_state

_FLUSH_TIMEOUT = 5.0


def _install_library_defaults() -> None:
    """Reset the package root to a NullHandler that propagates."""
    root_logger = logging.getLogger(LOG_ROOT_NAME)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.addHandler(logging.NullHandler())
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


_install_library_defaults()


def flush_all_handlers() -> None:
    """Flush all handlers owned by the QueueListener.

    Waits for the queue to drain, then flushes every handler so records
    are on disk before the caller continues. Does nothing when
    setup_logging() has not run.
    """
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > _FLUSH_TIMEOUT:
            break
        time.sleep(0.01)

    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = LOG_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
    *,
    force: bool = False,
) -> logging.Logger:
    """Install the file-kit handlers and return the named logger.

    Replaces the package root's NullHandler with a QueueHandler whose
    listener thread owns a console handler and, optionally, a rotating
    file handler. The root stops propagating, so only call this from an
    application entry point. Later calls are no-ops unless ``force``
    rebuilds the handlers.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to write a rotating log file
        force: Replace handlers of an already initialized root logger

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if force and state.queue_listener is not None:
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None
            state.root_initialized = False

        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = LOG_ROOT_NAME) -> logging.Logger:
    """Get a logger instance without touching handlers.

    Use __name__ as the logger name so records land under ``file_kit``:
        >>> logger = get_logger(__name__)
        >>> logger.info("Extracting %s", archive)

    """
    return logging.getLogger(name)


def clear_logger_state() -> None:
    """Undo setup_logging() for testing purposes.

    Stops the QueueListener, closes the handlers of every ``file_kit``
    logger and puts the NullHandler back on the package root. Logger
    objects stay registered because modules hold them at import time.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(f"{LOG_ROOT_NAME}."):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)

        _install_library_defaults()
