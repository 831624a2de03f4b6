"""Main CLI entry point for file-kit."""

import asyncio
import sys

from file_kit.cli import CLIRunner
from file_kit.exceptions import FileKitError
from file_kit.logger import flush_all_handlers, get_logger, setup_logging

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI asynchronously and return the exit status."""
    try:
        return await CLIRunner().run()
    except (FileKitError, OSError, ValueError) as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1


def main() -> None:
    """Run the CLI application.

    Bootstrap handlers are installed first so errors raised while loading
    settings.conf are still shown; the runner rebuilds them from the
    settings afterwards. uvloop drives the event loop where it is
    available (not on Windows).
    """
    setup_logging()
    try:
        if sys.platform == "win32":
            exit_code = asyncio.run(async_main())
        else:
            import uvloop  # noqa: PLC0415

            exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        exit_code = 1
    finally:
        flush_all_handlers()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
