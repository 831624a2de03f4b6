"""CLI runner for file-kit.

Routes parsed arguments to the library operations.
"""

from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path

from file_kit import __version__
from file_kit.archive import get_extractor
from file_kit.config import ConfigManager
from file_kit.download import fetch_and_extract_archive
from file_kit.exceptions import ExtractionError
from file_kit.fs import mkdir_recursive
from file_kit.logger import get_logger, setup_logging

from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Initialize CLI runner and load settings.

        Raises:
            ConfigurationError: If settings.conf is invalid

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()

    def _setup_logging(self, console_level: str | None) -> None:
        """Rebuild handlers from settings.conf and the --log-level flag."""
        setup_logging(
            console_level=console_level
            or self.global_config["console_log_level"],
            file_level=self.global_config["log_level"],
            enable_file_logging=self.global_config["file_logging"],
            force=True,
        )

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and run the selected command.

        Returns:
            Process exit status

        """
        args = CLIParser(self.global_config).parse_args(argv)

        if args.version:
            print(__version__)  # noqa: T201
            return 0

        self._setup_logging(args.log_level)

        if args.command == "fetch":
            await self._fetch(args)
        elif args.command == "extract":
            await self._extract(args)
        else:
            logger.error("No command given, see --help")
            return 1
        return 0

    async def _fetch(self, args: Namespace) -> None:
        await fetch_and_extract_archive(
            args.url,
            args.destination,
            extractor=get_extractor(args.extractor),
            strict=args.strict,
            chunk_size=self.global_config["archive"]["chunk_size"],
        )
        logger.info("Extracted %s into %s", args.url, args.destination)

    async def _extract(self, args: Namespace) -> None:
        destination = Path(args.destination)
        await mkdir_recursive(destination)

        extractor = get_extractor(args.extractor)
        if not await extractor(Path(args.archive), destination):
            msg = "extractor reported failure"
            raise ExtractionError(msg, target=args.archive)
        logger.info("Extracted %s into %s", args.archive, destination)
