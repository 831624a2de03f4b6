"""CLI argument parser for file-kit."""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from file_kit.constants import (
    EXTRACTOR_COMMAND,
    EXTRACTOR_ZIPFILE,
    VALID_LOG_LEVELS,
)
from file_kit.types import GlobalConfig


class CLIParser:
    """Command-line argument parser for file-kit."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser.

        Args:
            global_config: Loaded settings, used for option defaults

        """
        self.global_config = global_config

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; sys.argv[1:] when None

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="file-kit",
            description="Filesystem and zip archive helpers",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Download a zip archive and extract it
  %(prog)s fetch https://example.com/data.zip ./data

  # Extract a local archive with the system unzip command
  %(prog)s extract ./data.zip ./data --extractor command
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show file-kit version and exit",
        )
        parser.add_argument(
            "--log-level",
            choices=VALID_LOG_LEVELS,
            type=str.upper,
            default=None,
            help="Console log level (overrides settings.conf)",
        )

    def _add_extractor_option(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--extractor",
            choices=(EXTRACTOR_ZIPFILE, EXTRACTOR_COMMAND),
            default=self.global_config["archive"]["extractor"],
            help="Extraction backend (default: %(default)s)",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        fetch_parser = subparsers.add_parser(
            "fetch", help="Download a zip archive and extract it"
        )
        fetch_parser.add_argument(
            "url", help="Archive URL (http, https, file)"
        )
        fetch_parser.add_argument("destination", help="Target directory")
        self._add_extractor_option(fetch_parser)
        fetch_parser.add_argument(
            "--no-strict",
            dest="strict",
            action="store_false",
            help="Only warn when extraction fails",
        )

        extract_parser = subparsers.add_parser(
            "extract", help="Extract a local zip archive"
        )
        extract_parser.add_argument("archive", help="Path to the .zip file")
        extract_parser.add_argument("destination", help="Target directory")
        self._add_extractor_option(extract_parser)
