"""Zip archive extraction.

Two interchangeable ``ArchiveExtractor`` implementations:

- :func:`unzip` runs the platform extraction command in a subprocess
  (PowerShell ``Expand-Archive`` on Windows, ``unzip`` elsewhere).
- :func:`extract_zip` extracts in-process with :mod:`zipfile`, so it has
  no dependency on external tools.

Both report a failed extraction by returning False. They raise only when
the extraction cannot be started at all.
"""

import asyncio
import sys
import zipfile
from pathlib import Path

from file_kit.constants import (
    EXTRACTOR_COMMAND,
    EXTRACTOR_ZIPFILE,
    STDERR_PREVIEW_MAX,
)
from file_kit.exceptions import ConfigurationError
from file_kit.logger import get_logger
from file_kit.protocols import ArchiveExtractor
from file_kit.types import PathLike

logger = get_logger(__name__)


def build_unzip_command(
    archive: PathLike, destination: PathLike
) -> list[str]:
    """Return the platform extraction command line."""
    if sys.platform == "win32":
        return [
            "PowerShell",
            "Expand-Archive",
            "-Path",
            str(archive),
            "-DestinationPath",
            str(destination),
        ]
    return ["unzip", str(archive), "-d", str(destination)]


async def unzip(archive: PathLike, destination: PathLike) -> bool:
    """Extract a zip archive with the platform extraction command.

    Output of the command is captured, never shown. Existing files in
    ``destination`` are not overwritten; the command fails instead.

    Args:
        archive: Path to the .zip archive
        destination: Directory receiving the extracted contents

    Returns:
        True when the command exited with status 0

    Raises:
        OSError: If the command cannot be started (e.g. ``unzip`` is not
            installed)

    """
    cmd = build_unzip_command(archive, destination)
    logger.debug("Running extraction command: %s", " ".join(cmd))

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    _, stderr = await process.communicate()

    if process.returncode != 0:
        stderr_text = stderr.decode("utf-8", errors="ignore") if stderr else ""
        logger.debug(
            "Extraction command exited with code %s: %s",
            process.returncode,
            stderr_text[:STDERR_PREVIEW_MAX],
        )
        return False

    return True


def _extract_zip_sync(archive: Path, destination: Path) -> bool:
    try:
        with zipfile.ZipFile(archive) as zf:
            zf.extractall(destination)
    except zipfile.BadZipFile as e:
        logger.debug("Not a valid zip archive %s: %s", archive, e)
        return False
    return True


async def extract_zip(archive: PathLike, destination: PathLike) -> bool:
    """Extract a zip archive in-process in a worker thread.

    Member names are sanitized by :mod:`zipfile`, so absolute paths and
    ``..`` components stay inside ``destination``.

    Args:
        archive: Path to the .zip archive
        destination: Directory receiving the extracted contents

    Returns:
        True on success, False if the file is not a valid zip archive

    Raises:
        OSError: If the archive cannot be read or files cannot be written

    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, _extract_zip_sync, Path(archive), Path(destination)
    )


_EXTRACTORS: dict[str, ArchiveExtractor] = {
    EXTRACTOR_ZIPFILE: extract_zip,
    EXTRACTOR_COMMAND: unzip,
}


def get_extractor(name: str) -> ArchiveExtractor:
    """Look up an extractor by its settings name.

    Args:
        name: ``"zipfile"`` or ``"command"``

    Raises:
        ConfigurationError: For an unknown name

    """
    try:
        return _EXTRACTORS[name]
    except KeyError:
        msg = f"Unknown extractor {name!r}"
        raise ConfigurationError(msg) from None
