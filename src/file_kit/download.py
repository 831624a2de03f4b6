"""Download a zip archive and extract it into a directory.

The archive is streamed to a uniquely named temporary file inside the
destination directory, handed to an ``ArchiveExtractor`` and deleted once
the extractor returns. Concurrent calls targeting the same destination do
not share a temporary file.

``http://`` and ``https://`` URLs are fetched with aiohttp; ``file://``
URLs are streamed from the local filesystem.

Options the caller leaves out (extractor, chunk size, HTTP session) are
taken from settings.conf.
"""

import asyncio
import contextlib
import uuid
from collections.abc import AsyncIterator
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

import aiofiles
import aiofiles.os
import aiohttp

from file_kit.archive import get_extractor
from file_kit.config import ConfigManager
from file_kit.constants import TEMP_ARCHIVE_PREFIX, TEMP_ARCHIVE_SUFFIX
from file_kit.exceptions import (
    DownloadError,
    EmptyResponseError,
    ExtractionError,
)
from file_kit.fs import exists, mkdir_recursive, remove
from file_kit.http_session import create_http_session
from file_kit.logger import get_logger
from file_kit.protocols import ArchiveExtractor
from file_kit.types import GlobalConfig, PathLike

logger = get_logger(__name__)


def temp_archive_name() -> str:
    """Return a fresh temporary archive file name."""
    return f"{TEMP_ARCHIVE_PREFIX}{uuid.uuid4().hex}{TEMP_ARCHIVE_SUFFIX}"


def _is_file_url(url: str) -> bool:
    return urlparse(url).scheme == "file"


async def _load_global_config() -> GlobalConfig:
    """Read settings.conf in a worker thread."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, ConfigManager().load_global_config
    )


async def _iter_local_file(
    path: Path, chunk_size: int
) -> AsyncIterator[bytes]:
    async with aiofiles.open(path, mode="rb") as f:
        while chunk := await f.read(chunk_size):
            yield chunk


async def _write_stream(
    chunks: AsyncIterator[bytes], dest: Path, url: str
) -> None:
    """Write an async byte stream to ``dest``.

    The first chunk is read before ``dest`` is opened, so an empty body
    never leaves a file behind.

    Raises:
        EmptyResponseError: If the stream yields no data

    """
    first = await anext(chunks, b"")
    if not first:
        msg = "Response body is empty"
        raise EmptyResponseError(msg, target=url)

    async with aiofiles.open(dest, mode="wb") as f:
        await f.write(first)
        async for chunk in chunks:
            await f.write(chunk)


async def _download_http(
    session: aiohttp.ClientSession,
    url: str,
    dest: Path,
    chunk_size: int,
) -> None:
    async with session.get(url) as response:
        response.raise_for_status()
        logger.debug(
            "Downloading %s (%s bytes)",
            url,
            response.headers.get("Content-Length", "unknown"),
        )
        await _write_stream(
            response.content.iter_chunked(chunk_size), dest, url
        )


async def _remove_partial(path: Path) -> None:
    with contextlib.suppress(FileNotFoundError):
        await aiofiles.os.remove(path)
        logger.debug("Removed partial download: %s", path)


async def download_to_temp(
    url: str,
    destination: PathLike,
    *,
    session: aiohttp.ClientSession | None = None,
    chunk_size: int | None = None,
    global_config: GlobalConfig | None = None,
) -> Path:
    """Download ``url`` to a new temporary file inside ``destination``.

    Args:
        url: Source URL (http, https or file)
        destination: Existing directory that receives the temp file
        session: Session to use; one is created from settings when
            omitted and the URL needs HTTP
        chunk_size: Streaming chunk size in bytes; ``[archive] chunk_size``
            from settings when omitted
        global_config: Loaded settings; read from settings.conf when needed
            and omitted

    Returns:
        Path of the downloaded temporary file

    Raises:
        DownloadError: On HTTP status or transport failure
        EmptyResponseError: If the response has no body
        ConfigurationError: If settings are needed and settings.conf is
            invalid
        OSError: If a ``file://`` source cannot be read or the temp file
            cannot be written

    """
    is_file_url = _is_file_url(url)
    needs_config = chunk_size is None or (session is None and not is_file_url)
    if global_config is None and needs_config:
        global_config = await _load_global_config()
    if chunk_size is None:
        chunk_size = global_config["archive"]["chunk_size"]

    temp_path = Path(destination) / temp_archive_name()

    try:
        if is_file_url:
            source = Path(url2pathname(urlparse(url).path))
            await _write_stream(
                _iter_local_file(source, chunk_size), temp_path, url
            )
        elif session is not None:
            await _download_http(session, url, temp_path, chunk_size)
        else:
            async with create_http_session(global_config) as own_session:
                await _download_http(own_session, url, temp_path, chunk_size)
    except (aiohttp.ClientError, TimeoutError) as e:
        await _remove_partial(temp_path)
        raise DownloadError(str(e) or type(e).__name__, target=url) from e
    except BaseException:
        # Includes cancellation of the surrounding task
        await _remove_partial(temp_path)
        raise

    logger.info("File successfully downloaded to %s", destination)
    return temp_path


async def fetch_and_extract_archive(
    url: str,
    destination: PathLike,
    *,
    session: aiohttp.ClientSession | None = None,
    extractor: ArchiveExtractor | None = None,
    strict: bool = True,
    chunk_size: int | None = None,
) -> None:
    """Download a zip archive from ``url`` and extract it into ``destination``.

    Steps:
        1. Create ``destination`` (with parents) if it does not exist.
        2. Stream the archive to a temporary file inside ``destination``.
        3. Run ``extractor`` on the temporary file.
        4. Delete the temporary file, whatever the extractor reported.

    Args:
        url: Archive URL (http, https or file)
        destination: Directory receiving the archive contents
        session: Optional aiohttp session, left open afterwards
        extractor: Extraction step; ``[archive] extractor`` from settings
            when omitted (in-process zipfile extraction by default)
        strict: Raise ExtractionError when the extractor reports failure.
            With False the failure is only logged.
        chunk_size: Streaming chunk size in bytes; ``[archive] chunk_size``
            from settings when omitted

    Raises:
        DownloadError: On HTTP status or transport failure, no retry
        EmptyResponseError: If the response has no body
        ExtractionError: If extraction fails and ``strict`` is set
        ConfigurationError: If settings are needed and settings.conf is
            invalid
        OSError: If a directory or file operation fails, including the
            final deletion of the temporary file

    """
    global_config = None
    if (
        extractor is None
        or chunk_size is None
        or (session is None and not _is_file_url(url))
    ):
        global_config = await _load_global_config()
    if extractor is None:
        extractor = get_extractor(global_config["archive"]["extractor"])

    destination = Path(destination)
    if not await exists(destination):
        await mkdir_recursive(destination)

    temp_path = await download_to_temp(
        url,
        destination,
        session=session,
        chunk_size=chunk_size,
        global_config=global_config,
    )

    try:
        success = await extractor(temp_path, destination)
    finally:
        await remove(temp_path)

    if success:
        logger.debug("Extracted %s into %s", url, destination)
        return

    if strict:
        msg = "extractor reported failure"
        raise ExtractionError(msg, target=url)
    logger.warning("Extraction of %s into %s failed", url, destination)
