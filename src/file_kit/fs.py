"""Async filesystem convenience functions.

Each function is a thin wrapper over one filesystem primitive. File I/O
goes through aiofiles; tree operations (rmtree, copytree, glob) run in the
default thread executor so the event loop is never blocked.

Errors are not translated: the native ``OSError`` family and
``orjson.JSONDecodeError`` reach the caller unchanged. The only error
swallowed anywhere is ``FileNotFoundError`` inside :func:`exists`.
"""

import asyncio
import errno
import glob
import os
import shutil

import aiofiles
import aiofiles.os
import orjson

from file_kit.logger import get_logger
from file_kit.types import JSONValue, PathLike

logger = get_logger(__name__)


async def exists(path: PathLike) -> bool:
    """Check whether a file or directory exists at ``path``.

    Args:
        path: Path to test

    Returns:
        True if the path exists, False if it does not

    Raises:
        OSError: Any stat failure other than "not found", e.g.
            PermissionError

    """
    try:
        await aiofiles.os.stat(path)
    except FileNotFoundError:
        return False
    return True


async def mkdir(path: PathLike) -> None:
    """Create a single directory.

    Raises:
        FileExistsError: If the directory already exists
        FileNotFoundError: If the parent directory is missing

    """
    await aiofiles.os.mkdir(path)


async def mkdir_recursive(path: PathLike) -> None:
    """Create a directory and any missing parents (``mkdir -p``)."""
    await aiofiles.os.makedirs(path, exist_ok=True)


async def _is_real_dir(path: PathLike) -> bool:
    """Return True for a directory that is not a symlink."""
    if await aiofiles.os.path.islink(path):
        return False
    return await aiofiles.os.path.isdir(path)


async def remove(path: PathLike) -> None:
    """Remove a file or an empty directory.

    Raises:
        FileNotFoundError: If the path does not exist
        OSError: If the directory is not empty or access is denied

    """
    if await _is_real_dir(path):
        await aiofiles.os.rmdir(path)
    else:
        await aiofiles.os.remove(path)


async def remove_recursive(path: PathLike) -> None:
    """Remove a file, or a directory with all of its contents.

    Raises:
        FileNotFoundError: If the path does not exist

    """
    if await _is_real_dir(path):
        logger.debug("Removing directory tree: %s", path)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, shutil.rmtree, path)
    else:
        await aiofiles.os.remove(path)


async def read_file(file_path: PathLike) -> bytes:
    """Read a file as raw bytes."""
    async with aiofiles.open(file_path, mode="rb") as f:
        return await f.read()


async def read_text_file(file_path: PathLike) -> str:
    """Read a UTF-8 text file."""
    async with aiofiles.open(file_path, encoding="utf-8") as f:
        return await f.read()


async def read_json_file(file_path: PathLike) -> JSONValue:
    """Read a JSON file and parse it.

    Args:
        file_path: Path to the JSON file

    Returns:
        Parsed JSON value (usually a dict)

    Raises:
        orjson.JSONDecodeError: If the file is not valid JSON
        OSError: If the file cannot be read

    """
    return orjson.loads(await read_file(file_path))


async def read_json_files_from_path(pattern: PathLike) -> list[JSONValue]:
    """Read every JSON file matched by a glob pattern.

    ``**`` matches across directories. Results follow the order in which
    the filesystem yields the matches; they are not sorted.

    Args:
        pattern: Glob pattern, e.g. ``"data/**/*.json"``

    Returns:
        Parsed documents in match order

    Raises:
        orjson.JSONDecodeError: On the first file that fails to parse
        OSError: On the first file that fails to read

    """
    loop = asyncio.get_running_loop()
    matches = await loop.run_in_executor(
        None, lambda: glob.glob(os.fspath(pattern), recursive=True)
    )

    result: list[JSONValue] = []
    for match in matches:
        result.append(await read_json_file(match))
    return result


async def write_text_file(
    file_path: PathLike,
    content: str,
    *,
    create: bool = True,
) -> None:
    """Write text to a file, replacing its contents.

    Parent directories are never created; use :func:`mkdir_recursive`
    first when needed.

    Args:
        file_path: Destination file path
        content: Text to write
        create: When False, a missing file raises instead of being created

    Raises:
        FileNotFoundError: If the parent directory is missing, or the file
            is missing and ``create`` is False

    """
    if create:
        async with aiofiles.open(file_path, mode="w", encoding="utf-8") as f:
            await f.write(content)
        return

    async with aiofiles.open(file_path, mode="r+", encoding="utf-8") as f:
        await f.write(content)
        await f.truncate()


async def write_text_file_recursive(file_path: PathLike, content: str) -> None:
    """Write text to a file, creating the file when it does not exist.

    Despite the name, missing parent directories are not created.
    """
    await write_text_file(file_path, content, create=True)


async def write_json_file(
    file_path: PathLike,
    obj: JSONValue,
    *,
    pretty: bool = False,
) -> None:
    """Serialize ``obj`` as JSON and write it to ``file_path``.

    Output is compact unless ``pretty`` is set, which indents by two
    spaces.

    Raises:
        orjson.JSONEncodeError: If ``obj`` is not JSON serializable
        OSError: If the file cannot be written

    """
    option = orjson.OPT_INDENT_2 if pretty else None
    data = orjson.dumps(obj, option=option)
    async with aiofiles.open(file_path, mode="wb") as f:
        await f.write(data)


def _copy_sync(source: str, destination: str) -> None:
    if os.path.isdir(source):
        shutil.copytree(source, destination, symlinks=True)
        return

    if os.path.lexists(destination):
        raise FileExistsError(
            errno.EEXIST, os.strerror(errno.EEXIST), destination
        )
    shutil.copy2(source, destination)


async def copy(source_path: PathLike, destination_path: PathLike) -> None:
    """Copy a file or a whole directory tree.

    Args:
        source_path: File or directory to copy
        destination_path: Target path; must not exist yet

    Raises:
        FileExistsError: If ``destination_path`` already exists
        FileNotFoundError: If ``source_path`` does not exist

    """
    source = os.fspath(source_path)
    destination = os.fspath(destination_path)
    logger.debug("Copying %s -> %s", source, destination)

    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, _copy_sync, source, destination)
