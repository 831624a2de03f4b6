"""Top-level package for file-kit.

Async filesystem helpers (existence checks, directory management, text and
JSON I/O, glob-based JSON loading, copy) and zip archive download and
extraction.

Usage:
    >>> from file_kit import fetch_and_extract_archive, read_json_file
    >>> await fetch_and_extract_archive("https://example.com/a.zip", "out")
    >>> data = await read_json_file("out/config.json")
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("file-kit")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

from file_kit.archive import extract_zip, get_extractor, unzip
from file_kit.download import download_to_temp, fetch_and_extract_archive
from file_kit.exceptions import (
    ConfigurationError,
    DownloadError,
    EmptyResponseError,
    ExtractionError,
    FileKitError,
)
from file_kit.fs import (
    copy,
    exists,
    mkdir,
    mkdir_recursive,
    read_file,
    read_json_file,
    read_json_files_from_path,
    read_text_file,
    remove,
    remove_recursive,
    write_json_file,
    write_text_file,
    write_text_file_recursive,
)
from file_kit.protocols import ArchiveExtractor
from file_kit.types import JSONObject, JSONValue, PathLike

__all__ = [
    "ArchiveExtractor",
    "ConfigurationError",
    "DownloadError",
    "EmptyResponseError",
    "ExtractionError",
    "FileKitError",
    "JSONObject",
    "JSONValue",
    "PathLike",
    "__version__",
    "copy",
    "download_to_temp",
    "exists",
    "extract_zip",
    "fetch_and_extract_archive",
    "get_extractor",
    "mkdir",
    "mkdir_recursive",
    "read_file",
    "read_json_file",
    "read_json_files_from_path",
    "read_text_file",
    "remove",
    "remove_recursive",
    "unzip",
    "write_json_file",
    "write_text_file",
    "write_text_file_recursive",
]
