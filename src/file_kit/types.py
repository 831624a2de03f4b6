"""Centralized type definitions for file-kit.

This module contains the type aliases and TypedDict definitions used
across the package to ensure consistency and avoid duplication.
"""

import os
from typing import TypeAlias, TypedDict

# =============================================================================
# Path and JSON Types
# =============================================================================

PathLike: TypeAlias = str | os.PathLike[str]

JSONValue: TypeAlias = (
    "dict[str, JSONValue] | list[JSONValue] | str | int | float | bool | None"
)
JSONObject: TypeAlias = "dict[str, JSONValue]"

# =============================================================================
# Configuration Types
# =============================================================================


class NetworkConfig(TypedDict):
    """Network configuration options."""

    timeout_seconds: int


class ArchiveConfig(TypedDict):
    """Archive download and extraction options."""

    extractor: str
    chunk_size: int


class GlobalConfig(TypedDict):
    """Global file-kit configuration."""

    log_level: str
    console_log_level: str
    file_logging: bool
    network: NetworkConfig
    archive: ArchiveConfig
