"""HTTP session utilities for file-kit.

Creates aiohttp sessions with timeouts taken from the global
configuration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from file_kit.constants import DEFAULT_TIMEOUT_SECONDS
from file_kit.types import GlobalConfig


def build_timeout(timeout_seconds: int) -> aiohttp.ClientTimeout:
    """Build a ClientTimeout scaled from the connect timeout.

    Args:
        timeout_seconds: Connect timeout; reads may take 3x that, the
            whole transfer 60x

    """
    return aiohttp.ClientTimeout(
        total=timeout_seconds * 60,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig | None = None,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create a configured HTTP session.

    Args:
        global_config: Global configuration dictionary; built-in defaults
            when omitted

    Yields:
        Configured aiohttp.ClientSession, closed on exit

    """
    timeout_seconds = DEFAULT_TIMEOUT_SECONDS
    if global_config is not None:
        timeout_seconds = global_config["network"]["timeout_seconds"]

    async with aiohttp.ClientSession(
        timeout=build_timeout(timeout_seconds),
    ) as session:
        yield session
