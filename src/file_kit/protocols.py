"""Protocols for pluggable collaborators.

Available protocols:
    ArchiveExtractor: Coroutine function extracting an archive into a
        directory and reporting success as a boolean
"""

from pathlib import Path
from typing import Protocol


class ArchiveExtractor(Protocol):
    """Extract ``archive`` into ``destination``.

    Implementations return ``False`` when the archive could not be
    extracted and raise only when the extraction step cannot run at all.
    """

    async def __call__(self, archive: Path, destination: Path) -> bool: ...
