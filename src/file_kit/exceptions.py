"""Exception classes for file-kit operations.

Filesystem wrappers let the native ``OSError`` family and JSON decode
errors through unchanged. The classes below cover the composite archive
operations and the configuration layer.
"""


class FileKitError(Exception):
    """Base exception for file-kit operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path or URL the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class DownloadError(FileKitError):
    """Raised when an archive cannot be downloaded."""

    error_prefix = "Download failed"


class EmptyResponseError(DownloadError):
    """Raised when the response carries no body."""


class ExtractionError(FileKitError):
    """Raised when an archive extraction reports failure."""

    error_prefix = "Extraction failed"


class ConfigurationError(FileKitError):
    """Raised for invalid settings or logging setup failures."""

    error_prefix = "Configuration error"
