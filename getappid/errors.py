"""
Exceptions raised by get-application-id.

File-level problems (missing file, unreadable file, no matching line) are
reported through ExtractionResult statuses; only the conditions below
escape to the caller.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ExtractionResult


class GetAppIdError(Exception):
    """Base exception for get-application-id errors."""
    def __init__(self, message: str, file_path: str = ""):
        self.message = message
        self.file_path = file_path
        super().__init__(f"{message} ({file_path})" if file_path else message)


class ConfigurationError(GetAppIdError):
    """Invalid options or config file."""
    pass


class ApplicationIdNotFoundError(GetAppIdError):
    """No identifier could be extracted with the given options."""

    DEFAULT_MESSAGE = "Impossible to find the applicationId with the specified properties"

    def __init__(self, result: Optional["ExtractionResult"] = None,
                 message: str = DEFAULT_MESSAGE):
        self.result = result
        file_path = result.build_file if result and result.build_file else ""
        super().__init__(message, file_path)
