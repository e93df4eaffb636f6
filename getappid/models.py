"""
Data models for get-application-id.

This module defines the structures passed between the locator, the
extractor and the action:

- ExtractionRequest: where to look and what to look for
- ExtractionStatus: why an extraction produced (or did not produce) a value
- ExtractionResult: the outcome of a single extraction

An extraction has no lifecycle beyond one call: created, computed, returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Any

# Key under which the identifier is published to the caller's output mapping
APPLICATION_ID_KEY = "APPLICATION_ID"

DEFAULT_APP_FOLDER_NAME = "app"
DEFAULT_CONSTANT_NAME = "applicationId"
BUILD_FILE_NAME = "build.gradle"


class ExtractionStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FILE_NOT_FOUND = "file_not_found"
    READ_ERROR = "read_error"
    FLAVOR_BLOCK_NOT_FOUND = "flavor_block_not_found"

    @property
    def description(self) -> str:
        descriptions = {
            ExtractionStatus.FOUND: "identifier found",
            ExtractionStatus.NOT_FOUND: "no line contains the constant name",
            ExtractionStatus.FILE_NOT_FOUND: "no build file at the resolved path",
            ExtractionStatus.READ_ERROR: "the build file could not be read",
            ExtractionStatus.FLAVOR_BLOCK_NOT_FOUND: "no block for the requested flavor",
        }
        return descriptions[self]


@dataclass
class ExtractionRequest:
    """What to extract and where to find the build file.

    An explicit ``gradle_file_path`` takes precedence over the directory
    search; ``app_folder_name`` is only used when no explicit path is set.
    """
    gradle_file_path: Optional[str] = None
    app_folder_name: str = DEFAULT_APP_FOLDER_NAME
    constant_name: str = DEFAULT_CONSTANT_NAME
    flavor: Optional[str] = None
    project_root: Optional[str] = None

    @property
    def uses_explicit_path(self) -> bool:
        return bool(self.gradle_file_path)

    @property
    def root(self) -> Path:
        """Directory that relative paths and the search are anchored to"""
        return Path(self.project_root) if self.project_root else Path.cwd()


@dataclass
class ExtractionResult:
    """Outcome of one extraction"""
    status: ExtractionStatus
    constant_name: str = DEFAULT_CONSTANT_NAME
    application_id: Optional[str] = None
    build_file: Optional[str] = None
    flavor: Optional[str] = None
    line_number: Optional[int] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == ExtractionStatus.FOUND and self.application_id is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary"""
        return {
            'status': self.status.value,
            'application_id': self.application_id,
            'build_file': self.build_file,
            'constant_name': self.constant_name,
            'flavor': self.flavor,
            'line_number': self.line_number,
            'error': self.error,
        }
