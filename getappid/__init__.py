"""
get-application-id - read the applicationId of an Android project.

The identifier is taken from the app module's build.gradle: the first line
containing the constant name (default ``applicationId``), optionally inside
a product-flavor block. The build file is given explicitly or found by
searching the project for ``**/<app_folder_name>/build.gradle``.

Quick Start:
    >>> from getappid import get_application_id, ExtractionRequest
    >>> context = {}
    >>> get_application_id(ExtractionRequest(project_root="/path/to/project"), context)
    'com.example.app'
    >>> context["APPLICATION_ID"]
    'com.example.app'

Command line:
    get-application-id /path/to/project --flavor demo
"""

__version__ = "0.2.0"
__author__ = "get-application-id"

from .models import (
    ExtractionRequest,
    ExtractionResult,
    ExtractionStatus,
    APPLICATION_ID_KEY,
)
from .errors import GetAppIdError, ApplicationIdNotFoundError, ConfigurationError
from .locator import BuildFileLocator, resolve_build_file
from .extractor import IdentifierExtractor, extract_application_id, extract_token
from .action import ApplicationIdAction, get_application_id, run_extraction
from .options import OPTIONS, ConfigItem, OptionsLoader, build_request, load_options

__all__ = [
    # Models
    'ExtractionRequest',
    'ExtractionResult',
    'ExtractionStatus',
    'APPLICATION_ID_KEY',
    # Errors
    'GetAppIdError',
    'ApplicationIdNotFoundError',
    'ConfigurationError',
    # Core
    'BuildFileLocator',
    'resolve_build_file',
    'IdentifierExtractor',
    'extract_application_id',
    'extract_token',
    'ApplicationIdAction',
    'get_application_id',
    'run_extraction',
    # Options
    'OPTIONS',
    'ConfigItem',
    'OptionsLoader',
    'build_request',
    'load_options',
]
