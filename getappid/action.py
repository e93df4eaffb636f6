"""
Action - resolves the build file, extracts the identifier and publishes it
"""

from typing import MutableMapping, Optional
import logging

from .models import ExtractionRequest, ExtractionResult, ExtractionStatus, APPLICATION_ID_KEY
from .locator import BuildFileLocator
from .extractor import IdentifierExtractor
from .errors import ApplicationIdNotFoundError, ConfigurationError

logger = logging.getLogger(__name__)


class ApplicationIdAction:
    """Runs one extraction request end to end"""

    def __init__(self, locator: Optional[BuildFileLocator] = None,
                 extractor: Optional[IdentifierExtractor] = None):
        self.locator = locator or BuildFileLocator()
        self.extractor = extractor or IdentifierExtractor()

    def run_extraction(self, request: ExtractionRequest) -> ExtractionResult:
        """Resolve and extract without raising when nothing is found"""
        if not request.constant_name or not request.constant_name.strip():
            raise ConfigurationError("Constant name must not be empty")
        if not request.uses_explicit_path and request.app_folder_name.strip().strip("/") in ("", "."):
            raise ConfigurationError("App folder name must not be empty")

        path = self.locator.resolve(request)
        if path is None:
            return ExtractionResult(
                status=ExtractionStatus.FILE_NOT_FOUND,
                constant_name=request.constant_name,
                flavor=request.flavor,
            )

        return self.extractor.extract(path, request.constant_name, request.flavor)

    def run(self, request: ExtractionRequest,
            output: Optional[MutableMapping[str, str]] = None) -> str:
        """Extract the identifier or raise ApplicationIdNotFoundError.

        On success the identifier is also written to ``output`` under
        APPLICATION_ID when an output mapping is given.
        """
        result = self.run_extraction(request)

        if not result.found:
            logger.debug(f"Extraction ended with status {result.status.value}: {result.status.description}")
            raise ApplicationIdNotFoundError(result)

        if output is not None:
            output[APPLICATION_ID_KEY] = result.application_id

        logger.info(f"applicationId found: {result.application_id}")
        return result.application_id


def get_application_id(request: Optional[ExtractionRequest] = None,
                       output: Optional[MutableMapping[str, str]] = None) -> str:
    """Extract the application identifier for a request.

    Args:
        request: Where to look; defaults to searching the current directory
            for app/build.gradle
        output: Optional mapping that receives APPLICATION_ID on success

    Returns:
        The application identifier

    Raises:
        ApplicationIdNotFoundError: when no identifier could be extracted
    """
    return ApplicationIdAction().run(request or ExtractionRequest(), output)


def run_extraction(request: Optional[ExtractionRequest] = None) -> ExtractionResult:
    """Non-raising variant of get_application_id"""
    return ApplicationIdAction().run_extraction(request or ExtractionRequest())
