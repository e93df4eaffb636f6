"""
Build file locator - resolves which build.gradle to read
"""

import os
import fnmatch
from pathlib import Path
from typing import List, Optional, Tuple
import logging

from .models import ExtractionRequest, BUILD_FILE_NAME

logger = logging.getLogger(__name__)


class BuildFileLocator:
    """Resolves the build file from an explicit path or a directory search"""

    # Directories never searched for an app module
    SKIP_DIRS = {
        '.git', '.svn', '.hg', 'node_modules', '__pycache__',
        '.idea', '.vscode', '.gradle', '.cxx', 'build',
        'venv', '.venv',
    }

    def __init__(self, build_file_name: str = BUILD_FILE_NAME):
        self.build_file_name = build_file_name

    def resolve(self, request: ExtractionRequest) -> Optional[Path]:
        """Return the build file to read, or None when the search finds nothing.

        An explicit path is returned as-is (relative paths are anchored to
        the project root); whether it exists is checked by the extractor.
        """
        if request.uses_explicit_path:
            logger.info(f"Using gradle file at ({request.gradle_file_path})")
            path = Path(request.gradle_file_path)
            if not path.is_absolute():
                path = request.root / path
            return path

        logger.info(f"Looking inside your project folder ({request.app_folder_name})")
        matches = self.find_build_files(request.root, request.app_folder_name)
        if not matches:
            logger.info(
                f"No {self.build_file_name} found under {request.root} "
                f"for folder ({request.app_folder_name})"
            )
            return None

        if len(matches) > 1:
            others = ', '.join(str(m) for m in matches[1:])
            logger.warning(f"Multiple {self.build_file_name} files matched, ignoring: {others}")

        return matches[0]

    def find_build_files(self, root: Path, app_folder_name: str) -> List[Path]:
        """Find every <app_folder_name>/build.gradle under root, shallowest first"""
        folder_parts = self._folder_parts(app_folder_name)
        matches: List[Tuple[int, str, Path]] = []

        if not root.is_dir():
            logger.debug(f"Search root is not a directory: {root}")
            return []

        for dirpath, dirs, filenames in os.walk(root):
            dirs[:] = [d for d in dirs if d not in self.SKIP_DIRS]

            if self.build_file_name not in filenames:
                continue

            relative = Path(dirpath).relative_to(root)
            if not self._ends_with(relative.parts, folder_parts):
                continue

            path = Path(dirpath) / self.build_file_name
            logger.info(f"Found a {self.build_file_name} file at path: ({path})")
            matches.append((len(relative.parts), relative.as_posix(), path))

        matches.sort(key=lambda m: (m[0], m[1]))
        return [m[2] for m in matches]

    def _folder_parts(self, app_folder_name: str) -> Tuple[str, ...]:
        return tuple(p for p in Path(app_folder_name.strip('/')).parts if p not in ('', '.'))

    def _ends_with(self, parts: Tuple[str, ...], suffix: Tuple[str, ...]) -> bool:
        if not suffix:
            return True
        if len(parts) < len(suffix):
            return False
        return all(fnmatch.fnmatchcase(part, pattern)
                   for part, pattern in zip(parts[-len(suffix):], suffix))


def resolve_build_file(request: ExtractionRequest) -> Optional[Path]:
    """Resolve the build file for a request with the default locator"""
    return BuildFileLocator().resolve(request)
