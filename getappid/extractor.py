"""
Identifier extractor - pulls the application identifier out of a build file.

Two scans are supported:

- Line scan: the first line containing the constant name wins, and the
  identifier is its last whitespace-delimited token with quotes removed.
- Flavor scan: the same line scan restricted to the interior of the first
  ``<flavor> { ... }`` block.

The flavor block match is a heuristic, not a Groovy parser: the interior is
everything up to the first closing brace, so nested blocks cut it short.

Example:
    extractor = IdentifierExtractor()
    result = extractor.extract(Path("app/build.gradle"), "applicationId")
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Tuple, Pattern
import logging

from .models import ExtractionResult, ExtractionStatus, DEFAULT_CONSTANT_NAME

logger = logging.getLogger(__name__)


def extract_token(line: str) -> str:
    """Last whitespace-delimited token of a line, without double quotes"""
    return line.split()[-1].replace('"', '')


def flavor_block_pattern(flavor: str) -> Pattern[str]:
    """Pattern capturing the interior of the first non-nested flavor block"""
    return re.compile(r'(?<![\w.])' + re.escape(flavor) + r'\s*\{([^}]+)\}')


class IdentifierExtractor:
    """Extracts an identifier from a single build file"""

    encodings = ['utf-8', 'latin-1']

    def extract(self, path: Optional[Path], constant_name: str = DEFAULT_CONSTANT_NAME,
                flavor: Optional[str] = None) -> ExtractionResult:
        """Extract the identifier; file-level problems come back as statuses"""
        result = ExtractionResult(
            status=ExtractionStatus.FILE_NOT_FOUND,
            constant_name=constant_name,
            build_file=str(path) if path is not None else None,
            flavor=flavor,
        )

        if path is None or not path.is_file():
            logger.info(f"No file exists at path: ({path})")
            return result

        try:
            content = self._read_file(path)
        except OSError as e:
            logger.error(f"An exception occurred while reading the gradle file: {e}")
            result.status = ExtractionStatus.READ_ERROR
            result.error = str(e)
            return result

        if flavor:
            match = self._scan_flavor(content, constant_name, flavor)
            if match is None:
                logger.info(f"No block found for flavor ({flavor}) in {path}")
                result.status = ExtractionStatus.FLAVOR_BLOCK_NOT_FOUND
                return result
        else:
            match = self._scan_lines(content.split('\n'), constant_name)

        line_number, line = match
        if line is None:
            result.status = ExtractionStatus.NOT_FOUND
            return result

        result.status = ExtractionStatus.FOUND
        result.application_id = extract_token(line)
        result.line_number = line_number
        logger.debug(f"Matched {constant_name} at {path}:{line_number}")
        return result

    def _scan_lines(self, lines: List[str], constant_name: str,
                    first_line: int = 1) -> Tuple[Optional[int], Optional[str]]:
        """Return (line number, line) of the first line containing the constant"""
        for offset, line in enumerate(lines):
            if constant_name in line:
                return first_line + offset, line
        return None, None

    def _scan_flavor(self, content: str, constant_name: str,
                     flavor: str) -> Optional[Tuple[Optional[int], Optional[str]]]:
        """Line scan inside the flavor block; None when there is no block"""
        match = flavor_block_pattern(flavor).search(content)
        if not match:
            return None

        first_line = content.count('\n', 0, match.start(1)) + 1
        return self._scan_lines(match.group(1).split('\n'), constant_name, first_line)

    def _read_file(self, path: Path) -> str:
        """Read file content with encoding fallback"""
        for encoding in self.encodings:
            try:
                with open(path, 'r', encoding=encoding) as f:
                    return f.read()
            except UnicodeDecodeError:
                continue

        # latin-1 decodes any byte sequence, so this is only reached if the list changes
        raise OSError(f"Unable to decode {path} with {', '.join(self.encodings)}")


def extract_application_id(path: Optional[Path], constant_name: str = DEFAULT_CONSTANT_NAME,
                           flavor: Optional[str] = None) -> ExtractionResult:
    """Convenience wrapper around IdentifierExtractor.extract"""
    return IdentifierExtractor().extract(path, constant_name, flavor)
