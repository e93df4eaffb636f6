"""
Report generators for extraction results
"""

import json
from datetime import datetime
from typing import Optional
import sys

from .models import ExtractionResult, APPLICATION_ID_KEY


class BaseReporter:
    """Base class for reporters"""

    def report(self, result: ExtractionResult, output: Optional[str] = None) -> str:
        """Generate report and optionally write to file"""
        raise NotImplementedError

    def _write_output(self, content: str, output: Optional[str]) -> None:
        """Write content to file or stdout"""
        if output:
            with open(output, 'w', encoding='utf-8') as f:
                f.write(content + "\n")
        else:
            print(content)


class ConsoleReporter(BaseReporter):
    """Console/terminal output reporter with colors"""

    COLORS = {
        'red': '\033[91m',
        'green': '\033[92m',
        'gray': '\033[90m',
        'bold': '\033[1m',
        'reset': '\033[0m',
    }

    def __init__(self, use_colors: bool = True, verbose: bool = False):
        self.use_colors = use_colors and sys.stdout.isatty()
        self.verbose = verbose

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors enabled"""
        if not self.use_colors:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def report(self, result: ExtractionResult, output: Optional[str] = None) -> str:
        """Generate console report"""
        lines = []

        if result.found:
            lines.append(self._color(f"{result.constant_name} found: {result.application_id}", 'green'))
        else:
            lines.append(self._color(
                "Impossible to find the applicationId with the specified properties", 'red'
            ))
            lines.append(f"  Reason: {result.status.description}")
            if result.error:
                lines.append(f"  Error: {result.error}")

        if self.verbose or not result.found:
            lines.append(self._color(f"  Build file: {result.build_file or 'n/a'}", 'gray'))
        if self.verbose:
            if result.line_number:
                lines.append(self._color(f"  Line: {result.line_number}", 'gray'))
            if result.flavor:
                lines.append(self._color(f"  Flavor: {result.flavor}", 'gray'))

        content = "\n".join(lines)
        self._write_output(content, output)
        return content


class JSONReporter(BaseReporter):
    """JSON format reporter"""

    def report(self, result: ExtractionResult, output: Optional[str] = None) -> str:
        """Generate JSON report"""
        report_data = {
            'timestamp': datetime.now().isoformat(),
            'found': result.found,
            'result': result.to_dict(),
        }

        content = json.dumps(report_data, indent=2)
        self._write_output(content, output)
        return content


class EnvReporter(BaseReporter):
    """KEY=value output for CI output files"""

    def report(self, result: ExtractionResult, output: Optional[str] = None) -> str:
        """Generate env-style report; empty when nothing was found"""
        content = f"{APPLICATION_ID_KEY}={result.application_id}" if result.found else ""
        if output:
            with open(output, 'a', encoding='utf-8') as f:
                if content:
                    f.write(content + "\n")
        elif content:
            print(content)
        return content


def get_reporter(format: str, **kwargs) -> BaseReporter:
    """Factory function to get reporter by format"""
    reporters = {
        'console': ConsoleReporter,
        'json': JSONReporter,
        'env': EnvReporter,
    }

    reporter_class = reporters.get(format.lower())
    if not reporter_class:
        raise ValueError(f"Unknown report format: {format}. Supported: {list(reporters.keys())}")

    return reporter_class(**kwargs)
