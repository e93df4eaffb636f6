"""
Command Line Interface for get-application-id
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .action import ApplicationIdAction
from .errors import ApplicationIdNotFoundError, ConfigurationError
from .options import OPTIONS, load_options, build_request
from .reporters import get_reporter

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging"""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def _env_help(key: str) -> str:
    item = next(o for o in OPTIONS if o.key == key)
    return f"{item.description} [env: {item.env_name}]"


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='get-application-id',
        description='Get the applicationId of an Android project from its build.gradle file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                     # Search ./**/app/build.gradle
  %(prog)s /path/to/project --flavor demo      # applicationId of the demo flavor
  %(prog)s -g app/build.gradle -c appIdConst   # Explicit file, ext constant
  %(prog)s -f env -o "$GITHUB_OUTPUT"          # Append APPLICATION_ID=... to a file
        """
    )

    parser.add_argument(
        'project_root',
        nargs='?',
        default='.',
        help='Project directory to search and to resolve relative paths against (default: .)'
    )

    option_group = parser.add_argument_group('Extraction Options')
    option_group.add_argument(
        '-a', '--app-folder-name',
        dest='app_folder_name',
        help=_env_help('app_folder_name')
    )
    option_group.add_argument(
        '-g', '--gradle-file-path',
        dest='gradle_file_path',
        help=_env_help('gradle_file_path')
    )
    option_group.add_argument(
        '-c', '--constant-name',
        dest='ext_constant_name',
        help=_env_help('ext_constant_name')
    )
    option_group.add_argument(
        '--flavor',
        help=_env_help('flavor')
    )
    option_group.add_argument(
        '--config',
        help='YAML file with option values (default: .get_application_id.yml in the project root)'
    )

    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        '-f', '--format',
        choices=['console', 'json', 'env'],
        default='console',
        help='Output format (default: console)'
    )
    output_group.add_argument(
        '-o', '--output',
        help='Output file path (default: stdout; env format appends)'
    )
    output_group.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Debug mode (very verbose)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(args)


def run_extraction(args: argparse.Namespace) -> int:
    """Run the extraction and report the result"""
    project_root = Path(args.project_root)

    options = load_options(
        project_root=project_root,
        config_file=Path(args.config) if args.config else None,
        overrides={
            'app_folder_name': args.app_folder_name,
            'gradle_file_path': args.gradle_file_path,
            'ext_constant_name': args.ext_constant_name,
            'flavor': args.flavor,
        },
    )
    request = build_request(options, project_root=str(project_root))

    result = ApplicationIdAction().run_extraction(request)

    reporter_kwargs = {}
    if args.format == 'console':
        reporter_kwargs['use_colors'] = not args.no_color
        reporter_kwargs['verbose'] = args.verbose

    reporter = get_reporter(args.format, **reporter_kwargs)
    reporter.report(result, args.output)

    if not result.found:
        print(f"Error: {ApplicationIdNotFoundError.DEFAULT_MESSAGE} ({result.status.description})",
              file=sys.stderr)
        return EXIT_NOT_FOUND

    return EXIT_FOUND


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parsed_args = parse_args(args)

    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    project_root = Path(parsed_args.project_root)
    if not project_root.is_dir():
        print(f"Error: Project root is not a directory: {project_root}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        return run_extraction(parsed_args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except OSError as e:
        print(f"Error: Unable to write output: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
