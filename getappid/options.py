"""
Option loader - merges defaults, a YAML config file, environment variables
and explicit overrides into the options of one extraction.

Precedence, lowest first: declared defaults, config file, environment,
explicit overrides.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import logging

import yaml

from .models import ExtractionRequest, DEFAULT_APP_FOLDER_NAME, DEFAULT_CONSTANT_NAME
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ['.get_application_id.yml', '.get_application_id.yaml']


@dataclass
class ConfigItem:
    """A single declared option"""
    key: str
    env_name: str
    description: str
    default_value: Optional[str] = None


OPTIONS: List[ConfigItem] = [
    ConfigItem(
        key='app_folder_name',
        env_name='GETAPPLICATIONID_APP_NAME',
        description='The name of the application source folder in the Android project (default: app)',
        default_value=DEFAULT_APP_FOLDER_NAME,
    ),
    ConfigItem(
        key='gradle_file_path',
        env_name='GETAPPLICATIONID_GRADLE_FILE_PATH',
        description='The relative path to the gradle file containing the applicationId parameter',
    ),
    ConfigItem(
        key='ext_constant_name',
        env_name='GETAPPLICATIONID_EXT_CONSTANT_NAME',
        description='If the applicationId is set in an ext constant, specify the constant name',
        default_value=DEFAULT_CONSTANT_NAME,
    ),
    ConfigItem(
        key='flavor',
        env_name='GETAPPLICATIONID_FLAVOR',
        description='Product flavor whose block holds the applicationId',
    ),
]


class OptionsLoader:
    """Loads extraction options from every configured source"""

    def __init__(self, options: Optional[List[ConfigItem]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.options = options if options is not None else OPTIONS
        self.environ = environ if environ is not None else os.environ

    @property
    def keys(self) -> List[str]:
        return [item.key for item in self.options]

    def load(self, config_file: Optional[Path] = None,
             overrides: Optional[Dict[str, Optional[str]]] = None) -> Dict[str, Optional[str]]:
        """Merge all sources into a key -> value mapping"""
        values: Dict[str, Optional[str]] = {item.key: item.default_value for item in self.options}

        if config_file is not None:
            values.update(self.load_config_file(config_file))

        for item in self.options:
            env_value = self.environ.get(item.env_name)
            if env_value:
                logger.debug(f"Option {item.key} set from {item.env_name}")
                values[item.key] = env_value

        for key, value in (overrides or {}).items():
            if key not in values:
                raise ConfigurationError(f"Unknown option: {key}")
            if value is not None and value != '':
                values[key] = value

        return values

    def load_config_file(self, filepath: Path) -> Dict[str, Optional[str]]:
        """Load option values from a YAML mapping"""
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file: {e}", str(filepath))
        except OSError as e:
            raise ConfigurationError(f"Unable to read config file: {e}", str(filepath))

        if not data:
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping of options", str(filepath))

        values: Dict[str, Optional[str]] = {}
        for key, value in data.items():
            if key not in self.keys:
                logger.warning(f"Ignoring unknown option '{key}' in {filepath}")
                continue
            coerced = self._coerce(value)
            if coerced is not None:
                values[key] = coerced

        logger.info(f"Loaded {len(values)} options from {filepath}")
        return values

    def find_default_config(self, project_root: Path) -> Optional[Path]:
        """Return the first default config file present in project_root"""
        for name in DEFAULT_CONFIG_FILES:
            candidate = project_root / name
            if candidate.is_file():
                return candidate
        return None

    def _coerce(self, value: Any) -> Optional[str]:
        if value is None or value == '':
            return None
        if isinstance(value, (dict, list)):
            raise ConfigurationError(f"Option values must be scalars, got: {value!r}")
        return str(value)


def build_request(options: Mapping[str, Optional[str]],
                  project_root: Optional[str] = None) -> ExtractionRequest:
    """Turn loaded options into an ExtractionRequest"""
    constant_name = options.get('ext_constant_name') or ''
    if not constant_name.strip():
        raise ConfigurationError("ext_constant_name must not be empty")

    return ExtractionRequest(
        gradle_file_path=options.get('gradle_file_path') or None,
        app_folder_name=options.get('app_folder_name') or DEFAULT_APP_FOLDER_NAME,
        constant_name=constant_name,
        flavor=options.get('flavor') or None,
        project_root=project_root,
    )


def load_options(project_root: Optional[Path] = None,
                 config_file: Optional[Path] = None,
                 overrides: Optional[Dict[str, Optional[str]]] = None) -> Dict[str, Optional[str]]:
    """Load options, picking up a default config file from project_root if present"""
    loader = OptionsLoader()
    if config_file is None and project_root is not None:
        config_file = loader.find_default_config(project_root)
    return loader.load(config_file, overrides)
