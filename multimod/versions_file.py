"""
Reader for the versioning file (typically versions.yaml).

The decoder is chosen from the file extension, the same way the tool
configuration is loaded: YAML, JSON or TOML.

    module-sets:
      stable-v1:
        version: v1.0.0
        modules:
          - go.opentelemetry.io/otel
    excluded-modules:
      - go.opentelemetry.io/otel/internal/tools
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .domain import ModuleSet, VersioningConfig
from .errors import VersioningFileError

logger = logging.getLogger(__name__)

MODULE_SETS_KEY = 'module-sets'
EXCLUDED_MODULES_KEY = 'excluded-modules'


def _decode(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        with open(path, 'r') as f:
            return yaml.safe_load(f)
    if suffix == '.toml':
        with open(path, 'rb') as f:
            return tomllib.load(f)
    if suffix == '.json':
        with open(path, 'r') as f:
            return json.load(f)
    raise VersioningFileError(str(path), f"unsupported file type '{suffix}'")


def parse_versioning_data(data: Any, source: str = '<data>') -> VersioningConfig:
    """
    Build a VersioningConfig from decoded file contents.

    Args:
        data: Decoded mapping with 'module-sets' and 'excluded-modules' keys
        source: Name used in error messages

    Returns:
        VersioningConfig with module sets in declaration order

    Raises:
        VersioningFileError: If the structure is not as expected
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise VersioningFileError(source, "top level must be a mapping")

    raw_sets = data.get(MODULE_SETS_KEY) or {}
    if not isinstance(raw_sets, dict):
        raise VersioningFileError(source, f"'{MODULE_SETS_KEY}' must be a mapping")

    module_sets: Dict[str, ModuleSet] = {}
    for set_name, raw_set in raw_sets.items():
        if not isinstance(raw_set, dict):
            raise VersioningFileError(source, f"module set '{set_name}' must be a mapping")
        version = raw_set.get('version')
        if not isinstance(version, str) or not version:
            raise VersioningFileError(source, f"module set '{set_name}' has no version")
        modules = raw_set.get('modules') or []
        if not isinstance(modules, list) or not all(isinstance(m, str) for m in modules):
            raise VersioningFileError(
                source, f"modules of set '{set_name}' must be a list of strings"
            )
        module_sets[str(set_name)] = ModuleSet(version=version, modules=tuple(modules))

    excluded = data.get(EXCLUDED_MODULES_KEY) or []
    if not isinstance(excluded, list) or not all(isinstance(m, str) for m in excluded):
        raise VersioningFileError(
            source, f"'{EXCLUDED_MODULES_KEY}' must be a list of strings"
        )

    return VersioningConfig(module_sets=module_sets, excluded_modules=tuple(excluded))


def read_versioning_file(versioning_filename: Union[str, Path]) -> VersioningConfig:
    """
    Read a versioning file and return its VersioningConfig.

    Args:
        versioning_filename: Path to versions.yaml (or .yml/.json/.toml)

    Raises:
        VersioningFileError: If the file is missing, undecodable or malformed
    """
    path = Path(versioning_filename)
    logger.debug(f"Reading versioning file {path}")
    try:
        data = _decode(path)
    except VersioningFileError:
        raise
    except OSError as e:
        raise VersioningFileError(str(path), f"error reading file: {e}") from e
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise VersioningFileError(str(path), f"unable to decode: {e}") from e

    return parse_versioning_data(data, source=str(path))
