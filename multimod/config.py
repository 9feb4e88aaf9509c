#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("multimod")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def get_config_path():
    """Get the path to the tool configuration file.

    Checks in order:
    1. MULTIMOD_CONFIG environment variable
    2. ~/.multimod/ directory
    """
    if 'MULTIMOD_CONFIG' in os.environ:
        path = Path(os.environ['MULTIMOD_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.multimod'
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists():
            return path

    return config_dir / 'config.json'


def get_default_config():
    """Get default configuration."""
    return {
        "versioning": {
            "versions_file": "versions.yaml",
            "allow_duplicate_paths": False,
            "skip_directories": [".git"],
        },
        "logging": {
            "level": "INFO",
        },
    }


def load_config():
    """Load configuration from file, defaults and MULTIMOD_* environment variables."""
    config_path = get_config_path()
    config = get_default_config()

    if config_path.exists():
        try:
            suffix = config_path.suffix.lower()
            if suffix == '.toml':
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif suffix in ('.yaml', '.yml'):
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)
            if isinstance(file_config, dict):
                config = merge_configs(config, file_config)
            else:
                logger.error(
                    f"Error loading config from {config_path}: "
                    f"expected a mapping, got {type(file_config).__name__}"
                )
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    return apply_env_overrides(config)


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()
    for key, value in override_config.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value
    return merged


def _typed(value):
    if value.lower() in ('true', '1', 'yes', 'on'):
        return True
    if value.lower() in ('false', '0', 'no', 'off'):
        return False
    return value


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.

    Variables follow the pattern MULTIMOD_<SECTION>_<KEY>, where the key may
    itself contain underscores, e.g. MULTIMOD_VERSIONING_ALLOW_DUPLICATE_PATHS=true.
    """
    env_prefix = "MULTIMOD_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == 'MULTIMOD_CONFIG':
            continue

        rest = env_key[len(env_prefix):].lower()
        for section, settings in config.items():
            if not isinstance(settings, dict) or not rest.startswith(section + '_'):
                continue
            key = rest[len(section) + 1:]
            if key in settings and not isinstance(settings[key], (dict, list)):
                settings[key] = _typed(value)
            break

    return config


def configure_logging(config=None, verbose=False):
    """Set the package log level from config, or DEBUG when verbose."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = str((config or {}).get('logging', {}).get('level', 'INFO')).upper()
        level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)
    return level
