"""
Unit tests for multimod.config module
"""
import json
import logging
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from multimod.config import (
    apply_env_overrides,
    configure_logging,
    get_config_path,
    get_default_config,
    load_config,
    merge_configs,
)


class TestConfigManagement(unittest.TestCase):
    """Test configuration management functionality"""

    def setUp(self):
        """Set up an isolated HOME without MULTIMOD_* variables"""
        self.temp_dir = tempfile.mkdtemp()
        env = {k: v for k, v in os.environ.items() if not k.startswith('MULTIMOD_')}
        env['HOME'] = self.temp_dir
        self.env_patch = patch.dict(os.environ, env, clear=True)
        self.env_patch.start()

    def tearDown(self):
        self.env_patch.stop()
        shutil.rmtree(self.temp_dir)

    def write_config(self, filename, content):
        config_dir = Path(self.temp_dir) / '.multimod'
        config_dir.mkdir(exist_ok=True)
        path = config_dir / filename
        path.write_text(content)
        return path

    def test_get_default_config(self):
        config = get_default_config()
        self.assertEqual(config['versioning']['versions_file'], 'versions.yaml')
        self.assertFalse(config['versioning']['allow_duplicate_paths'])
        self.assertEqual(config['versioning']['skip_directories'], ['.git'])
        self.assertEqual(config['logging']['level'], 'INFO')

    def test_load_config_no_file(self):
        self.assertEqual(load_config(), get_default_config())

    def test_default_config_path(self):
        self.assertEqual(get_config_path(), Path(self.temp_dir) / '.multimod' / 'config.json')

    def test_load_json_config(self):
        self.write_config('config.json', json.dumps({
            'versioning': {'versions_file': 'release/versions.yaml'}
        }))
        config = load_config()
        self.assertEqual(config['versioning']['versions_file'], 'release/versions.yaml')
        # Unset keys keep their defaults
        self.assertFalse(config['versioning']['allow_duplicate_paths'])

    def test_load_yaml_config(self):
        self.write_config('config.yaml', "versioning:\n  allow_duplicate_paths: true\n")
        config = load_config()
        self.assertTrue(config['versioning']['allow_duplicate_paths'])

    def test_load_toml_config(self):
        self.write_config('config.toml', '[logging]\nlevel = "DEBUG"\n')
        config = load_config()
        self.assertEqual(config['logging']['level'], 'DEBUG')

    def test_env_config_path(self):
        path = Path(self.temp_dir) / 'custom.json'
        path.write_text(json.dumps({'logging': {'level': 'WARNING'}}))
        os.environ['MULTIMOD_CONFIG'] = str(path)
        self.assertEqual(get_config_path(), path)
        self.assertEqual(load_config()['logging']['level'], 'WARNING')

    def test_invalid_config_falls_back_to_defaults(self):
        self.write_config('config.json', '{not json')
        with self.assertLogs('multimod', level='ERROR'):
            config = load_config()
        self.assertEqual(config, get_default_config())

    def test_non_mapping_yaml_config_falls_back_to_defaults(self):
        self.write_config('config.yaml', "- a\n- b\n")
        with self.assertLogs('multimod', level='ERROR') as logs:
            config = load_config()
        self.assertEqual(config, get_default_config())
        self.assertIn('expected a mapping', logs.output[0])

    def test_non_mapping_json_config_falls_back_to_defaults(self):
        path = Path(self.temp_dir) / 'custom.json'
        path.write_text('"just a string"')
        os.environ['MULTIMOD_CONFIG'] = str(path)
        with self.assertLogs('multimod', level='ERROR'):
            config = load_config()
        self.assertEqual(config, get_default_config())

    def test_env_overrides(self):
        os.environ['MULTIMOD_VERSIONING_ALLOW_DUPLICATE_PATHS'] = 'true'
        os.environ['MULTIMOD_VERSIONING_VERSIONS_FILE'] = 'other.yaml'
        os.environ['MULTIMOD_LOGGING_LEVEL'] = 'DEBUG'
        config = load_config()
        self.assertIs(config['versioning']['allow_duplicate_paths'], True)
        self.assertEqual(config['versioning']['versions_file'], 'other.yaml')
        self.assertEqual(config['logging']['level'], 'DEBUG')

    def test_env_overrides_ignore_unknown_keys(self):
        os.environ['MULTIMOD_VERSIONING_NOT_A_KEY'] = 'x'
        config = apply_env_overrides(get_default_config())
        self.assertNotIn('not_a_key', config['versioning'])

    def test_merge_configs(self):
        merged = merge_configs(
            {'a': {'b': 1, 'c': 2}, 'd': 3},
            {'a': {'c': 20}, 'e': 5},
        )
        self.assertEqual(merged, {'a': {'b': 1, 'c': 20}, 'd': 3, 'e': 5})


class TestConfigureLogging(unittest.TestCase):

    def tearDown(self):
        logging.getLogger('multimod').setLevel(logging.NOTSET)

    def test_verbose(self):
        self.assertEqual(configure_logging({}, verbose=True), logging.DEBUG)

    def test_level_from_config(self):
        level = configure_logging({'logging': {'level': 'warning'}})
        self.assertEqual(level, logging.WARNING)
        self.assertEqual(logging.getLogger('multimod').level, logging.WARNING)

    def test_unknown_level_defaults_to_info(self):
        self.assertEqual(configure_logging({'logging': {'level': 'LOUD'}}), logging.INFO)
