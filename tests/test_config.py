"""Tests for credential storage in core/config.py

The config file is redirected to a temporary directory by the config_file
fixture, so nothing in the real home directory is touched.
"""

import json
import stat
from pathlib import Path
from unittest.mock import patch

from core import config
from core.config import load_config, load_credentials, save_credentials


class TestConstants:
    """Test that constants are properly defined."""

    def test_user_config_file_path(self):
        """USER_CONFIG_FILE should point to ~/.hue_light/config.json."""
        assert isinstance(config.USER_CONFIG_FILE, Path)
        assert config.USER_CONFIG_FILE.name == 'config.json'
        assert '.hue_light' in str(config.USER_CONFIG_FILE)


class TestLoadCredentials:
    """Test credential loading priority and validation."""

    def test_no_file_no_env(self, config_file):
        assert load_config() == {}
        assert load_credentials() is None

    def test_from_file(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({'bridge_address': 'http://bridge', 'auth_token': 'abc'}))

        assert load_credentials() == {'bridge_address': 'http://bridge', 'auth_token': 'abc'}

    def test_env_overrides_file(self, config_file, monkeypatch):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({'bridge_address': 'http://bridge', 'auth_token': 'abc'}))
        monkeypatch.setenv('HUE_AUTH_TOKEN', 'from-env')

        assert load_credentials() == {'bridge_address': 'http://bridge', 'auth_token': 'from-env'}

    def test_incomplete_credentials(self, config_file, monkeypatch):
        monkeypatch.setenv('HUE_BRIDGE_ADDRESS', 'http://bridge')

        assert load_credentials() is None

    def test_corrupt_file_warns(self, config_file, capsys):
        config_file.parent.mkdir(parents=True)
        config_file.write_text('{not json')

        assert load_credentials() is None
        assert 'Failed to load config' in capsys.readouterr().err


class TestSaveCredentials:
    """Test credential saving."""

    def test_save_creates_file(self, config_file):
        assert save_credentials('http://bridge', 'abc') is True

        assert json.loads(config_file.read_text()) == {'bridge_address': 'http://bridge', 'auth_token': 'abc'}
        assert stat.S_IMODE(config_file.stat().st_mode) == 0o600

    def test_save_keeps_other_keys(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({'auth_token': 'old', 'extra': 1}))

        save_credentials('http://bridge', 'new')

        saved = json.loads(config_file.read_text())
        assert saved == {'auth_token': 'new', 'bridge_address': 'http://bridge', 'extra': 1}

    def test_save_round_trips_through_load(self, config_file):
        save_credentials('http://bridge', 'abc')

        assert load_credentials() == {'bridge_address': 'http://bridge', 'auth_token': 'abc'}

    @patch('core.config.os.chmod')
    def test_save_failure_returns_false(self, mock_chmod, config_file, capsys):
        mock_chmod.side_effect = OSError('read-only')

        assert save_credentials('http://bridge', 'abc') is False
        assert 'Failed to save config' in capsys.readouterr().err


class TestBlankCredentials:
    """Blank values must count as missing."""

    def test_blank_env_address_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv('HUE_BRIDGE_ADDRESS', '   ')
        monkeypatch.setenv('HUE_AUTH_TOKEN', 'abc')

        assert load_credentials() is None

    def test_blank_env_falls_back_to_file(self, config_file, monkeypatch):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({'bridge_address': 'http://bridge', 'auth_token': 'abc'}))
        monkeypatch.setenv('HUE_BRIDGE_ADDRESS', ' ')

        assert load_credentials() == {'bridge_address': 'http://bridge', 'auth_token': 'abc'}

    def test_values_are_stripped(self, config_file, monkeypatch):
        monkeypatch.setenv('HUE_BRIDGE_ADDRESS', ' http://bridge ')
        monkeypatch.setenv('HUE_AUTH_TOKEN', 'abc\n')

        assert load_credentials() == {'bridge_address': 'http://bridge', 'auth_token': 'abc'}
