"""Pytest configuration and fixtures for Hue light tests."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


def make_response(payload=None, body: str | None = None, status: int = 200):
    """Build a fake requests.Response carrying a JSON payload or raw body."""
    response = MagicMock()
    text = body if body is not None else json.dumps(payload)
    response.content = text.encode('utf-8')
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status} Server Error", response=response
        )
    return response


@pytest.fixture
def respond():
    """Return the fake response factory."""
    return make_response


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the user config file at a temporary location and clear env overrides."""
    path = tmp_path / '.hue_light' / 'config.json'
    monkeypatch.setattr('core.config.USER_CONFIG_FILE', path)
    monkeypatch.delenv('HUE_BRIDGE_ADDRESS', raising=False)
    monkeypatch.delenv('HUE_AUTH_TOKEN', raising=False)
    return path
