"""Credential storage for the Hue light CLI.

This module handles:
- Loading the bridge address and auth token (environment, then config file)
- Saving credentials after registration with secure file permissions

The client itself never persists anything; keeping the token is the
caller's job.
"""

import json
import os
from pathlib import Path

import click

from models.types import AuthCredentials

# User configuration file location
USER_CONFIG_FILE = Path.home() / '.hue_light' / 'config.json'

# Environment variables that override the config file
ENV_BRIDGE_ADDRESS = 'HUE_BRIDGE_ADDRESS'
ENV_AUTH_TOKEN = 'HUE_AUTH_TOKEN'


def load_config() -> dict:
    """Load the user config file.

    Returns:
        Config dict, empty if the file doesn't exist or can't be read
    """
    if not USER_CONFIG_FILE.exists():
        return {}

    try:
        with open(USER_CONFIG_FILE, 'r') as f:
            config = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        click.echo(f"Warning: Failed to load config from {USER_CONFIG_FILE}: {e}", err=True)
        return {}

    return config if isinstance(config, dict) else {}


def _clean(value) -> str | None:
    """Return value stripped of whitespace, or None if it is not a non-blank string."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def load_credentials() -> AuthCredentials | None:
    """Load bridge address and auth token.

    Priority order:
    1. HUE_BRIDGE_ADDRESS / HUE_AUTH_TOKEN environment variables
    2. User config file (~/.hue_light/config.json)

    Returns:
        Dict with 'bridge_address' and 'auth_token', or None if incomplete
    """
    config = load_config()
    bridge_address = _clean(os.getenv(ENV_BRIDGE_ADDRESS)) or _clean(config.get('bridge_address'))
    auth_token = _clean(os.getenv(ENV_AUTH_TOKEN)) or _clean(config.get('auth_token'))

    if bridge_address and auth_token:
        return {
            'bridge_address': bridge_address,
            'auth_token': auth_token
        }

    return None


def save_credentials(bridge_address: str, auth_token: str) -> bool:
    """Save bridge address and auth token to the user config file.

    Other keys in an existing file are kept. The file is made readable by
    the current user only (600).

    Returns:
        True if saved successfully, False otherwise
    """
    try:
        USER_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        config = load_config()
        config['bridge_address'] = bridge_address
        config['auth_token'] = auth_token

        with open(USER_CONFIG_FILE, 'w') as f:
            json.dump(config, f, indent=2)

        os.chmod(USER_CONFIG_FILE, 0o600)
        return True

    except (IOError, OSError) as e:
        click.echo(f"Error: Failed to save config to {USER_CONFIG_FILE}: {e}", err=True)
        return False
