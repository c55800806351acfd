"""Shared helpers for CLI commands."""

import json
import sys

import click

from core.client import BridgeClient
from core.config import USER_CONFIG_FILE, load_credentials
from models.types import BridgeError, BridgeResult, ParseError, TransportError


def get_client() -> BridgeClient:
    """Build a BridgeClient from stored credentials.

    Exits with status 1 if nothing is configured.
    """
    credentials = load_credentials()
    if not credentials:
        click.secho("✗ No bridge credentials found.", fg='red', err=True)
        click.echo(f"Run 'register BRIDGE_ADDRESS' or 'configure' first (stored in {USER_CONFIG_FILE}).", err=True)
        sys.exit(1)

    try:
        return BridgeClient(credentials['bridge_address'], credentials['auth_token'])
    except ValueError as e:
        click.secho(f"✗ Invalid bridge credentials: {e}", fg='red', err=True)
        sys.exit(1)


def describe_failure(result: BridgeResult) -> str:
    """Return a one-line description of a failed result."""
    if isinstance(result, TransportError):
        return f"Could not reach bridge: {result.message}"
    if isinstance(result, ParseError):
        return f"Bridge sent invalid JSON: {result.message}"
    if isinstance(result, BridgeError):
        return f"Bridge error: {'; '.join(result.descriptions)}"
    return "Unknown failure"


def exit_on_failure(result: BridgeResult):
    """Print the failure and exit with status 1 if the result is not a success."""
    if not result.ok:
        click.secho(f"✗ {describe_failure(result)}", fg='red', err=True)
        sys.exit(1)


def echo_json(payload):
    click.echo(json.dumps(payload, indent=2, sort_keys=True))
