"""
Setup commands for the Hue light CLI.

Registration with the bridge and storing a pre-existing token.
"""

import sys

import click

from core.client import Bridge, BridgeClient
from core.config import USER_CONFIG_FILE, save_credentials
from core.errors import RegistrationError


@click.command(name='register')
@click.argument('bridge_address')
@click.option('--no-save', is_flag=True, help='Print the token without saving it')
def register_command(bridge_address: str, no_save: bool):
    """Register with a bridge and save the issued token.

    Press the LINK BUTTON on the bridge shortly before running this.

    \b
    Examples:
      python hue_light.py register 192.168.1.2
      python hue_light.py register http://192.168.1.2 --no-save
    """
    try:
        bridge = Bridge(bridge_address)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='BRIDGE_ADDRESS')

    click.echo(f"Registering with bridge {bridge.address}...")

    try:
        client = bridge.register()
    except RegistrationError as e:
        click.secho(f"✗ {e}", fg='red', err=True)
        if e.error:
            click.echo(f"Bridge said: {e.error.get('description', 'Unknown error')}", err=True)
        click.echo("Press the link button on the bridge and try again.", err=True)
        sys.exit(1)

    click.secho("✓ Registered successfully", fg='green', bold=True)
    click.echo(f"  Token: {client.auth_token}")

    if no_save:
        return

    if save_credentials(client.address, client.auth_token):
        click.secho(f"✓ Configuration saved to {USER_CONFIG_FILE}", fg='green')
    else:
        sys.exit(1)


@click.command(name='configure')
@click.argument('bridge_address')
@click.argument('auth_token')
def configure_command(bridge_address: str, auth_token: str):
    """Store a bridge address and an existing auth token."""
    try:
        client = BridgeClient(bridge_address, auth_token)
    except ValueError as e:
        raise click.BadParameter(str(e))

    if save_credentials(client.address, client.auth_token):
        click.secho(f"✓ Configuration saved to {USER_CONFIG_FILE}", fg='green')
    else:
        sys.exit(1)
