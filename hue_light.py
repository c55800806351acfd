#!/usr/bin/env python3
"""
Hue Light CLI
Register with a Philips Hue bridge, read light state and set light state.
"""

import logging

import click

from commands.setup import register_command, configure_command
from commands.inspection import lights_command, state_command
from commands.control import set_command, power_command, brightness_command


@click.group(
    context_settings={
        'help_option_names': ['-h', '--help'],
    }
)
@click.version_option(version='0.1.0', prog_name='Hue Light')
@click.option('--verbose', '-v', is_flag=True, help='Log requests and errors in detail')
def cli(verbose: bool):
    """Hue Light CLI - Control lights on a Philips Hue bridge.

Run 'register BRIDGE_ADDRESS' once (after pressing the link button) to
obtain and save a token, or 'configure' to store an existing one.

Credentials: HUE_BRIDGE_ADDRESS/HUE_AUTH_TOKEN → Local config (~/.hue_light/config.json)"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )


# Register setup commands
cli.add_command(register_command)
cli.add_command(configure_command)

# Register inspection commands
cli.add_command(lights_command)
cli.add_command(state_command)

# Register control commands
cli.add_command(set_command)
cli.add_command(power_command)
cli.add_command(brightness_command)


if __name__ == '__main__':
    cli()
