"""
Inspection commands for reading light information from the bridge.
"""

import click

from commands.helpers import echo_json, exit_on_failure, get_client


@click.command(name='lights')
def lights_command():
    """List all lights with their on/off state."""
    client = get_client()
    result = client.get_lights()
    exit_on_failure(result)

    lights = result.payload if isinstance(result.payload, dict) else {}
    if not lights:
        click.echo("No lights found.")
        return

    for light_id in sorted(lights, key=lambda k: int(k) if str(k).isdigit() else 0):
        light = lights[light_id] if isinstance(lights[light_id], dict) else {}
        name = str(light.get('name') or 'Unknown')
        state = light.get('state')
        on = state.get('on') if isinstance(state, dict) else None
        status = click.style('ON', fg='green') if on else click.style('OFF', fg='red')
        click.echo(f"  {light_id:>3}  {name:<30} {status}")


@click.command(name='state')
@click.argument('light_id', type=click.IntRange(min=1))
def state_command(light_id: int):
    """Print the state of a light as JSON."""
    client = get_client()
    result = client.get_light_state(light_id)
    exit_on_failure(result)
    echo_json(result.payload)
