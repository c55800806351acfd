"""
Control commands for direct manipulation of lights.

Includes a general 'set' command plus power and brightness shortcuts.
"""

import json

import click

from commands.helpers import exit_on_failure, get_client
from models.utils import build_light_state


def apply_state(light_id: int, state: dict):
    """Send a state fragment and report each field the bridge answered."""
    client = get_client()
    result = client.set_light_state(light_id, state)
    exit_on_failure(result)

    payload = result.payload if isinstance(result.payload, list) else [result.payload]
    for item in payload:
        if not isinstance(item, dict):
            continue
        if 'success' in item:
            success = item['success']
            if not isinstance(success, dict):
                click.secho(f"✓ {json.dumps(success)}", fg='green')
                continue
            for address, value in success.items():
                click.secho(f"✓ {address} = {json.dumps(value)}", fg='green')
        elif 'error' in item:
            error = item['error']
            description = error.get('description', 'Unknown error') if isinstance(error, dict) else error
            click.secho(f"✗ {description}", fg='red')


@click.command(name='set')
@click.argument('light_id', type=click.IntRange(min=1))
@click.option('--on/--off', default=None, help='Turn light on or off')
@click.option('--bri', '-b', type=click.IntRange(1, 254), help='Brightness (1-254)')
@click.option('--hue', '-u', type=click.IntRange(0, 65535), help='Hue value (0-65535)')
@click.option('--sat', '-s', type=click.IntRange(0, 254), help='Saturation (0-254)')
@click.option('--ct', '-t', type=click.IntRange(153, 500), help='Colour temperature (153-500 mireds)')
@click.option('--json', 'raw_json', help='Raw JSON state object, merged over the other options')
def set_command(light_id: int, on: bool | None, bri: int | None, hue: int | None,
                sat: int | None, ct: int | None, raw_json: str | None):
    """Set the state of a light.

    \b
    Examples:
      python hue_light.py set 1 --on --bri 200
      python hue_light.py set 1 -u 10000 -s 254
      python hue_light.py set 1 --json '{"alert": "select"}'
    """
    state = build_light_state(on=on, bri=bri, hue=hue, sat=sat, ct=ct)

    if raw_json:
        try:
            extra = json.loads(raw_json)
        except ValueError as e:
            raise click.BadParameter(f"Invalid JSON: {e}", param_hint='--json')
        if not isinstance(extra, dict):
            raise click.BadParameter("Must be a JSON object", param_hint='--json')
        state.update(extra)

    if not state:
        raise click.UsageError("Nothing to set. Give --on/--off, --bri, --hue, --sat, --ct or --json.")

    apply_state(light_id, state)


@click.command(name='power')
@click.argument('light_id', type=click.IntRange(min=1))
@click.option('--on/--off', default=True, help='Turn light on or off')
def power_command(light_id: int, on: bool):
    """Turn a light ON or OFF."""
    apply_state(light_id, {'on': on})


@click.command(name='brightness')
@click.argument('light_id', type=click.IntRange(min=1))
@click.argument('brightness', type=click.IntRange(1, 254))
def brightness_command(light_id: int, brightness: int):
    """Set brightness of a light (1-254)."""
    apply_state(light_id, build_light_state(bri=brightness))
