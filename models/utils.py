"""Utility functions for the Hue light client.

This module contains helpers shared by the client and the CLI:
- normalise_bridge_address: Turn a host or URL into a bridge base address
- generate_username: Random candidate username for registration
- light_path: Build the API path for a light or its state
- extract_errors: Find bridge error objects in a response payload
- build_light_state: Assemble a state fragment from CLI options
"""

import hashlib
import uuid


def normalise_bridge_address(address: str) -> str:
    """Return the bridge base address with a scheme and no trailing slash.

    A bare host such as ``192.168.1.2`` becomes ``http://192.168.1.2``.
    """
    address = (address or '').strip()
    if not address:
        raise ValueError("Bridge address must not be empty")

    if '://' not in address:
        address = f"http://{address}"
    return address.rstrip('/')


def generate_username() -> str:
    """Generate a random candidate username (hex MD5 of a UUID4)."""
    return hashlib.md5(uuid.uuid4().bytes).hexdigest()


def check_light_id(light_id: int) -> int:
    """Validate a bridge light index.

    Raises:
        ValueError: If light_id is not a positive integer
    """
    if isinstance(light_id, bool) or not isinstance(light_id, int) or light_id < 1:
        raise ValueError(f"Light id must be a positive integer, got {light_id!r}")
    return light_id


def light_path(token: str, light_id: int | None = None, state: bool = False) -> str:
    """Build the API path for a light.

    There are two kinds of request for a light: querying it with a GET to
    ``<token>/lights/<id>`` and controlling it with a PUT to
    ``<token>/lights/<id>/state``. Without a light id the path addresses the
    whole light collection.

    Args:
        token: Auth token (bridge username)
        light_id: Light index, or None for all lights
        state: If True, append '/state'
    """
    path = f"{token}/lights"
    if light_id is None:
        return path

    path = f"{path}/{check_light_id(light_id)}"
    if state:
        path += '/state'
    return path


def extract_errors(payload) -> list[dict]:
    """Return the bridge error objects in a payload.

    A payload counts as an error document when it is an object with an
    'error' key, or a non-empty list whose entries are all error objects.
    A per-field result list with at least one success is not an error.

    Returns:
        List of error dicts, empty if the payload is not an error document
    """
    if isinstance(payload, dict):
        if 'error' not in payload:
            return []
        error = payload['error']
        return [error if isinstance(error, dict) else {'description': str(error)}]

    if isinstance(payload, list) and payload:
        if all(isinstance(item, dict) and 'error' in item for item in payload):
            return [extract_errors(item)[0] for item in payload]

    return []


def build_light_state(on: bool | None = None, bri: int | None = None,
                      hue: int | None = None, sat: int | None = None,
                      ct: int | None = None) -> dict:
    """Build a light state fragment, leaving out anything not given.

    Setting brightness or colour also switches the light on unless 'on'
    was given explicitly.
    """
    state = {}
    if on is not None:
        state['on'] = on

    for key, value in (('bri', bri), ('hue', hue), ('sat', sat), ('ct', ct)):
        if value is not None:
            state[key] = value

    if state and 'on' not in state:
        state['on'] = True
    return state
