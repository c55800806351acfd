"""Client for the Philips Hue Bridge local HTTP/JSON API (v1).

`Bridge` knows only the bridge address and can register a new application.
Registration returns a `BridgeClient`, which holds the issued auth token and
is the only type that can read or change lights.

Every call makes exactly one HTTP request with its own connection. Query and
control calls return a result value (see models.types) instead of raising.
"""

import json
import logging
from dataclasses import dataclass

import requests

from core.errors import MissingTokenError, RegistrationError
from models.types import BridgeError, BridgeResult, ParseError, Success, TransportError
from models.utils import extract_errors, generate_username, light_path, normalise_bridge_address

logger = logging.getLogger(__name__)

# Device type sent when registering
DEVICE_TYPE = 'HueHubAndroid'


def _communicate(address: str, method: str, path: str | None = None, data=None,
                 timeout: float | None = None) -> Success | TransportError | ParseError:
    """Send one request to the bridge and parse the JSON reply.

    Args:
        address: Bridge base address
        method: HTTP method
        path: Path below /api/, or None for the API root
        data: JSON-serialisable request body, or None for no body
        timeout: Seconds to wait, or None for the transport default

    Returns:
        Success with the parsed payload, TransportError or ParseError
    """
    url = f"{address}/api/{path or ''}"
    logger.debug("%s %s", method, url)

    try:
        # requests.request opens and closes its own session
        response = requests.request(method, url, json=data, timeout=timeout)
        response.raise_for_status()
        body = response.content.decode('utf-8')
    except requests.exceptions.RequestException as e:
        logger.error("Could not communicate with %s: %s", address, e)
        return TransportError(str(e))
    except UnicodeDecodeError as e:
        logger.error("Response from %s is not valid UTF-8: %s", address, e)
        return ParseError(str(e))

    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.error("Unable to convert response from %s to JSON: %s", address, e)
        return ParseError(str(e), body)

    return Success(payload)


@dataclass(frozen=True)
class Bridge:
    """A Hue bridge that has not been authenticated against."""
    address: str
    timeout: float | None = None
    device_type: str = DEVICE_TYPE

    def __post_init__(self):
        object.__setattr__(self, 'address', normalise_bridge_address(self.address))

    def register(self) -> 'BridgeClient':
        """Register this application with the bridge.

        Posts a random candidate username to the API root. The bridge only
        accepts this shortly after its link button has been pressed.

        Returns:
            A BridgeClient holding the username the bridge issued

        Raises:
            RegistrationError: If there was no usable response or the bridge
                returned an error
        """
        body = {'username': generate_username(), 'devicetype': self.device_type}
        result = _communicate(self.address, 'POST', None, body, self.timeout)
        if not isinstance(result, Success):
            raise RegistrationError()

        response = result.payload
        # Real bridges wrap the answer in a one-element array
        if isinstance(response, list) and len(response) == 1:
            response = response[0]

        if not isinstance(response, dict):
            raise RegistrationError()

        if 'error' in response:
            error = response['error']
            logger.warning("Bridge %s refused registration: %s", self.address, error)
            raise RegistrationError(error=error if isinstance(error, dict) else None)

        try:
            token = response['success']['username']
        except (KeyError, TypeError) as e:
            raise RegistrationError() from e

        if not token or not isinstance(token, str):
            raise RegistrationError()

        logger.info("Registered with bridge %s", self.address)
        return self.with_token(token)

    def with_token(self, auth_token: str) -> 'BridgeClient':
        """Return a client for this bridge using an existing token."""
        return BridgeClient(self.address, auth_token, timeout=self.timeout)


@dataclass(frozen=True)
class BridgeClient:
    """An authenticated client for one Hue bridge.

    Raises MissingTokenError on construction if auth_token is empty.
    """
    address: str
    auth_token: str
    timeout: float | None = None

    def __post_init__(self):
        object.__setattr__(self, 'address', normalise_bridge_address(self.address))
        if not self.auth_token or not isinstance(self.auth_token, str):
            raise MissingTokenError("An auth token is required; register with the bridge first")

    def __repr__(self):
        return f"BridgeClient(address={self.address!r})"

    @property
    def bridge(self) -> Bridge:
        """The unauthenticated Bridge for this address and timeout.

        A client does not remember the device type it registered with, so
        the returned Bridge uses the default DEVICE_TYPE.
        """
        return Bridge(self.address, timeout=self.timeout)

    def _request(self, method: str, path: str, data=None) -> BridgeResult:
        result = _communicate(self.address, method, path, data, self.timeout)
        if not isinstance(result, Success):
            return result

        errors = extract_errors(result.payload)
        if errors:
            logger.warning("Bridge %s returned errors for %s: %s", self.address, method, errors)
            return BridgeError(errors, result.payload)
        return result

    def get_lights(self) -> BridgeResult:
        """Get all lights known to the bridge, keyed by light id."""
        return self._request('GET', light_path(self.auth_token))

    def get_light_state(self, light_id: int) -> BridgeResult:
        """Get the current state of a light.

        Args:
            light_id: Light index assigned by the bridge

        Returns:
            Success with the light document, or a failure result
        """
        return self._request('GET', light_path(self.auth_token, light_id))

    def set_light_state(self, light_id: int, new_state: dict) -> BridgeResult:
        """Set the state of a light.

        The state is sent as given; its keys are defined by the bridge
        firmware (on, bri, hue, sat, ct, ...).

        Returns:
            Success with the bridge's per-field result list, or a failure result
        """
        return self._request('PUT', light_path(self.auth_token, light_id, state=True), new_state)
