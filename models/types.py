"""Type definitions for the Hue light client.

Query and control calls never raise for transport or bridge problems. They
return one of the result variants below so callers can tell the causes apart.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict


class AuthCredentials(TypedDict):
    """Stored credentials for a Hue Bridge."""
    bridge_address: str
    auth_token: str


@dataclass(frozen=True)
class Success:
    """The bridge answered with a usable JSON document."""
    payload: Any

    ok = True

    def payload_or_none(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class TransportError:
    """The request never produced a response (connection, timeout, HTTP status)."""
    message: str

    ok = False

    def payload_or_none(self) -> None:
        return None


@dataclass(frozen=True)
class ParseError:
    """The response body was not valid JSON."""
    message: str
    body: str = ''

    ok = False

    def payload_or_none(self) -> None:
        return None


@dataclass(frozen=True)
class BridgeError:
    """The bridge answered, but only with error objects."""
    errors: list[dict] = field(default_factory=list)
    payload: Any = None

    ok = False

    def payload_or_none(self) -> None:
        return None

    @property
    def descriptions(self) -> list[str]:
        """Human-readable descriptions of each bridge error."""
        return [e.get('description', 'Unknown error') for e in self.errors]


BridgeResult = Success | TransportError | ParseError | BridgeError
