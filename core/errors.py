"""Exceptions raised by the Hue bridge client."""


class HueError(Exception):
    """Base class for all Hue client errors."""


class RegistrationError(HueError):
    """Registration with the bridge failed.

    Usually means the link button was not pressed. The bridge's error
    object, if it sent one, is available as `error`.
    """

    def __init__(self, message: str = "Unable to register", error: dict | None = None):
        super().__init__(message)
        self.error = error


class MissingTokenError(HueError, ValueError):
    """An operation needed an auth token and none was available."""
