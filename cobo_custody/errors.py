"""Exceptions raised by the Cobo custody client."""


class CoboError(Exception):
    """Base class for client errors."""


class ConfigError(CoboError):
    """Credentials or settings are missing or malformed."""


class SigningError(CoboError):
    """The API secret could not be used to sign a request."""


class ApiError(CoboError):
    """The API answered with a non-2xx status or a non-JSON body."""

    def __init__(self, message: str, status_code: int, payload=None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
