"""Library exceptions."""

from typing import Optional


class JoplinError(Exception):
    """Base pyjoplin error."""


class ConfigError(JoplinError):
    """Invalid configuration value."""


# ------------------------------- Transport -----------------------------------


class NetworkError(JoplinError):
    """The request never produced an HTTP response."""


class UnexpectedStatusError(JoplinError):
    """The service answered with a non-2xx status code."""

    def __init__(
        self, code: int, context: str = "", payload: Optional[object] = None
    ):
        message = f"Error {code}"
        if context:
            message = f"{message} in {context}"
        super().__init__(message)
        self.code = code
        self.context = context
        self.payload = payload


class DeserializationError(JoplinError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload


# ------------------------------- Discovery -----------------------------------


class NoServiceFoundError(JoplinError):
    """No port in the scanned range answered the liveness probe."""

    def __init__(self, message: str, last_error: Optional[Exception] = None):
        super().__init__(message)
        self.last_error = last_error


# ------------------------------ Authorization --------------------------------


class AuthorizationError(JoplinError):
    """Base class for handshake failures."""


class AuthorizationRejected(AuthorizationError):
    """The user declined the API token request."""


class AuthorizationTimeout(AuthorizationError):
    """The user did not answer the API token request in time."""


class AuthorizationCancelled(AuthorizationError):
    """The caller cancelled the wait for the user's answer."""


class ProtocolError(AuthorizationError):
    """The service sent a handshake response we do not understand."""


class TokenStoreError(JoplinError):
    """The token file could not be read or written."""


# --------------------------------- Notes -------------------------------------


class UnknownFormatError(JoplinError, ValueError):
    """Note format other than markdown or html."""


class InvalidFieldPairsError(JoplinError, ValueError):
    """Update arguments are not a sequence of field/value pairs."""


class PaginationLimitError(JoplinError):
    """The service kept reporting more pages past the configured limit."""
