# pastebininit/utils/errors.py


class PastebinError(Exception):
    """Base class for every error raised by pastebininit."""


class ConfigurationError(PastebinError):
    """Missing or invalid input, detected before any request is sent."""


class TransportError(PastebinError):
    """The HTTP call itself failed (DNS, connection, timeout)."""


class ResponseError(PastebinError):
    """Pastebin answered, but not with what was asked for."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class APIError(ResponseError):
    """Pastebin answered but rejected the request."""


class UnexpectedResponseError(ResponseError):
    """Pastebin answered 200 with a body that is neither a key nor a URL."""
