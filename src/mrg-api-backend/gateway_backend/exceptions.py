"""Exceptions raised by the gateway backend.

Each exception maps to a single HTTP response shape; the handlers that do the
mapping live in :mod:`gateway_backend.exception_handlers`.
"""

FOLDER_PATH_REQUIRED = "Folder path required"
PROVIDER_ERROR = "Cloudinary error"


class GatewayError(Exception):
    """Base class for errors surfaced to API clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(GatewayError):
    """The caller supplied an empty or missing folder path."""

    def __init__(self, message: str = FOLDER_PATH_REQUIRED) -> None:
        super().__init__(message)


class ProviderError(GatewayError):
    """A call to the media provider failed.

    ``message`` carries the upstream error text with credentials already
    redacted.
    """
