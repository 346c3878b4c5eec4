"""
Error types raised by the Genius client.

Every failure surfaced to callers derives from ``GeniusError``. HTTP failures
carry the numeric status and raw body as fields; the human-readable message
is produced separately by ``__str__`` so callers can match on either.
"""

from typing import Optional


class GeniusError(Exception):
    """Base class for all Genius client errors."""
    pass


class MissingCredentialError(GeniusError):
    """Raised when no API token is set, found in the environment, or entered."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Access token is missing. Please set the 'GENIUS_API_TOKEN' environment variable."
        )


class MissingParameterError(GeniusError, ValueError):
    """Raised before any request when a required identifying input is absent."""

    def __init__(self, message: str, parameters: tuple = ()):
        super().__init__(message)
        self.parameters = parameters


class ConflictingParameterError(GeniusError, ValueError):
    """Raised before any request when mutually exclusive filters are both given."""

    def __init__(self, message: str, parameters: tuple = ()):
        super().__init__(message)
        self.parameters = parameters


class RequestFailedError(GeniusError):
    """
    Raised for any non-200 HTTP response.

    Attributes:
        status_code: HTTP status code returned by the server
        body: Raw response body text, verbatim
        path: API path that was requested (if known)
    """

    PREFIX = "Request failed with status"

    def __init__(self, status_code: int, body: str, path: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.path = path
        super().__init__(status_code, body)

    def __str__(self) -> str:
        return f"{self.PREFIX}: {self.status_code} - {self.body}"

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429


class NotFoundError(GeniusError, LookupError):
    """Raised when a search-based lookup produces no candidates."""
    pass


class InvalidSelectionError(GeniusError, ValueError):
    """Raised when an interactive choice is non-numeric or out of range."""
    pass
