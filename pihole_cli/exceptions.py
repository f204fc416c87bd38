"""
Exceptions raised by the Pi-hole client.
"""

from typing import Optional


class PiholeError(Exception):
    """Base exception for all Pi-hole client errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(PiholeError):
    """Invalid or incomplete configuration."""


class ClientValidationError(PiholeError):
    """Client is missing a field required to talk to the appliance."""


class LoginError(PiholeError):
    """Authentication against /api/auth failed."""


class NotImplementedForTokenClientError(PiholeError):
    """Operation is not available when authenticating with an API token."""

    def __init__(self, operation: str):
        super().__init__(f"not implemented for token client: {operation}")
        self.operation = operation


class NotFoundError(PiholeError):
    """A record looked up by its key does not exist."""


class ValidationError(PiholeError):
    """Input rejected locally before any request is made."""


class ServiceTokenError(PiholeError):
    """Reverse-proxy access headers could not be attached to a request."""


class TokenRecordNotFoundError(PiholeError):
    """Lookup miss reported by the token-authenticated API."""


class APIError(PiholeError):
    """Request to the appliance failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class UnexpectedStatusError(APIError):
    """Appliance answered with something other than the documented status."""


class RecordParseError(APIError):
    """A delimited list entry did not split into exactly two fields."""

    def __init__(self, message: str, entry: str):
        super().__init__(f"{message}: {entry!r}")
        self.entry = entry


class ProtocolError(APIError):
    """Response body violates the appliance's contract."""
