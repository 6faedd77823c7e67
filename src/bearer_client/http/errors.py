"""
Error types raised by the authenticated HTTP client.
Every failure surfaces to the immediate caller; nothing here is retried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from bearer_client.core.models import HttpResponse


class ClientError(Exception):
    """Base error for bearer_client."""


class TransportError(ClientError):
    """Raised when the network call cannot be completed (DNS, connect, TLS, I/O)."""


class HttpStatusError(ClientError):
    """Raised when a response carries a 4xx or 5xx status code."""

    def __init__(self, code: int, response: Optional["HttpResponse"] = None):
        super().__init__(f"Error Status Code - {code}.")
        self.code = code
        self.response = response


class SerializationError(ClientError):
    """Raised when the request payload cannot be encoded as JSON."""


class MalformedResponseError(ClientError):
    """Raised when the status line is missing or carries no numeric code."""


class TokenExtractionError(ClientError):
    """Raised when no bearer token can be derived from the auth response."""
